# Copyright (c) 2026 Nenad Vasic. All rights reserved.
# Licensed under the Business Source License 1.1 (BSL-1.1)
# See LICENSE file in the project root for full license text.

"""
Check-in Schema Registry: Pydantic models for records in and results out.

Records (CheckIn and friends) are owned by the check-in store; the engine
only reads them. Derived models are rebuilt on every call.

Usage:
    from analytics.schemas import coerce_check_ins, CheckIn

    # Validate raw store rows
    check_ins = coerce_check_ins(rows)

    # Serialize a report
    path.write_text(report.model_dump_json(indent=2))

All models use extra="allow" so store rows with unknown fields
won't break; we just won't validate those extra fields.
"""

from datetime import datetime
from typing import Dict, List, Optional, Any, Literal, Iterable, Union
from pydantic import AliasChoices, BaseModel, Field, ValidationError


# ============================================================================
# Base config: all models inherit this
# ============================================================================

class AnalyticsModel(BaseModel):
    """Base for all check-in schemas. Allows extra fields for forward compat."""
    model_config = {"extra": "allow", "populate_by_name": True}


# ============================================================================
# Custom exceptions
# ============================================================================

class AnalyticsError(Exception):
    """Base class for every error the engine raises."""

class MalformedRecordError(AnalyticsError):
    """Raised when a check-in record from the store fails validation."""

    def __init__(self, message: str, index: Optional[int] = None):
        super().__init__(message)
        self.index = index

class UnknownWindowError(AnalyticsError, ValueError):
    """Raised for a window specifier outside 7d / 30d / 90d."""

class UnknownCatalogError(AnalyticsError, ValueError):
    """Raised when a strategy catalog name isn't registered."""


# ============================================================================
# RECORDS (store-owned, read-only)
# ============================================================================

class EmotionEntry(AnalyticsModel):
    """One emotion picked in a check-in. Taxonomy fields are opaque strings."""
    name: str = Field(min_length=1)
    intensity: int = Field(ge=1, le=10)
    category: Optional[str] = None
    subcategory: Optional[str] = None
    definition: Optional[str] = None


class ReflectionResponse(AnalyticsModel):
    """Answer to one guided-reflection prompt."""
    category: Optional[str] = None
    prompt: Optional[str] = ""
    response: Optional[str] = ""
    timestamp: Optional[datetime] = None


class ReflectionData(AnalyticsModel):
    """Payload saved by the guided reflection step."""
    responses: Optional[List[ReflectionResponse]] = None
    emotions: Optional[List[Any]] = None
    completed_at: Optional[datetime] = Field(None, alias="completedAt")


class CheckInMetadata(AnalyticsModel):
    enhanced_version: Optional[bool] = Field(False, alias="enhancedVersion")
    reflection_data: Optional[ReflectionData] = Field(None, alias="reflectionData")


class CheckIn(AnalyticsModel):
    """One emotional snapshot as stored: emotions + optional reflection + metadata."""
    id: Any
    created_at: datetime = Field(validation_alias=AliasChoices("created_at", "createdAt"))
    emotions: List[EmotionEntry] = Field(default_factory=list)
    reflection: Optional[str] = None
    metadata: Optional[CheckInMetadata] = None

    @property
    def trigger_responses(self) -> List[ReflectionResponse]:
        """Reflection responses tagged as triggers. Empty when any level is missing."""
        if self.metadata is None or self.metadata.reflection_data is None:
            return []
        responses = self.metadata.reflection_data.responses or []
        return [r for r in responses if r.category == "trigger"]

    @property
    def is_enhanced(self) -> bool:
        """Saved through the enhanced flow AND carrying reflection data."""
        return bool(
            self.metadata is not None
            and self.metadata.enhanced_version
            and self.metadata.reflection_data is not None
        )


# ============================================================================
# DERIVED (engine-owned)
# ============================================================================

class EmotionFrequency(AnalyticsModel):
    name: str
    count: int
    avg_intensity: float
    percentage: int


class WeeklyBucket(AnalyticsModel):
    day: str
    count: int = 0
    avg_intensity: float = 0


class ProgressMetrics(AnalyticsModel):
    """Engagement and vocabulary metrics for a window of check-ins."""
    total_check_ins: int
    enhanced_check_ins: int
    unique_emotions: int
    emotion_categories: int
    total_reflections: int
    granularity_score: float
    consistency_score: float
    enhanced_usage_percent: int


InsightType = Literal["frequency", "growth", "trigger", "pattern", "intensity"]


class Insight(AnalyticsModel):
    type: InsightType
    text: str


class EmotionSuggestion(AnalyticsModel):
    """Strategies for one of the most frequent emotions."""
    type: Literal["emotion"] = "emotion"
    emotion: str
    category: str
    immediate: List[str]
    long_term: List[str]
    frequency: int


class TriggerSuggestion(AnalyticsModel):
    """Strategies for one of the most common triggers."""
    type: Literal["trigger"] = "trigger"
    trigger: str
    strategies: List[str]
    frequency: int


Suggestion = Union[EmotionSuggestion, TriggerSuggestion]


class AnalyticsReport(AnalyticsModel):
    """Everything the dashboard needs for one window."""
    window: str
    now: datetime
    total_check_ins: int
    filtered_check_ins: int
    emotion_frequency: List[EmotionFrequency] = Field(default_factory=list)
    weekly_pattern: List[WeeklyBucket] = Field(default_factory=list)
    trigger_patterns: Dict[str, int] = Field(default_factory=dict)
    progress: Optional[ProgressMetrics] = None
    insights: List[Insight] = Field(default_factory=list)
    suggestions: List[Suggestion] = Field(default_factory=list)

    @property
    def has_history(self) -> bool:
        return self.total_check_ins > 0

    @property
    def needs_more_data(self) -> bool:
        """No strategy matched. The consumer should prompt to keep checking in."""
        return not self.suggestions


# ============================================================================
# UTILITY: record validation
# ============================================================================

def coerce_check_in(record: Any, index: Optional[int] = None) -> CheckIn:
    """Validate one store row (dict or CheckIn) into a CheckIn."""
    if isinstance(record, CheckIn):
        return record
    try:
        return CheckIn.model_validate(record)
    except ValidationError as e:
        where = f"record {index}" if index is not None else "record"
        first = e.errors()[0] if e.errors() else {}
        loc = ".".join(str(part) for part in first.get("loc", ()))
        detail = f"{loc}: {first.get('msg', str(e))}" if loc else first.get("msg", str(e))
        raise MalformedRecordError(f"Malformed check-in {where}: {detail}", index=index) from e


def coerce_check_ins(records: Iterable[Any]) -> List[CheckIn]:
    """Validate a collection of store rows. Fails on the first bad record."""
    return [coerce_check_in(record, index=i) for i, record in enumerate(records)]


# ============================================================================
# UTILITY: load/save helpers for exported snapshots and reports
# ============================================================================

import json
import os
from pathlib import Path


def load_check_ins(path: Path) -> List[CheckIn]:
    """
    Load an exported check-in snapshot (JSON array) and validate each row.

    Unlike the aggregators, a missing or corrupt file is an error here:
    an empty report built from a typo'd path would look like "no data yet".
    """
    try:
        data = json.loads(Path(path).read_text())
    except json.JSONDecodeError as e:
        raise MalformedRecordError(f"{path} is not valid JSON: {e}") from e
    if isinstance(data, dict) and isinstance(data.get("checkins"), list):
        data = data["checkins"]
    if not isinstance(data, list):
        raise MalformedRecordError(f"{path} must hold a JSON array of check-ins")
    return coerce_check_ins(data)


def _atomic_rename(tmp: Path, dest: Path):
    """Flush, fsync, then rename for a crash-safe atomic write."""
    fd = os.open(str(tmp), os.O_RDONLY)
    try:
        os.fsync(fd)
    finally:
        os.close(fd)
    os.replace(str(tmp), str(dest))


def save_validated(path: Path, model: AnalyticsModel, atomic: bool = True):
    """
    Save a model to a JSON file.

    Args:
        path: Destination path
        model: Pydantic model instance
        atomic: If True, write to .tmp then rename (default: True)
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    content = model.model_dump_json(indent=2, exclude_none=False)

    if atomic:
        tmp = path.with_suffix(path.suffix + ".tmp")
        tmp.write_text(content)
        _atomic_rename(tmp, path)
    else:
        path.write_text(content)
