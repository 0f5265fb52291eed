# Copyright (c) 2026 Nenad Vasic. All rights reserved.
# Licensed under the Business Source License 1.1 (BSL-1.1)
# See LICENSE file in the project root for full license text.

"""
Check-in Catalog: static rule tables for the analytics engine.

Windows, weekday order, trigger keywords, the emotion → family table and the
strategy catalogs. Loaded once at import, never mutated. Aggregators take
these as defaults so tests (and future catalogs) can pass their own.

Two strategy catalogs ship:
  - "soothing": the default, longer-form wording
  - "coping":   shorter wording
Same families, same trigger keys. Only the strings differ.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

from analytics.schemas import UnknownCatalogError, UnknownWindowError


# ============================================================================
# WINDOWS
# ============================================================================

WINDOW_DAYS: Mapping[str, int] = MappingProxyType({"7d": 7, "30d": 30, "90d": 90})
DEFAULT_WINDOW = "7d"

WINDOW_LABELS: Mapping[str, str] = MappingProxyType({
    "7d": "7 days", "30d": "30 days", "90d": "90 days",
})

# Sunday-first, matches the dashboard grid
WEEKDAYS: Tuple[str, ...] = (
    "Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday",
)


def window_days(window: str) -> int:
    """Number of days for a window specifier ("7d", "30d", "90d")."""
    try:
        return WINDOW_DAYS[window]
    except KeyError:
        raise UnknownWindowError(
            f"Unknown window {window!r}. Expected one of: {', '.join(WINDOW_DAYS)}"
        ) from None


def window_label(window: str) -> str:
    window_days(window)
    return WINDOW_LABELS[window]


# ============================================================================
# TRIGGERS
# ============================================================================

# Order matters: tallies are built in this order and ties resolve to it.
TRIGGER_KEYWORDS: Tuple[str, ...] = (
    "work", "family", "money", "health", "relationship",
    "time", "stress", "sleep", "social", "change",
)


# ============================================================================
# EMOTION FAMILIES: lowercase emotion name → family
# ============================================================================

FAMILY_MEMBERS: Mapping[str, frozenset] = MappingProxyType({
    "anger": frozenset({
        "angry", "mad", "furious", "irritated", "frustrated",
        "annoyed", "resentful", "enraged", "livid",
    }),
    "sadness": frozenset({
        "sad", "disappointed", "down", "melancholic", "dejected",
        "grief", "despair", "anguish", "wistful",
    }),
    "fear": frozenset({
        "afraid", "anxious", "worried", "concerned", "uneasy",
        "nervous", "terrified", "panic", "petrified",
    }),
    "joy": frozenset({
        "happy", "cheerful", "delighted", "content", "pleased",
        "satisfied", "ecstatic", "euphoric", "elated",
    }),
})

# Checked in this order; first hit wins
FAMILY_ORDER: Tuple[str, ...] = ("anger", "sadness", "fear", "joy")


def emotion_family(name: str) -> Optional[str]:
    """Map an emotion name to its family, case-insensitively. None if unmapped."""
    lowered = name.lower()
    for family in FAMILY_ORDER:
        if lowered in FAMILY_MEMBERS[family]:
            return family
    return None


# ============================================================================
# STRATEGY CATALOGS
# ============================================================================

@dataclass(frozen=True)
class FamilyStrategies:
    immediate: Tuple[str, ...]
    long_term: Tuple[str, ...]


@dataclass(frozen=True)
class StrategyCatalog:
    """Family strategies plus per-trigger strategy lists."""
    name: str
    families: Mapping[str, FamilyStrategies]
    triggers: Mapping[str, Tuple[str, ...]]


SOOTHING_CATALOG = StrategyCatalog(
    name="soothing",
    families=MappingProxyType({
        "anger": FamilyStrategies(
            immediate=(
                "Take 10 deep breaths, counting slowly on each exhale",
                "Step away from the situation for 5-10 minutes",
                "Try progressive muscle relaxation: tense and release each muscle group",
                "Use the 'STOP' technique: Stop, Take a breath, Observe, Proceed mindfully",
            ),
            long_term=(
                "Practice regular physical exercise (walking, swimming, or yoga)",
                "Keep an emotion journal to identify triggers and patterns",
                "Learn assertive communication techniques through practice",
                "Establish daily mindfulness or meditation practice",
            ),
        ),
        "sadness": FamilyStrategies(
            immediate=(
                "Allow yourself to feel the emotion without judgment",
                "Reach out to a trusted friend or family member for support",
                "Engage in gentle self-care (warm bath, soft music, favorite tea)",
                "Practice self-compassion with kind, understanding self-talk",
            ),
            long_term=(
                "Establish a daily routine that includes one enjoyable activity",
                "Build and maintain supportive social connections",
                "Practice gratitude by writing down three positive things daily",
                "Consider professional counseling for persistent sadness",
            ),
        ),
        "fear": FamilyStrategies(
            immediate=(
                "Use 5-4-3-2-1 grounding: name 5 things you see, 4 you hear, "
                "3 you touch, 2 you smell, 1 you taste",
                "Practice box breathing: inhale 4 counts, hold 4, exhale 4, hold 4",
                "Challenge anxious thoughts by asking 'What evidence supports this worry?'",
                "Focus on actions within your control in this moment",
            ),
            long_term=(
                "Practice daily mindfulness meditation (even 5-10 minutes helps)",
                "Gradually face feared situations in small, manageable steps",
                "Develop a strong support network of understanding people",
                "Learn cognitive behavioral techniques for thought management",
            ),
        ),
        "joy": FamilyStrategies(
            immediate=(
                "Take a moment to fully experience and appreciate this feeling",
                "Share your positive experience with someone you care about",
                "Express gratitude for what brought you this joy",
                "Create a mental or physical snapshot to remember this moment",
            ),
            long_term=(
                "Keep a joy journal to track and remember positive experiences",
                "Schedule regular activities that consistently bring you happiness",
                "Practice random acts of kindness to boost well-being",
                "Build daily habits that support your mental health and joy",
            ),
        ),
    }),
    triggers=MappingProxyType({
        "work": (
            "Set specific times for checking work emails and stick to them",
            "Use time management techniques like the Pomodoro method",
            "Take 5-10 minute breaks every hour to reset your mind",
            "Practice clear, direct communication about your needs and boundaries",
        ),
        "family": (
            "Practice active listening by reflecting back what you hear",
            "Set healthy boundaries using 'I' statements about your needs",
            "Focus on your own responses rather than trying to change others",
            "Take breaks from family interactions when feeling overwhelmed",
        ),
        "money": (
            "Create a simple budget and review it weekly",
            "Practice distinguishing between needs and wants before purchases",
            "Focus on what you can control: your spending and saving habits",
            "Express gratitude for what you currently have",
        ),
        "health": (
            "Focus on healthy habits you can control: sleep, nutrition, movement",
            "Seek appropriate medical care when needed without delay",
            "Practice stress-reduction techniques like deep breathing or meditation",
            "Build a support network for health challenges",
        ),
        "relationship": (
            "Practice expressing your feelings using 'I' statements",
            "Focus on your own personal growth and self-care",
            "Set clear, kind boundaries about your needs",
            "Take responsibility only for your own actions and responses",
        ),
    }),
)


COPING_CATALOG = StrategyCatalog(
    name="coping",
    families=MappingProxyType({
        "anger": FamilyStrategies(
            immediate=(
                "Take 10 deep breaths before responding",
                "Step away from the situation for 5-10 minutes",
                "Try progressive muscle relaxation",
                "Use the 'STOP' technique: Stop, Take a breath, Observe, Proceed mindfully",
            ),
            long_term=(
                "Practice regular exercise to manage stress",
                "Keep an anger journal to identify patterns",
                "Learn assertive communication techniques",
                "Consider anger management counseling",
            ),
        ),
        "sadness": FamilyStrategies(
            immediate=(
                "Allow yourself to feel the emotion without judgment",
                "Reach out to a trusted friend or family member",
                "Engage in gentle self-care activities",
                "Practice self-compassion and kind self-talk",
            ),
            long_term=(
                "Establish a daily routine that includes enjoyable activities",
                "Consider counseling or therapy for persistent sadness",
                "Build and maintain supportive relationships",
                "Practice gratitude journaling",
            ),
        ),
        "fear": FamilyStrategies(
            immediate=(
                "Use grounding techniques: 5-4-3-2-1 (5 things you see, 4 you hear, etc.)",
                "Practice box breathing: 4 counts in, hold 4, out 4, hold 4",
                "Challenge anxious thoughts with evidence",
                "Focus on what you can control in the situation",
            ),
            long_term=(
                "Practice regular mindfulness or meditation",
                "Gradually expose yourself to feared situations",
                "Develop a strong support network",
                "Consider cognitive behavioral therapy (CBT)",
            ),
        ),
        "joy": FamilyStrategies(
            immediate=(
                "Savor the moment mindfully",
                "Share your joy with others",
                "Express gratitude for the positive experience",
                "Take a mental snapshot to remember later",
            ),
            long_term=(
                "Keep a joy journal to track positive experiences",
                "Plan regular activities that bring you happiness",
                "Practice acts of kindness to boost well-being",
                "Build habits that support your mental health",
            ),
        ),
    }),
    triggers=MappingProxyType({
        "work": (
            "Set clear boundaries between work and personal time",
            "Practice time management and prioritization",
            "Take regular breaks throughout the day",
            "Communicate needs clearly with supervisors",
        ),
        "family": (
            "Practice active listening in conversations",
            "Set healthy boundaries with family members",
            "Focus on what you can control in relationships",
            "Consider family counseling for persistent issues",
        ),
        "money": (
            "Create a realistic budget and stick to it",
            "Focus on needs vs. wants when making decisions",
            "Seek financial counseling if needed",
            "Practice gratitude for what you have",
        ),
        "health": (
            "Focus on healthy habits within your control",
            "Seek appropriate medical care when needed",
            "Practice stress reduction techniques",
            "Build a support network for health challenges",
        ),
        "relationship": (
            "Practice open and honest communication",
            "Focus on your own growth and well-being",
            "Set healthy boundaries in relationships",
            "Consider couples or relationship counseling",
        ),
    }),
)


CATALOGS: Mapping[str, StrategyCatalog] = MappingProxyType({
    SOOTHING_CATALOG.name: SOOTHING_CATALOG,
    COPING_CATALOG.name: COPING_CATALOG,
})
DEFAULT_CATALOG = SOOTHING_CATALOG.name


def get_catalog(name: str) -> StrategyCatalog:
    """Look up a strategy catalog by name."""
    try:
        return CATALOGS[name]
    except KeyError:
        raise UnknownCatalogError(
            f"Unknown strategy catalog {name!r}. Expected one of: {', '.join(CATALOGS)}"
        ) from None
