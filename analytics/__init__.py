# Copyright (c) 2026 Nenad Vasic. All rights reserved.
# Licensed under the Business Source License 1.1 (BSL-1.1)
# See LICENSE file in the project root for full license text.

"""Check-in analytics: emotion statistics, patterns, insights and strategies."""
from .engine import analyze
from .schemas import (
    AnalyticsError, AnalyticsReport, CheckIn, MalformedRecordError,
    UnknownCatalogError, UnknownWindowError, coerce_check_ins,
)
