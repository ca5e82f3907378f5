"""
core/i18n/locale_events.py

Event object for locale changes.

The LocalizationDelegate emits one event after every successful load so that
views can rebuild their texts without importing the store directly.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from core.i18n.locale import Locale


@dataclass(frozen=True, slots=True)
class LocaleChangeEvent:
    """Represents a completed locale switch."""

    old_locale: Optional[Locale]
    new_locale: Locale
    reason: str
    ts_utc: datetime
