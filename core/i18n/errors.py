"""Localization exceptions."""
from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from core.i18n.locale import Locale


class LocalizationError(Exception):
    """Base exception for the localization core."""


class LoadError(LocalizationError):
    """Raised when the translation resource of a locale is missing or malformed."""

    def __init__(self, message: str, *, locale: "Locale", path: Optional[Path] = None) -> None:
        super().__init__(message)
        self.locale = locale
        self.path = path
