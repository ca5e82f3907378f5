"""
localization_delegate.py

Connects the GUI to the translation store.

The delegate declares which locales the application serves, picks one for a
requested locale and loads it. Views subscribe to be told after a switch.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Callable, Iterable, Mapping, Optional

from core.i18n.locale import Locale
from core.i18n.locale_events import LocaleChangeEvent
from core.i18n.locale_resolver import resolve_locale
from core.i18n.translation_store import TranslationStore
from core.logging.logic.logger import Logger, logger as app_logger

SUPPORTED_LOCALES: tuple[Locale, ...] = (Locale("en", "US"), Locale("es", "ES"))

LocaleListener = Callable[[LocaleChangeEvent], None]


class LocalizationDelegate:
    """Declares supported locales and loads the resolved one into the store."""

    def __init__(
        self,
        store: TranslationStore,
        supported_locales: Iterable[Locale] = SUPPORTED_LOCALES,
        *,
        event_logger: Optional[Logger] = None,
    ) -> None:
        self.store = store
        self._logger = event_logger if event_logger is not None else app_logger
        self.supported_locales: tuple[Locale, ...] = tuple(supported_locales)
        if not self.supported_locales:
            raise ValueError("at least one supported locale is required")
        self._listeners: list[LocaleListener] = []

    def is_supported(self, locale: Locale) -> bool:
        return any(s.language_code == locale.language_code for s in self.supported_locales)

    def resolve(self, requested: Optional[Locale]) -> Locale:
        return resolve_locale(requested, self.supported_locales)

    def load(self, locale: Locale, *, reason: str = "load") -> Mapping[str, str]:
        """Load *locale* into the store and notify listeners. LoadError propagates."""
        old = self.store.locale
        mapping = self.store.load(locale)
        if old != locale:
            self._logger.log("Locale", "Changed", reference_id=locale.tag,
                             message=f"{old or '-'} -> {locale} ({reason})")
        event = LocaleChangeEvent(
            old_locale=old,
            new_locale=locale,
            reason=reason,
            ts_utc=datetime.now(timezone.utc),
        )
        for listener in list(self._listeners):
            listener(event)
        return mapping

    # ------------------------------------------------------------------ #
    # Observers                                                          #
    # ------------------------------------------------------------------ #
    def subscribe(self, listener: LocaleListener) -> None:
        if listener not in self._listeners:
            self._listeners.append(listener)

    def unsubscribe(self, listener: LocaleListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)
