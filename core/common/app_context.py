# core/common/app_context.py
"""
Global runtime context & service registry for the Localization Demo.

IMPORTANT ARCHITECTURE RULE:
- ConfigService is the SINGLE source of truth for paths and locale settings.
- Nothing is loaded at import time; call AppContext.init_localization() once
  during startup. Views receive AppContext.text via their constructor.
"""

from __future__ import annotations

from typing import Mapping, Optional

from core.config.config_service import ConfigService, config_service
from core.i18n.locale import Locale, parse_locale_list
from core.i18n.locale_resolver import system_locale
from core.i18n.localization_delegate import SUPPORTED_LOCALES, LocalizationDelegate
from core.i18n.translation_store import TranslationStore, missing_marker
from core.logging.logic.logger import Logger, logger


class AppContext:
    """Central runtime context (no GUI state)."""

    config: ConfigService = config_service
    logger: Logger = logger

    translation_store: Optional[TranslationStore] = None
    localization: Optional[LocalizationDelegate] = None

    # ---------- Service registry for DI -------------------------------
    services: dict[str, object] = {
        "config": config_service,
        "logger": logger,
    }

    @classmethod
    def register_service(cls, name: str, instance: object) -> None:
        cls.services[name] = instance

    # ---------- Localization ------------------------------------------
    @classmethod
    def init_localization(
        cls,
        *,
        config: Optional[ConfigService] = None,
        event_logger: Optional[Logger] = None,
    ) -> LocalizationDelegate:
        """
        Build store + delegate from the configuration. Does not load anything;
        use :meth:`load_initial_locale` for the first load.
        """
        cfg = (config or cls.config).localization
        log = event_logger or cls.logger
        supported = parse_locale_list(cfg.supported_locales) or SUPPORTED_LOCALES

        store = TranslationStore(
            cfg.translations_dir,
            track_missing_keys=cfg.track_missing_keys,
            event_logger=log,
        )
        delegate = LocalizationDelegate(store, supported, event_logger=log)

        cls.translation_store = store
        cls.localization = delegate
        cls.register_service("translation_store", store)
        cls.register_service("localization", delegate)
        return delegate

    @classmethod
    def requested_locale(cls, config: Optional[ConfigService] = None) -> Optional[Locale]:
        """Configured locale if set, otherwise the system locale."""
        tag = (config or cls.config).localization.requested_locale.strip()
        if tag:
            return Locale.parse(tag)
        return system_locale()

    @classmethod
    def load_initial_locale(cls, requested: Optional[Locale] = None) -> Locale:
        """Resolve *requested* (or the configured/system locale) and load it."""
        delegate = cls._require_delegate()
        if requested is None:
            requested = cls.requested_locale()
        resolved = delegate.resolve(requested)
        delegate.load(resolved, reason="startup")
        return resolved

    @classmethod
    def change_locale(cls, locale: Locale) -> Mapping[str, str]:
        """Switch language at runtime. LoadError propagates, old mapping stays."""
        delegate = cls._require_delegate()
        return delegate.load(delegate.resolve(locale), reason="user")

    @classmethod
    def text(cls, key: str) -> str:
        if cls.translation_store is None:
            return missing_marker(key)
        return cls.translation_store.text(key)

    @classmethod
    def reset(cls) -> None:
        """Drop localization services (used by tests)."""
        cls.translation_store = None
        cls.localization = None
        cls.services.pop("translation_store", None)
        cls.services.pop("localization", None)

    @classmethod
    def _require_delegate(cls) -> LocalizationDelegate:
        if cls.localization is None:
            raise RuntimeError("AppContext.init_localization() has not been called")
        return cls.localization
