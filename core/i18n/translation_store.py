import json
import logging
import threading
from pathlib import Path
from types import MappingProxyType
from typing import Mapping, Optional

from core.i18n.errors import LoadError
from core.i18n.locale import Locale
from core.logging.logic.logger import Logger, logger as app_logger

log = logging.getLogger(__name__)

FILE_PREFIX = "localization_"
FILE_SUFFIX = ".json"

_EMPTY: Mapping[str, str] = MappingProxyType({})


class TranslationStore:
    """
    Hält genau ein aktives Mapping key -> Text für die aktuelle Sprache.

    Ein Load ersetzt das Mapping vollständig (kein Merge). Leser greifen auf
    eine einzige Referenz zu und sehen daher immer das alte oder das neue
    Mapping, nie einen Zwischenstand.
    """

    def __init__(
        self,
        translations_dir: Path,
        *,
        track_missing_keys: bool = True,
        event_logger: Optional[Logger] = None,
    ) -> None:
        self.translations_dir = Path(translations_dir)
        self.track_missing_keys = track_missing_keys
        self._logger = event_logger if event_logger is not None else app_logger
        self._write_lock = threading.RLock()
        self._state: tuple[Optional[Locale], Mapping[str, str]] = (None, _EMPTY)
        self._missing_keys_logged: set[tuple[str, str]] = set()

    # ------------------------------------------------------------------ #
    # Properties                                                         #
    # ------------------------------------------------------------------ #
    @property
    def locale(self) -> Optional[Locale]:
        return self._state[0]

    @property
    def mapping(self) -> Mapping[str, str]:
        return self._state[1]

    def resource_path(self, locale: Locale) -> Path:
        return self.translations_dir / f"{FILE_PREFIX}{locale.language_code}{FILE_SUFFIX}"

    def available_languages(self) -> list[str]:
        """Language codes for which a resource file exists, sorted."""
        if not self.translations_dir.is_dir():
            return []
        return sorted(
            p.name[len(FILE_PREFIX):-len(FILE_SUFFIX)]
            for p in self.translations_dir.glob(f"{FILE_PREFIX}*{FILE_SUFFIX}")
        )

    # ------------------------------------------------------------------ #
    # Load                                                               #
    # ------------------------------------------------------------------ #
    def load(self, locale: Locale) -> Mapping[str, str]:
        """
        Lädt die Übersetzungsdatei für *locale* und ersetzt das aktive Mapping.

        :raises LoadError: Datei fehlt oder ist kein JSON-Objekt aus Strings
        """
        path = self.resource_path(locale)
        with self._write_lock:
            try:
                mapping = read_catalog(path, locale)
            except LoadError as exc:
                self._logger.log(
                    "Locale", "LoadFailed", level="ERROR",
                    reference_id=locale.tag, message=str(exc),
                )
                raise

            self._state = (locale, mapping)

        log.debug("Loaded %d keys for %s from %s", len(mapping), locale, path)
        self._logger.log(
            "Locale", "Loaded",
            reference_id=locale.tag, message=f"{len(mapping)} keys from {path.name}",
        )
        return mapping

    # ------------------------------------------------------------------ #
    # Lookup                                                             #
    # ------------------------------------------------------------------ #
    def text(self, key: str) -> str:
        """Gibt den Text zu *key* zurück oder ``"<key> not found"``."""
        locale, mapping = self._state
        value = mapping.get(key)
        if value is not None:
            return value

        lang = locale.language_code if locale else ""
        if self.track_missing_keys and (key, lang) not in self._missing_keys_logged:
            self._missing_keys_logged.add((key, lang))
            self._logger.log(
                "Locale", "MissingKey", level="WARNING",
                reference_id=locale.tag if locale else None,
                message=f"Missing translation key '{key}' (lang={lang or '-'})",
            )
        return missing_marker(key)


def missing_marker(key: str) -> str:
    return f"{key} not found"


def read_catalog(path: Path, locale: Locale) -> Mapping[str, str]:
    """Parse one catalog file into a read-only mapping."""
    try:
        with open(path, encoding="utf-8") as fh:
            data = json.load(fh)
    except FileNotFoundError as exc:
        raise LoadError(f"No translation file for '{locale}': {path}", locale=locale, path=path) from exc
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise LoadError(f"Cannot read translation file {path}: {exc}", locale=locale, path=path) from exc

    if not isinstance(data, dict):
        raise LoadError(f"Translation file {path} must contain a JSON object", locale=locale, path=path)
    for key, value in data.items():
        if not isinstance(value, str):
            raise LoadError(
                f"Translation file {path}: value of '{key}' is not a string",
                locale=locale, path=path,
            )
    return MappingProxyType(dict(data))
