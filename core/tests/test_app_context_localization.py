"""
core/tests/test_app_context_localization.py

AppContext wiring: explicit init, initial load, runtime switch and lookup.
"""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path

from core.common.app_context import AppContext
from core.config.config_service import ConfigService
from core.i18n.errors import LoadError
from core.i18n.locale import Locale

TRANSLATIONS = Path(__file__).resolve().parents[1] / "i18n" / "translations"


class RecordingLogger:
    def __init__(self) -> None:
        self.calls: list[tuple[str, str, dict]] = []

    def log(self, feature: str, event: str, **kwargs) -> None:
        self.calls.append((feature, event, kwargs))


class TestAppContextLocalization(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        tmp = Path(self._tmp.name)
        machine = tmp / "config.ini"
        machine.write_text(
            "[Localization]\n"
            f"translations_dir = {TRANSLATIONS.as_posix()}\n"
            "supported_locales = en_US,es_ES\n"
            "requested_locale = es_MX\n",
            encoding="utf-8",
        )
        self.config = ConfigService(
            defaults_ini=tmp / "missing.ini",
            machine_ini=machine,
            user_ini=tmp / "user.ini",
            environ={},
        )
        self.delegate = AppContext.init_localization(config=self.config, event_logger=RecordingLogger())

    def tearDown(self) -> None:
        AppContext.reset()
        self._tmp.cleanup()

    def test_text_before_init_is_marked(self) -> None:
        AppContext.reset()
        self.assertEqual(AppContext.text("title"), "title not found")
        with self.assertRaises(RuntimeError):
            AppContext.load_initial_locale(Locale("en"))

    def test_services_registered(self) -> None:
        self.assertIs(AppContext.services["localization"], self.delegate)
        self.assertIs(AppContext.services["translation_store"], AppContext.translation_store)

    def test_requested_locale_from_config(self) -> None:
        self.assertEqual(AppContext.requested_locale(self.config), Locale("es", "MX"))

    def test_initial_load_resolves(self) -> None:
        resolved = AppContext.load_initial_locale(Locale("es", "MX"))
        self.assertEqual(resolved, Locale("es", "ES"))
        self.assertEqual(AppContext.text("page_one"), "Página uno")

    def test_unknown_request_falls_back_to_english(self) -> None:
        resolved = AppContext.load_initial_locale(Locale("ja", "JP"))
        self.assertEqual(resolved, Locale("en", "US"))
        self.assertEqual(AppContext.text("title"), "Localization Demo")

    def test_change_locale(self) -> None:
        AppContext.load_initial_locale(Locale("en", "US"))
        AppContext.change_locale(Locale("es"))
        self.assertEqual(AppContext.translation_store.locale, Locale("es", "ES"))
        self.assertEqual(AppContext.text("home"), "Inicio")
        self.assertEqual(AppContext.text("page_nine"), "page_nine not found")

    def test_missing_directory_surfaces_load_error(self) -> None:
        AppContext.translation_store.translations_dir = Path(self._tmp.name) / "nowhere"
        with self.assertRaises(LoadError):
            AppContext.load_initial_locale(Locale("en", "US"))


if __name__ == "__main__":
    unittest.main()
