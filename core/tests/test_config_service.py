"""Layer precedence and typing of ConfigService."""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path

from core.config.config_service import ConfigService


class TestConfigService(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.dir = Path(self._tmp.name)
        self.defaults = self.dir / "defaults.ini"
        self.machine = self.dir / "config.ini"
        self.user = self.dir / "user.ini"

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def _service(self, environ: dict | None = None) -> ConfigService:
        return ConfigService(
            defaults_ini=self.defaults,
            machine_ini=self.machine,
            user_ini=self.user,
            environ=environ or {},
        )

    def test_embedded_defaults(self) -> None:
        svc = self._service()
        self.assertEqual(svc.localization.supported_locales, "en_US,es_ES")
        self.assertEqual(svc.localization.requested_locale, "")
        self.assertTrue(svc.localization.track_missing_keys)
        self.assertIsInstance(svc.localization.translations_dir, Path)
        self.assertEqual(svc.localization.translations_dir.name, "translations")
        self.assertIsInstance(svc.database.logging, Path)
        self.assertFalse(svc.general.debug)
        self.assertEqual(svc.meta_source("General", "debug")["layer"], "code")

    def test_precedence(self) -> None:
        self.defaults.write_text("[Localization]\nrequested_locale = de_DE\n", encoding="utf-8")
        svc = self._service()
        self.assertEqual(svc.localization.requested_locale, "de_DE")

        svc = self._service({"LOCDEMO_LOCALIZATION__REQUESTED_LOCALE": "es_ES"})
        self.assertEqual(svc.localization.requested_locale, "es_ES")
        self.assertEqual(svc.meta_source("Localization", "requested_locale")["layer"], "env")

        self.machine.write_text("[Localization]\nrequested_locale = en_GB\n", encoding="utf-8")
        svc = self._service({"LOCDEMO_LOCALIZATION__REQUESTED_LOCALE": "es_ES"})
        self.assertEqual(svc.localization.requested_locale, "en_GB")

        self.user.write_text("[Localization]\nrequested_locale = es_MX\n", encoding="utf-8")
        svc.reload()
        self.assertEqual(svc.localization.requested_locale, "es_MX")
        self.assertEqual(svc.meta_source("Localization", "requested_locale")["layer"], "user")

    def test_bool_and_get_cast(self) -> None:
        self.machine.write_text("[General]\ndebug = yes\n\n[Localization]\ntrack_missing_keys = off\n",
                                encoding="utf-8")
        svc = self._service()
        self.assertTrue(svc.general.debug)
        self.assertFalse(svc.localization.track_missing_keys)
        self.assertTrue(svc.get("General", "debug", cast=bool))
        self.assertIsNone(svc.get("General", "nope"))

    def test_env_keys_without_separator_are_ignored(self) -> None:
        svc = self._service({"LOCDEMO_DEBUG": "true"})
        self.assertFalse(svc.general.debug)

    def test_ensure_machine_config_copies_defaults(self) -> None:
        self.defaults.write_text("[General]\napp_name = Demo\n", encoding="utf-8")
        svc = self._service()
        path = svc.ensure_machine_config()
        self.assertEqual(path.read_text(encoding="utf-8"), "[General]\napp_name = Demo\n")

    def test_ensure_machine_config_from_embedded(self) -> None:
        svc = self._service()
        svc.ensure_machine_config()
        self.assertIn("[Localization]", self.machine.read_text(encoding="utf-8"))
        svc.reload()
        self.assertEqual(svc.meta_source("General", "app_name")["layer"], "machine")


if __name__ == "__main__":
    unittest.main()
