"""Tests for locale resolution and system locale detection."""

from __future__ import annotations

import unittest

from core.i18n.locale import Locale
from core.i18n.locale_resolver import resolve_locale, system_locale

EN_US = Locale("en", "US")
ES_ES = Locale("es", "ES")
SUPPORTED = (EN_US, ES_ES)


class TestResolveLocale(unittest.TestCase):
    def test_exact_match(self) -> None:
        self.assertIs(resolve_locale(Locale("es", "ES"), SUPPORTED), ES_ES)

    def test_language_match_ignores_region(self) -> None:
        self.assertIs(resolve_locale(Locale("es", "MX"), SUPPORTED), ES_ES)
        self.assertIs(resolve_locale(Locale("en", "GB"), SUPPORTED), EN_US)

    def test_language_match_beats_region_match(self) -> None:
        self.assertIs(resolve_locale(Locale("es", "US"), SUPPORTED), ES_ES)

    def test_region_match_when_no_language_match(self) -> None:
        # may select a different language sharing the region
        self.assertIs(resolve_locale(Locale("ca", "ES"), SUPPORTED), ES_ES)

    def test_no_match_falls_back_to_first(self) -> None:
        self.assertIs(resolve_locale(Locale("de", "DE"), SUPPORTED), EN_US)
        self.assertIs(resolve_locale(Locale("de", "DE"), (ES_ES, EN_US)), ES_ES)

    def test_empty_regions_do_not_match(self) -> None:
        supported = (EN_US, Locale("fr"))
        self.assertIs(resolve_locale(Locale("de"), supported), EN_US)

    def test_none_returns_first(self) -> None:
        self.assertIs(resolve_locale(None, SUPPORTED), EN_US)

    def test_total_over_inputs(self) -> None:
        requests = [None, Locale("xx"), Locale("en"), Locale("zz", "ES"), Locale("es", "AR")]
        for req in requests:
            self.assertIn(resolve_locale(req, SUPPORTED), SUPPORTED)

    def test_empty_supported_rejected(self) -> None:
        with self.assertRaises(ValueError):
            resolve_locale(EN_US, ())


class TestSystemLocale(unittest.TestCase):
    def test_lc_all_wins(self) -> None:
        env = {"LC_ALL": "es_ES.UTF-8", "LANG": "en_US.UTF-8"}
        self.assertEqual(system_locale(env), ES_ES)

    def test_c_locale_is_skipped(self) -> None:
        env = {"LC_ALL": "C.UTF-8", "LANG": "en_US.UTF-8"}
        self.assertEqual(system_locale(env), EN_US)

    def test_unknown(self) -> None:
        self.assertIsNone(system_locale({"LANG": "POSIX"}))
        self.assertIsNone(system_locale({}))


if __name__ == "__main__":
    unittest.main()
