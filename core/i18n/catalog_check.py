"""
catalog_check.py

Vergleicht die Übersetzungsdateien eines Verzeichnisses miteinander.

• missing  – pro Sprache die Keys, die in anderen Sprachen vorhanden sind
• coverage – Anteil nicht-leerer Texte bezogen auf alle bekannten Keys
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Set

from core.i18n.locale import Locale
from core.i18n.translation_store import FILE_PREFIX, FILE_SUFFIX, read_catalog


@dataclass
class CatalogReport:
    languages: list[str] = field(default_factory=list)
    missing: Dict[str, Set[str]] = field(default_factory=dict)
    coverage: Dict[str, float] = field(default_factory=dict)

    @property
    def complete(self) -> bool:
        return not any(self.missing.values())


def check_catalogs(translations_dir: Path) -> CatalogReport:
    """
    Lädt alle ``localization_<lang>.json`` in *translations_dir*.

    :raises LoadError: wenn eine der Dateien nicht lesbar ist
    """
    catalogs: Dict[str, Dict[str, str]] = {}
    for path in sorted(Path(translations_dir).glob(f"{FILE_PREFIX}*{FILE_SUFFIX}")):
        lang = path.name[len(FILE_PREFIX):-len(FILE_SUFFIX)]
        catalogs[lang] = dict(read_catalog(path, Locale(lang)))

    all_keys: Set[str] = set()
    for data in catalogs.values():
        all_keys.update(data)

    report = CatalogReport(languages=list(catalogs))
    for lang, data in catalogs.items():
        report.missing[lang] = all_keys - set(data)
        translated = sum(bool(v) for v in data.values())
        report.coverage[lang] = translated / len(all_keys) if all_keys else 1.0
    return report
