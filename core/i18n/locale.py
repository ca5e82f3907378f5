"""
locale.py

Locale value object (language + region).

Usage
-----
from core.i18n.locale import Locale
Locale.parse("es_ES")      # Locale(language_code='es', region_code='ES')
"""

from __future__ import annotations

import re
from dataclasses import dataclass

_TAG_RE = re.compile(r"^(?P<lang>[A-Za-z]{2,3})(?:[-_](?P<region>[A-Za-z]{2}|\d{3}))?$")


@dataclass(frozen=True, order=True)
class Locale:
    """Immutable (language, region) pair, ordered by language then region."""

    language_code: str
    region_code: str = ""

    @classmethod
    def parse(cls, tag: str) -> "Locale":
        """
        Build a Locale from tags like ``en``, ``en_US``, ``es-ES`` or ``de_DE.UTF-8``.

        :raises ValueError: if *tag* is not a language[_region] tag
        """
        raw = (tag or "").strip()
        # drop POSIX encoding / modifier suffixes
        raw = raw.split(".", 1)[0].split("@", 1)[0]
        match = _TAG_RE.match(raw)
        if not match:
            raise ValueError(f"Invalid locale tag: {tag!r}")
        return cls(match.group("lang").lower(), (match.group("region") or "").upper())

    @property
    def tag(self) -> str:
        return f"{self.language_code}_{self.region_code}" if self.region_code else self.language_code

    def __str__(self) -> str:
        return self.tag


def parse_locale_list(value: str) -> tuple[Locale, ...]:
    """Parse a comma separated list of tags, keeping order and dropping duplicates."""
    result: list[Locale] = []
    for part in value.split(","):
        if not part.strip():
            continue
        loc = Locale.parse(part)
        if loc not in result:
            result.append(loc)
    return tuple(result)
