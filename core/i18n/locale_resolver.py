"""Selects the best supported locale for a requested one."""
from __future__ import annotations

import locale as stdlib_locale
import logging
import os
from typing import Mapping, Optional, Sequence

from core.i18n.locale import Locale

log = logging.getLogger(__name__)

_LOCALE_ENV_VARS = ("LC_ALL", "LC_MESSAGES", "LANG")


def resolve_locale(requested: Optional[Locale], supported: Sequence[Locale]) -> Locale:
    """
    Return the first supported locale sharing the language code of *requested*,
    else the first sharing its region code, else ``supported[0]``.

    A region-only match may pick a different language that shares the region.
    Empty region codes never match each other.
    """
    if not supported:
        raise ValueError("supported locales must not be empty")
    if requested is None:
        return supported[0]

    for candidate in supported:
        if candidate.language_code == requested.language_code:
            return candidate

    if requested.region_code:
        for candidate in supported:
            if candidate.region_code == requested.region_code:
                return candidate

    return supported[0]


def system_locale(environ: Optional[Mapping[str, str]] = None) -> Optional[Locale]:
    """Best effort detection of the user's locale; ``None`` for C/POSIX or unknown."""
    env = os.environ if environ is None else environ
    candidates = [env.get(name, "") for name in _LOCALE_ENV_VARS]
    if environ is None:
        try:
            candidates.append(stdlib_locale.getlocale()[0] or "")
        except ValueError:
            log.debug("locale.getlocale() failed", exc_info=True)

    for tag in candidates:
        # LANGUAGE-style lists: take the first entry
        tag = tag.split(":", 1)[0]
        if not tag or tag.split(".", 1)[0] in {"C", "POSIX"}:
            continue
        try:
            return Locale.parse(tag)
        except ValueError:
            log.debug("Ignoring unparsable locale tag %r", tag)
    return None
