"""Typed, layered configuration loader with precedence handling."""
from __future__ import annotations

import os
import configparser
import shutil
from dataclasses import dataclass, fields
from pathlib import Path
from threading import RLock
from typing import Any, Callable, Dict, Tuple

# --------------------------------------------------------------------------- #
#  Paths & default definitions
# --------------------------------------------------------------------------- #

def _find_project_root() -> Path:
    here = Path(__file__).resolve()
    for parent in here.parents:
        if (parent / "core").is_dir():
            return parent
    return here.parent

PROJECT_ROOT = _find_project_root()
CONFIG_DIR = PROJECT_ROOT / "core" / "config"
DEFAULTS_INI = CONFIG_DIR / "defaults.ini"
MACHINE_INI = CONFIG_DIR / "config.ini"

ENV_PREFIX = "LOCDEMO_"


_DEFAULTS: Dict[str, Dict[str, Any]] = {
    "Localization": {
        "translations_dir": (PROJECT_ROOT / "core" / "i18n" / "translations").as_posix(),
        "supported_locales": "en_US,es_ES",
        "requested_locale": "",
        "track_missing_keys": "true",
    },
    "Database": {
        "logging": (PROJECT_ROOT / "databases" / "logs.db").as_posix(),
    },
    "General": {
        "app_name": "Localization Demo",
        "version": "1.0.0",
        "debug": "false",
    },
}


# --------------------------------------------------------------------------- #
#  Datamodels
# --------------------------------------------------------------------------- #

@dataclass
class LocalizationConfig:
    translations_dir: Path
    supported_locales: str = "en_US,es_ES"
    requested_locale: str = ""
    track_missing_keys: bool = True


@dataclass
class DatabaseConfig:
    logging: Path


@dataclass
class GeneralConfig:
    app_name: str = ""
    version: str = ""
    debug: bool = False


# --------------------------------------------------------------------------- #
#  Helpers
# --------------------------------------------------------------------------- #

def _cp_to_dict(cp: configparser.ConfigParser) -> Dict[str, Dict[str, Any]]:
    data: Dict[str, Dict[str, Any]] = {}
    for section in cp.sections():
        data[section] = {k: v for k, v in cp.items(section)}
    return data


def _read_ini(path: Path) -> Dict[str, Dict[str, Any]]:
    cp = configparser.ConfigParser()
    cp.read(path, encoding="utf-8")
    return _cp_to_dict(cp)


def _apply(target: Dict[str, Dict[str, Any]], source: Dict[str, Dict[str, Any]],
           layer: str, origin: str,
           sources: Dict[Tuple[str, str], Dict[str, str]]) -> None:
    for section, items in source.items():
        sec = target.setdefault(section, {})
        for key, value in items.items():
            sec[key] = value
            sources[(section, key)] = {"layer": layer, "source": origin}


def _cast(value: Any, typ: Any) -> Any:
    # field.type is a string under postponed annotations
    if typ in (Path, "Path"):
        return Path(str(value)).expanduser()
    if typ in (bool, "bool"):
        if isinstance(value, bool):
            return value
        return str(value).strip().lower() in {"1", "true", "yes", "on"}
    if typ in (int, "int"):
        return int(value)
    if typ in (float, "float"):
        return float(value)
    if typ in (str, "str"):
        return str(value)
    return typ(value)


def _build_dataclass(cls: type, data: Dict[str, Any]) -> Any:
    kwargs = {}
    for field in fields(cls):
        val = data.get(field.name, field.default)
        kwargs[field.name] = _cast(val, field.type)
    return cls(**kwargs)


def _env_overlays(environ: Dict[str, str] | None = None) -> Dict[str, Dict[str, Any]]:
    result: Dict[str, Dict[str, Any]] = {}
    for env_key, value in (os.environ if environ is None else environ).items():
        if not env_key.startswith(ENV_PREFIX):
            continue
        remainder = env_key[len(ENV_PREFIX):]
        parts = remainder.split("__", 1)
        if len(parts) != 2:
            continue
        section, key = parts
        section = section.title()
        key = key.lower()
        result.setdefault(section, {})[key] = value
    return result


def _user_config_path() -> Path:
    if os.name == "nt":
        appdata = os.environ.get("APPDATA") or (Path.home() / "AppData" / "Roaming")
        return Path(appdata) / "LocDemo" / "config.ini"
    return Path(os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config")) / "locdemo" / "config.ini"


# --------------------------------------------------------------------------- #
#  ConfigService
# --------------------------------------------------------------------------- #


class ConfigService:
    """Facade merging layered configuration with type safety."""

    def __init__(
        self,
        *,
        defaults_ini: Path = DEFAULTS_INI,
        machine_ini: Path = MACHINE_INI,
        user_ini: Path | None = None,
        environ: Dict[str, str] | None = None,
    ) -> None:
        self._lock = RLock()
        self.defaults_ini = defaults_ini
        self.machine_ini = machine_ini
        self.user_ini = user_ini if user_ini is not None else _user_config_path()
        self._environ = environ
        self.reload()

    # ------------------------------------------------------------------ #
    def reload(self) -> None:
        with self._lock:
            merged: Dict[str, Dict[str, Any]] = {}
            sources: Dict[Tuple[str, str], Dict[str, str]] = {}

            # Layer 0: embedded defaults
            _apply(merged, _DEFAULTS, "code", "embedded", sources)

            # Layer 1: defaults.ini
            if self.defaults_ini.exists():
                _apply(merged, _read_ini(self.defaults_ini), "defaults.ini",
                       str(self.defaults_ini), sources)

            # Layer 2: environment variables
            _apply(merged, _env_overlays(self._environ), "env", "os.environ", sources)

            # Layer 3: machine config
            if self.machine_ini.exists():
                _apply(merged, _read_ini(self.machine_ini), "machine",
                       str(self.machine_ini), sources)

            # Layer 4: user overrides
            if self.user_ini.exists():
                _apply(merged, _read_ini(self.user_ini), "user", str(self.user_ini), sources)

            self._merged = merged
            self._sources = sources

            self.localization = _build_dataclass(LocalizationConfig, merged.get("Localization", {}))
            self.database = _build_dataclass(DatabaseConfig, merged.get("Database", {}))
            self.general = _build_dataclass(GeneralConfig, merged.get("General", {}))

    # ------------------------------------------------------------------ #
    def ensure_machine_config(self) -> Path:
        """Create the machine INI from defaults.ini (or embedded defaults) if missing."""
        with self._lock:
            self.machine_ini.parent.mkdir(parents=True, exist_ok=True)
            if not self.machine_ini.exists():
                if self.defaults_ini.exists():
                    shutil.copy(self.defaults_ini, self.machine_ini)
                else:
                    parser = configparser.ConfigParser()
                    parser.read_dict(_DEFAULTS)
                    with self.machine_ini.open("w", encoding="utf-8") as fh:
                        parser.write(fh)
            return self.machine_ini

    def get(self, section: str, key: str, *, cast: Callable[[Any], Any] | type = str) -> Any:
        val = self._merged.get(section, {}).get(key)
        if val is None:
            return None
        if isinstance(cast, type):
            return _cast(val, cast)
        return cast(val)

    def meta_source(self, section: str, key: str) -> Dict[str, str] | None:
        return self._sources.get((section, key))


# Global singleton
config_service = ConfigService()
