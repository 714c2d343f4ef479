from __future__ import annotations

import configparser
from collections.abc import Mapping
from pathlib import Path

from loguru import logger
from platformdirs import user_config_dir

from pytxt.domain.interfaces import IConfigService
from pytxt.domain.models import ExportFormat

LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")

_TRUE = frozenset({"1", "true", "yes", "y", "on"})
_FALSE = frozenset({"0", "false", "no", "n", "off"})

# Editor settings checked on load. Values are normalised to the spelling listed here;
# anything else is dropped so readers fall back to their default.
EDITOR_CHOICES: dict[tuple[str, str], tuple[str, ...]] = {
    ("export", "default_format"): tuple(f.value for f in ExportFormat),
    ("logging", "level"): LOG_LEVELS,
}
EDITOR_FLAGS: tuple[tuple[str, str], ...] = (("export", "html_escape_title"),)


def parse_bool(raw: str) -> bool | None:
    s = raw.strip().lower()
    if s in _TRUE:
        return True
    if s in _FALSE:
        return False
    return None


class IniConfigService(IConfigService):
    r"""
    INI-backed configuration for the editor.

    The first readable file wins:
      1. explicit path given at construction
      2. platformdirs user config (~/.config/PyTextEditor/config.ini, %APPDATA%\PyTextEditor\...)
      3. <project_root>/config/config.ini

    Unreadable or malformed files are logged and skipped. The `[export]` and
    `[logging]` keys the editor understands are validated once the file is read.
    """

    APP_DIR = "PyTextEditor"
    FILE_NAME = "config.ini"

    def __init__(self, explicit_path: Path | None = None, project_root: Path | None = None):
        self._parser = self._new_parser()
        self._loaded_from: Path | None = None

        for path in self.candidates(explicit_path, project_root):
            if self._try_load(path):
                break

        self._validate_editor_settings()

    @classmethod
    def candidates(cls, explicit_path: Path | None, project_root: Path | None) -> list[Path]:
        paths: list[Path] = []
        if explicit_path:
            paths.append(explicit_path)
        paths.append(Path(user_config_dir(cls.APP_DIR)) / cls.FILE_NAME)
        if project_root:
            paths.append(project_root / "config" / cls.FILE_NAME)
        return paths

    @staticmethod
    def _new_parser() -> configparser.ConfigParser:
        # No interpolation: a literal '%' in a value is not a syntax error
        return configparser.ConfigParser(interpolation=None)

    def _try_load(self, path: Path) -> bool:
        if not path.is_file():
            return False
        parser = self._new_parser()
        try:
            with path.open("r", encoding="utf-8") as fh:
                parser.read_file(fh)
        except (OSError, UnicodeDecodeError, configparser.Error) as e:
            logger.warning(f"Ignoring unreadable config {path}: {e}")
            return False
        self._parser = parser
        self._loaded_from = path
        logger.debug(f"Loaded config from {path}")
        return True

    def _validate_editor_settings(self) -> None:
        for (section, key), choices in EDITOR_CHOICES.items():
            raw = self.get(section, key) if self._parser.has_section(section) else None
            if raw is None:
                continue
            wanted = raw.strip().lower()
            match = next((c for c in choices if c.lower() == wanted), None)
            if match is None:
                logger.warning(
                    f"[{section}] {key} = {raw!r} is not one of {', '.join(choices)}; using the default"
                )
                self._parser.remove_option(section, key)
            else:
                self._parser.set(section, key, match)

        for section, key in EDITOR_FLAGS:
            raw = self.get(section, key) if self._parser.has_section(section) else None
            if raw is not None and parse_bool(raw) is None:
                logger.warning(f"[{section}] {key} = {raw!r} is not a boolean; using the default")
                self._parser.remove_option(section, key)

    # ----- IConfigService -----

    def get(self, section: str, key: str, default: str | None = None) -> str | None:
        return self._parser.get(section, key, fallback=default)

    def get_bool(self, section: str, key: str, default: bool | None = None) -> bool | None:
        val = self.get(section, key)
        if val is None:
            return default
        parsed = parse_bool(val)
        return default if parsed is None else parsed

    def as_dict(self) -> Mapping[str, Mapping[str, str]]:
        return {sect: dict(self._parser[sect]) for sect in self._parser.sections()}

    def app_version(self) -> str:
        return self.get("app", "version") or "0.0.0"

    @property
    def loaded_from(self) -> Path | None:
        """For diagnostics."""
        return self._loaded_from
