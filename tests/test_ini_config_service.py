from __future__ import annotations

from pathlib import Path

import pytest

from pytxt.services.config.ini_config_service import IniConfigService, parse_bool


def write_ini(p: Path, text: str) -> Path:
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(text, encoding="utf-8")
    return p


@pytest.fixture()
def user_dir(monkeypatch, tmp_path) -> Path:
    """Point platformdirs at an empty per-test directory."""
    d = tmp_path / "usercfg"
    monkeypatch.setattr(
        "pytxt.services.config.ini_config_service.user_config_dir", lambda app: str(d)
    )
    return d


# ------------------------------
# Lookup order
# ------------------------------


def test_candidates_are_explicit_then_user_then_project(user_dir, tmp_path):
    explicit = tmp_path / "explicit.ini"
    root = tmp_path / "repo"

    assert IniConfigService.candidates(explicit, root) == [
        explicit,
        user_dir / "config.ini",
        root / "config" / "config.ini",
    ]
    assert IniConfigService.candidates(None, None) == [user_dir / "config.ini"]


def test_nothing_found_gives_defaults(user_dir):
    cfg = IniConfigService()
    assert cfg.loaded_from is None
    assert cfg.app_version() == "0.0.0"
    assert cfg.get("export", "default_format") is None
    assert cfg.get("export", "default_format", "rtf") == "rtf"
    assert cfg.as_dict() == {}


def test_first_existing_file_wins(user_dir, tmp_path):
    root = tmp_path / "repo"
    project = write_ini(root / "config" / "config.ini", "[export]\ndefault_format = rtf\n")
    user = write_ini(user_dir / "config.ini", "[export]\ndefault_format = html\n")

    cfg = IniConfigService(project_root=root)
    assert cfg.loaded_from == user
    assert cfg.get("export", "default_format") == "html"

    explicit = write_ini(tmp_path / "mine.ini", "[logging]\nlevel = ERROR\n")
    cfg = IniConfigService(explicit_path=explicit, project_root=root)
    assert cfg.loaded_from == explicit
    # files are not merged
    assert cfg.get("export", "default_format") is None

    user.unlink()
    assert IniConfigService(project_root=root).loaded_from == project


@pytest.mark.parametrize(
    "bad",
    [
        "[export\ndefault_format = html\n",
        "no section header here\n",
    ],
)
def test_malformed_file_is_skipped(user_dir, tmp_path, log_messages, bad):
    write_ini(user_dir / "config.ini", bad)
    root = tmp_path / "repo"
    good = write_ini(root / "config" / "config.ini", "[app]\nversion = 1.4.0\n")

    cfg = IniConfigService(project_root=root)

    assert cfg.loaded_from == good
    assert cfg.app_version() == "1.4.0"
    assert any("Ignoring unreadable config" in m for m in log_messages)


def test_non_utf8_file_is_skipped(user_dir):
    user_dir.mkdir(parents=True)
    (user_dir / "config.ini").write_bytes(b"[app]\nversion = \xff\xfe\n")

    cfg = IniConfigService()
    assert cfg.loaded_from is None
    assert cfg.app_version() == "0.0.0"


def test_percent_signs_are_kept_literally(user_dir):
    write_ini(user_dir / "config.ini", "[app]\nversion = 100%\n")
    assert IniConfigService().app_version() == "100%"


# ------------------------------
# Editor settings
# ------------------------------


def test_editor_choices_are_normalised(user_dir):
    write_ini(
        user_dir / "config.ini",
        "[export]\ndefault_format =  HTML \n[logging]\nlevel = warning\n",
    )
    cfg = IniConfigService()
    assert cfg.get("export", "default_format") == "html"
    assert cfg.get("logging", "level") == "WARNING"


def test_invalid_editor_settings_are_dropped_with_warning(user_dir, log_messages):
    write_ini(
        user_dir / "config.ini",
        "[export]\ndefault_format = docx\nhtml_escape_title = perhaps\n"
        "[logging]\nlevel = loud\n",
    )
    cfg = IniConfigService()

    assert cfg.get("export", "default_format", "rtf") == "rtf"
    assert cfg.get_bool("export", "html_escape_title", True) is True
    assert cfg.get("logging", "level") is None
    warnings = [m for m in log_messages if "using the default" in m]
    assert len(warnings) == 3
    assert any("'docx'" in m for m in warnings)


def test_unknown_sections_are_left_alone(user_dir):
    write_ini(user_dir / "config.ini", "[plugins]\nextra = whatever\n")
    cfg = IniConfigService()
    assert cfg.as_dict() == {"plugins": {"extra": "whatever"}}


# ------------------------------
# Booleans
# ------------------------------


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("true", True),
        (" On ", True),
        ("1", True),
        ("no", False),
        ("OFF", False),
        ("maybe", None),
        ("", None),
    ],
)
def test_parse_bool(raw, expected):
    assert parse_bool(raw) is expected


def test_get_bool_uses_default_when_missing(user_dir):
    write_ini(user_dir / "config.ini", "[export]\nhtml_escape_title = no\n")
    cfg = IniConfigService()
    assert cfg.get_bool("export", "html_escape_title", True) is False
    assert cfg.get_bool("export", "missing", True) is True
    assert cfg.get_bool("nope", "missing") is None
