from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest
from domain.types import Color, Point, Region
from pydantic import ValidationError
from shared.config.loader import load_fisher_settings

from apps.fisher.settings import FisherSettings


def _write_profile(dirpath: Path, name: str, text: str) -> Path:
    dirpath.mkdir(parents=True, exist_ok=True)
    p = dirpath / f"{name}.toml"
    p.write_text(text, encoding="utf-8")
    return p


def test_defaults_when_no_profile_and_no_env(tmp_path: Path):
    s = load_fisher_settings(env={"FISH_CONFIG_DIR": str(tmp_path)}, profile="dev")
    assert s.fishing_area.to_region() == Region(500, 580, 1100, 370)
    assert s.marker_color == 0x110C07
    assert s.splash_color == 0x64989E
    assert s.splash_threshold == 3
    assert s.splash_tolerance == 0.1
    assert (s.bite_timeout_ms, s.splash_timeout_ms) == (20_000, 20_000)
    assert (s.startup_delay_ms, s.cooldown_ms) == (3_000, 5_000)
    assert (s.jitter_min_ms, s.jitter_max_ms, s.release_delay_ms) == (150, 300, 200)


def test_toml_overlay(tmp_path: Path):
    profiles = tmp_path / "profiles"
    _write_profile(
        profiles,
        "dev",
        """
        [fisher]
        marker_color = 0xff0000
        splash_color = "#00ff00"
        splash_threshold = 7
        cast_key = "9"

        [fisher.fishing_area]
        x = 0
        y = 0
        width = 800
        height = 600

        [fisher.capture]
        monitor = 2
        """,
    )
    env = {"FISH_CONFIG_DIR": str(profiles), "FISH_PROFILE": "dev"}
    s = load_fisher_settings(env=env)
    assert s.marker_color == 0xFF0000
    assert s.splash_color == 0x00FF00
    assert s.splash_threshold == 7
    assert s.cast_key == "9"
    assert s.fishing_area.to_region() == Region(0, 0, 800, 600)
    assert s.capture.monitor == 2


def test_env_overrides_toml(tmp_path: Path):
    profiles = tmp_path / "profiles"
    _write_profile(
        profiles,
        "dev",
        """
        [fisher]
        splash_threshold = 4
        bite_timeout_ms = 1000
        """,
    )
    env: dict[str, Any] = {
        "FISH_CONFIG_DIR": str(profiles),
        "FISH_PROFILE": "dev",
        "FISH_SPLASH_THRESHOLD": "9",
        "FISH_bite_timeout_ms": "15000",  # case-insensitive after the prefix
        "FISH_MARKER_COLOR": "#123456",
        "FISH_FISHING_AREA": '{"x": 1, "y": 2, "width": 3, "height": 4}',
        "FISH_SNAPSHOT_PATH": "null",
        "OTHER_SPLASH_THRESHOLD": "1",
    }
    s = load_fisher_settings(env=env)
    assert s.splash_threshold == 9
    assert s.bite_timeout_ms == 15000
    assert s.marker_color == 0x123456
    assert s.fishing_area.to_region() == Region(1, 2, 3, 4)
    assert s.snapshot_path is None


def test_profile_dir_override_via_env(tmp_path: Path):
    profiles = tmp_path / "custom_profiles"
    _write_profile(profiles, "lake", "[fisher]\ncooldown_ms = 1234\n")
    s = load_fisher_settings(env={"FISH_CONFIG_DIR": str(profiles), "FISH_PROFILE": "lake"})
    assert s.cooldown_ms == 1234


def test_bad_toml_raises_runtime_error(tmp_path: Path):
    profiles = tmp_path / "profiles"
    _write_profile(profiles, "dev", "[fisher]\nthis = not_valid\n")
    with pytest.raises(RuntimeError):
        load_fisher_settings(env={"FISH_CONFIG_DIR": str(profiles), "FISH_PROFILE": "dev"})


@pytest.mark.parametrize(
    "override",
    [
        {"splash_tolerance": 1.0},
        {"splash_tolerance": -0.1},
        {"splash_threshold": 0},
        {"splash_size": 0},
        {"cast_key": "hyperdrive"},
        {"modifier_key": ""},
        {"cast_key": "ab"},
        {"jitter_min_ms": 400, "jitter_max_ms": 300},
        {"marker_color": "not-a-color"},
        {"marker_color": 0x1000000},
        {"fishing_area": {"x": 0, "y": 0, "width": 0, "height": 10}},
    ],
)
def test_invalid_values_rejected(override: dict[str, Any]):
    with pytest.raises(ValidationError):
        FisherSettings(**override)


def test_to_config_builds_domain_values():
    cfg = FisherSettings(cursor_home=(5, 6), splash_color="0x010203").to_config()
    assert cfg.fishing_area == Region(500, 580, 1100, 370)
    assert cfg.splash_color == Color(0x010203)
    assert cfg.cursor_home == Point(5, 6)
    assert cfg.splash_region(Point(560, 615)) == Region(500, 580, 100, 100)


def test_env_text_fields_kept_verbatim(tmp_path: Path):
    env = {
        "FISH_CONFIG_DIR": str(tmp_path),
        "FISH_CAST_KEY": "5",
        "FISH_SNAPSHOT_PATH": "1",
        "FISH_MODIFIER_KEY": "CTRL",
        "FISH_SPLASH_THRESHOLD": "6",
    }
    s = load_fisher_settings(env=env, profile="dev")
    assert s.cast_key == "5"
    assert s.snapshot_path == "1"
    assert s.modifier_key == "ctrl"
    assert s.splash_threshold == 6


def test_env_unknown_key_name_rejected(tmp_path: Path):
    with pytest.raises(ValidationError):
        load_fisher_settings(
            env={"FISH_CONFIG_DIR": str(tmp_path), "FISH_CAST_KEY": "hyperdrive"}, profile="dev"
        )


@pytest.mark.parametrize(
    ("raw", "expected"), [("x", "x"), ("F5", "f5"), ("Shift", "shift"), ("space", "space")]
)
def test_key_names_accepted(raw: str, expected: str):
    assert FisherSettings(cast_key=raw).cast_key == expected
