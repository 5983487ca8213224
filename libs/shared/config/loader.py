from __future__ import annotations

import json
import os
import tomllib
from collections.abc import Mapping
from pathlib import Path
from types import NoneType
from typing import Any, get_args

from pydantic import BaseModel

from apps.fisher.settings import FisherSettings

ENV_PREFIX = "FISH_"

# --- paths --------------------------------------------------------------------


def _repo_root() -> Path:
    """Heuristic: walk up from this file until we find pyproject.toml."""
    p = Path(__file__).resolve()
    for ancestor in [p, *p.parents]:
        if (ancestor / "pyproject.toml").exists():
            return ancestor
    return Path.cwd()


def _profiles_dir(env: Mapping[str, str]) -> Path:
    # FISH_CONFIG_DIR points *at* the profiles/ directory
    override = env.get(f"{ENV_PREFIX}CONFIG_DIR")
    if override:
        return Path(override)
    return _repo_root() / "configs" / "profiles"


def _load_profile_table(env: Mapping[str, str], profile: str) -> dict[str, Any]:
    f = _profiles_dir(env) / f"{profile}.toml"
    if not f.exists():
        return {}
    text = f.read_text("utf-8")
    try:
        return tomllib.loads(text)
    except tomllib.TOMLDecodeError as e:
        raise RuntimeError(f"Failed to parse profile TOML: {f}") from e


# --- env overlay helpers ------------------------------------------------------


def _text_fields(model: type[BaseModel]) -> set[str]:
    """Fields typed `str` or `str | None`; their env values are taken verbatim."""
    out: set[str] = set()
    for name, field in model.model_fields.items():
        args = set(get_args(field.annotation)) or {field.annotation}
        if str in args and args <= {str, NoneType}:
            out.add(name)
    return out


def _coerce_env_value(raw: str, text: bool = False) -> Any:
    """
    Try JSON first (numbers, bools, lists, objects), then fall back to the
    raw string. Text fields skip JSON so FISH_CAST_KEY=5 stays "5"; only a
    literal "null" clears them.
    """
    if text:
        return None if raw == "null" else raw
    try:
        return json.loads(raw)
    except ValueError:
        return raw


def _collect_env_for(
    fields: set[str],
    env: Mapping[str, str],
    prefix: str = ENV_PREFIX,
    text_fields: set[str] | None = None,
) -> dict[str, Any]:
    """
    Collect overrides like FISH_BITE_TIMEOUT_MS=15000 -> {'bite_timeout_ms': 15000}.
    Case-insensitive after the prefix.
    """
    out: dict[str, Any] = {}
    upper_to_field = {f.upper(): f for f in fields}
    plen = len(prefix)
    for k, v in env.items():
        if not k.startswith(prefix):
            continue
        key = k[plen:].upper()
        if key in upper_to_field:
            name = upper_to_field[key]
            out[name] = _coerce_env_value(v, text=name in (text_fields or set()))
    return out


# --- public API ---------------------------------------------------------------


def load_fisher_settings(
    env: Mapping[str, str] | None = None, profile: str | None = None
) -> FisherSettings:
    """
    Merge defaults (FisherSettings) <- TOML [fisher] <- env FISH_*.
    Env examples: FISH_SPLASH_THRESHOLD=5, FISH_MARKER_COLOR="#110c07",
    FISH_FISHING_AREA={"x":0,"y":0,"width":800,"height":600}
    """
    env = os.environ if env is None else env
    profile = (profile or env.get(f"{ENV_PREFIX}PROFILE") or "dev").strip()

    base = FisherSettings.model_construct().model_dump()

    toml_table = _load_profile_table(env, profile)
    toml_fisher = toml_table.get("fisher", {})
    if isinstance(toml_fisher, dict):
        base.update(toml_fisher)

    base.update(_collect_env_for(set(base.keys()), env, text_fields=_text_fields(FisherSettings)))

    return FisherSettings.model_validate(base)
