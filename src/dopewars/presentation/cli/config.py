"""CLI configuration helpers for options persistence."""
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Dict

from dopewars.core.types import Edition
from dopewars.domain.config import GameConfig

_DEFAULT_EDITION: Edition = "extended"


def get_user_data_dir() -> Path:
    """Return the per-user data directory."""
    if os.name == "nt":
        base = os.environ.get("APPDATA")
        if base:
            return Path(base) / "DopeWars"
        return Path.home() / "DopeWars"
    return Path.home() / ".config" / "dopewars"


def get_default_config_path() -> Path:
    """Return the default per-user config path."""
    return get_user_data_dir() / "config.json"


def _normalize_edition(value: object) -> Edition:
    return "basic" if value == "basic" else _DEFAULT_EDITION


def _normalize_seed(value: object) -> int | None:
    # bool is an int subclass; reject it explicitly.
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    return None


def load_config(path: Path | None = None) -> Dict[str, object]:
    """Load config from disk or return defaults."""
    config_path = path or get_default_config_path()
    defaults: Dict[str, object] = {"edition": _DEFAULT_EDITION, "seed": None}
    try:
        raw = json.loads(config_path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return defaults
    except (OSError, ValueError):
        return defaults
    if not isinstance(raw, dict):
        return defaults
    return {"edition": _normalize_edition(raw.get("edition")), "seed": _normalize_seed(raw.get("seed"))}


def save_config(config: Dict[str, object], path: Path | None = None) -> None:
    """Persist config to disk."""
    config_path = path or get_default_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)
    payload = {
        "edition": _normalize_edition(config.get("edition")),
        "seed": _normalize_seed(config.get("seed")),
    }
    config_path.write_text(json.dumps(payload, indent=2, sort_keys=True), encoding="utf-8")


def build_game_config(config: Dict[str, object]) -> GameConfig:
    """Translate CLI settings into the core configuration."""
    return GameConfig.for_edition(_normalize_edition(config.get("edition")))
