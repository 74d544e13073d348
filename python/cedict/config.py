"""Configuration loader for cedict.

Loads defaults from config.json at project root, with hardcoded fallbacks.
"""

import json
from pathlib import Path
from typing import Any

# Hardcoded fallback defaults
FALLBACK_DEFAULTS = {
    "encoding": "utf-8",
    "output_format": "jsonl",
    "strict": False,
    "verbose": False,
}

OUTPUT_FORMATS = ["jsonl", "json", "tsv"]

_config: dict[str, Any] | None = None


def _find_config() -> Path | None:
    """Find config.json by walking up from current file."""
    paths = [
        Path(__file__).parent.parent.parent / "config.json",  # python/cedict -> root
        Path.cwd() / "config.json",
    ]
    for path in paths:
        if path.exists():
            return path
    return None


def load() -> dict[str, Any]:
    """Load configuration from config.json or use fallbacks."""
    global _config
    if _config is not None:
        return _config

    config_path = _find_config()
    if config_path:
        try:
            with open(config_path, encoding="utf-8") as f:
                _config = json.load(f)
                return _config
        except (json.JSONDecodeError, OSError):
            pass

    # Fallback
    _config = {"defaults": FALLBACK_DEFAULTS}
    return _config


def reset() -> None:
    """Forget the cached configuration so the next load() reads it again."""
    global _config
    _config = None


def get_default(key: str, fallback: Any = None) -> Any:
    """Get a default value from config."""
    cfg = load()
    return cfg.get("defaults", {}).get(key, fallback)


# Convenience accessors
def default_encoding() -> str:
    return get_default("encoding", FALLBACK_DEFAULTS["encoding"])


def default_output_format() -> str:
    fmt = get_default("output_format", FALLBACK_DEFAULTS["output_format"])
    if fmt not in OUTPUT_FORMATS:
        raise ValueError(f"Unknown output format: {fmt}. Available: {OUTPUT_FORMATS}")
    return fmt


def default_strict() -> bool:
    return bool(get_default("strict", FALLBACK_DEFAULTS["strict"]))


def default_verbose() -> bool:
    return bool(get_default("verbose", FALLBACK_DEFAULTS["verbose"]))
