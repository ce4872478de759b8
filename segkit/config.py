"""Config: load/save segkit defaults from a YAML file."""
import logging
import os
from pathlib import Path

import yaml

logger = logging.getLogger(__name__)

DEFAULT_CONFIG = {
    "log_level": "WARNING",
    "mode": "graphemes",
    "output": "spans",
    "encoding": "utf-8",
    "words_only": False,
}

MODES = ("graphemes", "words", "sentences")
OUTPUTS = ("spans", "text", "json")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# Keys whose value must be one of a fixed set.
_CHOICES = {"log_level": LOG_LEVELS, "mode": MODES, "output": OUTPUTS}

CONFIG_PATH = Path.home() / ".config" / "segkit" / "config.yaml"


def config_path(path: str | Path | None = None) -> Path:
    """Explicit path, else $SEGKIT_CONFIG, else CONFIG_PATH."""
    if path is not None:
        return Path(path)
    env = os.environ.get("SEGKIT_CONFIG")
    return Path(env) if env else CONFIG_PATH


def load_config(path: str | Path | None = None) -> dict:
    """Return DEFAULT_CONFIG overlaid with the YAML file at path, if present."""
    p = config_path(path)
    if not p.exists():
        return dict(DEFAULT_CONFIG)
    try:
        with open(p, encoding="utf-8") as f:
            cfg = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        logger.warning("Ignoring unreadable config %s: %s", p, e)
        return dict(DEFAULT_CONFIG)
    if not isinstance(cfg, dict):
        logger.warning("Ignoring config %s: expected a mapping, got %s", p, type(cfg).__name__)
        return dict(DEFAULT_CONFIG)
    unknown = sorted(set(cfg) - set(DEFAULT_CONFIG))
    if unknown:
        logger.warning("Unknown config keys in %s: %s", p, ", ".join(unknown))
    merged = {**DEFAULT_CONFIG, **cfg}
    if isinstance(merged["log_level"], str):
        merged["log_level"] = merged["log_level"].upper()
    for key, allowed in _CHOICES.items():
        if merged[key] not in allowed:
            logger.warning(
                "Invalid %s %r in %s (expected one of %s); using %r",
                key, merged[key], p, ", ".join(allowed), DEFAULT_CONFIG[key],
            )
            merged[key] = DEFAULT_CONFIG[key]
    return merged


def save_config(cfg: dict, path: str | Path | None = None) -> Path:
    p = config_path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with open(p, "w", encoding="utf-8") as f:
        yaml.safe_dump(cfg, f, sort_keys=True)
    return p
