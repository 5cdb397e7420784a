"""
Application Settings

Settings are resolved in three layers:
1. Dataclass defaults
2. Optional YAML file (path from FINTRACK_CONFIG, default config/settings.yaml)
3. FINTRACK_* environment variables
"""
import os
import dataclasses
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

import yaml

from fintrack.common.logging_config import get_logger

logger = get_logger(__name__)

DEFAULT_CONFIG_PATH = Path("config") / "settings.yaml"
ENV_PREFIX = "FINTRACK_"


@dataclass
class Settings:
    host: str = "0.0.0.0"
    port: int = 3001
    log_level: str = "INFO"
    log_file: Optional[str] = "logs/app.log"
    cors_origins: List[str] = field(default_factory=lambda: ["*"])
    max_receipt_bytes: int = 5 * 1024 * 1024
    seed_sample_data: bool = True


def _coerce(name: str, raw: str, current):
    """Convert an environment string to the type of the field default."""
    if isinstance(current, bool):
        return raw.strip().lower() in ("1", "true", "yes", "on")
    if isinstance(current, int):
        return int(raw)
    if isinstance(current, list):
        return [item.strip() for item in raw.split(",") if item.strip()]
    if name == "log_file" and raw.strip().lower() in ("", "none"):
        return None
    return raw


def load_config_file(path: Path) -> dict:
    """Load the YAML settings file. Missing file means no overrides."""
    if not path.exists():
        return {}

    with open(path, 'r', encoding='utf-8') as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ValueError(f"Settings file {path} must contain a mapping, got {type(data).__name__}")
    return data


def load_settings(config_path: Optional[Path] = None, environ: Optional[dict] = None) -> Settings:
    """
    Build Settings from defaults, the YAML file and the environment.

    Args:
        config_path: Explicit YAML path. Falls back to FINTRACK_CONFIG, then config/settings.yaml
        environ: Environment mapping (defaults to os.environ)
    """
    environ = os.environ if environ is None else environ
    if config_path is None:
        config_path = Path(environ.get(f"{ENV_PREFIX}CONFIG", DEFAULT_CONFIG_PATH))

    settings = Settings()
    known = {f.name for f in dataclasses.fields(Settings)}

    for key, value in load_config_file(config_path).items():
        if key not in known:
            logger.warning(f"Ignoring unknown setting '{key}'", config_path=str(config_path))
            continue
        setattr(settings, key, value)

    for name in known:
        env_key = f"{ENV_PREFIX}{name.upper()}"
        if env_key in environ:
            setattr(settings, name, _coerce(name, environ[env_key], getattr(settings, name)))

    return settings
