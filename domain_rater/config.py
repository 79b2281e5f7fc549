import os
from dataclasses import dataclass
from dotenv import load_dotenv
import yaml
from pathlib import Path

DEFAULT_CONFIG_FILE = Path(__file__).parent / "config.yaml"

# Weight overrides; empty until init_config() runs, so the core uses its defaults
CONFIG = {}


@dataclass(frozen=True)
class Settings:
    config_file: Path
    log_level: str = "WARNING"
    log_json: bool = False


def _validate(data, path: Path) -> dict:
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a mapping of sections, got {type(data).__name__}")

    for section, weights in data.items():
        if not isinstance(weights, dict):
            raise ValueError(f"{path}: section '{section}' must be a mapping of weights")
        for key, value in weights.items():
            if not isinstance(value, int) or isinstance(value, bool):
                raise ValueError(f"{path}: weight {section}.{key} must be an integer, got {value!r}")
    return data


def load_config(path: Path = DEFAULT_CONFIG_FILE) -> dict:
    """Read a YAML weights file; a missing file means no overrides."""
    if path.exists():
        with open(path, "r", encoding="utf-8") as f:
            return _validate(yaml.safe_load(f), path)
    return {}


def init_config() -> Settings:
    """
    Load ``.env`` and the weights file for the CLI / API.

    Only the entry points call this; importing the package reads no files
    and no environment variables.
    """
    global CONFIG

    load_dotenv()
    settings = Settings(
        config_file=Path(os.getenv("DOMAIN_RATER_CONFIG", DEFAULT_CONFIG_FILE)),
        log_level=os.getenv("DOMAIN_RATER_LOG_LEVEL", "WARNING").upper(),
        log_json=os.getenv("DOMAIN_RATER_LOG_JSON", "").lower() in ("1", "true", "yes"),
    )
    CONFIG = load_config(settings.config_file)
    return settings


def get_weight(category: str, key: str, default: int = 0) -> int:
    """Return weight from YAML or fallback to default."""
    section = CONFIG.get(getattr(category, "value", category)) or {}
    return section.get(key, default)
