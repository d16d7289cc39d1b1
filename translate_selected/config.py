import copy
import json
import os
from pathlib import Path
from typing import Any, Dict, Optional

from translate_selected.logger import get_logger

logger = get_logger(__name__)

# Provider configuration constants
PROVIDERS = ["google", "deepl", "youdao"]
DEFAULT_PROVIDER = "google"

PROVIDER_DISPLAY_NAMES = {
    "google": "Google",
    "deepl": "DeepL",
    "youdao": "Youdao",
}

# Overlay dismissal timings (milliseconds)
OVERLAY_TIMEOUT_MS = 8000
OVERLAY_GRACE_MS = 500

# Get base directory (project root)
BASE_DIR = Path(__file__).parent.parent
CONFIG_DIR = BASE_DIR / "config"
CONFIG_FILE = CONFIG_DIR / "config.json"
CONFIG_ENV_VAR = "TRANSLATE_SELECTED_CONFIG"

# Default configuration template
DEFAULT_CONFIG = {
    "provider": DEFAULT_PROVIDER,
    "source_language": "auto",
    "target_language": "zh-CN",
    "google": {
        "api_key": "",
    },
    "deepl": {
        "api_key": "",
        "api_url": "https://api-free.deepl.com/v2/translate",
    },
    "youdao": {
        "app_key": "",
        "app_secret": "",
    },
    "timeout": 30,
    "max_concurrency": 8,  # Per-line requests in flight; 0 means unbounded
    "overlay": {
        "timeout_ms": OVERLAY_TIMEOUT_MS,
        "grace_ms": OVERLAY_GRACE_MS,
    },
    "log_mode": "info",
}


def get_config_path() -> Path:
    """Return the config file path, honouring the environment override."""
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override)
    return CONFIG_FILE


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def create_default_config(path: Optional[Path] = None):
    """Create the default config.json file."""
    path = path or get_config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, 'w', encoding='utf-8') as f:
        json.dump(DEFAULT_CONFIG, f, indent=4, ensure_ascii=False)
    logger.info(f"Created default config file: {path}")


def initialize_app():
    """Create the default configuration on first run."""
    path = get_config_path()
    if not path.exists():
        logger.info("No config file found, writing defaults")
        create_default_config(path)
    else:
        logger.debug(f"Config already exists: {path}")


def load_config(path: Optional[Path] = None) -> Dict[str, Any]:
    """Load the configuration, merged over the defaults."""
    path = path or get_config_path()
    if not path.exists():
        return copy.deepcopy(DEFAULT_CONFIG)

    try:
        with open(path, 'r', encoding='utf-8') as f:
            stored = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        logger.error(f"Failed to read config from {path}: {e}")
        logger.warning("Using default configuration")
        return copy.deepcopy(DEFAULT_CONFIG)

    if not isinstance(stored, dict):
        logger.warning(f"Config in {path} is not an object, using defaults")
        return copy.deepcopy(DEFAULT_CONFIG)

    return _deep_merge(DEFAULT_CONFIG, stored)


def save_config(config: Dict[str, Any], path: Optional[Path] = None):
    """Save the configuration to disk."""
    path = path or get_config_path()
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(config, f, indent=4, ensure_ascii=False)
        logger.info(f"Configuration saved to {path}")
    except OSError as e:
        logger.error(f"Failed to save config to {path}: {e}")
        raise


def get_setting(config: Dict[str, Any], key: str, default: Any = None) -> Any:
    """
    Read a dotted key from a config dict.

    Examples:
        >>> get_setting({"deepl": {"api_url": "x"}}, "deepl.api_url")
        'x'
        >>> get_setting({}, "youdao.app_key", "")
        ''
    """
    node: Any = config
    for part in key.split('.'):
        if not isinstance(node, dict) or part not in node:
            return default
        node = node[part]
    return node
