"""Settings management API routes."""

from __future__ import annotations

import copy
from typing import Any, Dict, Optional

from flask import Blueprint, jsonify, request

import translate_selected.config as config
import translate_selected.language_codes as lc
from translate_selected.config import PROVIDER_DISPLAY_NAMES, PROVIDERS
from translate_selected.logger import get_logger, reload_log_mode

settings_bp = Blueprint("settings", __name__)
logger = get_logger(__name__)

SECRET_FIELDS = {
    "google": ["api_key"],
    "deepl": ["api_key"],
    "youdao": ["app_key", "app_secret"],
}
LOG_MODES = ["off", "info", "debug"]


def mask_secret(value: str) -> str:
    """Show only the last four characters of a credential."""
    if not value:
        return ""
    if len(value) <= 4:
        return "*" * len(value)
    return "*" * (len(value) - 4) + value[-4:]


def mask_config(current: Dict[str, Any]) -> Dict[str, Any]:
    masked = copy.deepcopy(current)
    for provider, fields in SECRET_FIELDS.items():
        section = masked.get(provider)
        if not isinstance(section, dict):
            continue
        for field in fields:
            if isinstance(section.get(field), str):
                section[field] = mask_secret(section[field])
    return masked


@settings_bp.get("/")
def get_settings():
    """Return current configuration with credentials masked."""
    current_config = config.load_config()
    logger.debug("Settings retrieved")
    return jsonify({
        "config": mask_config(current_config),
        "meta": {
            "providers": [
                {"id": p, "name": PROVIDER_DISPLAY_NAMES[p]}
                for p in PROVIDERS
            ],
            "log_modes": LOG_MODES,
            "languages": lc.get_all_language_codes(),
        },
    })


@settings_bp.put("/")
def update_settings():
    """Update configuration."""
    data = request.get_json(silent=True)
    if not data or not isinstance(data.get("config"), dict):
        return jsonify({"error": "Field 'config' is required"}), 400

    new_config = data["config"]
    validation_error = validate_config(new_config)
    if validation_error:
        return jsonify({"error": validation_error}), 400

    current_config = config.load_config()
    for key, value in new_config.items():
        if isinstance(value, dict) and isinstance(current_config.get(key), dict):
            section = current_config[key]
            for field, field_value in value.items():
                # A masked value sent back unchanged keeps the stored secret
                if field in SECRET_FIELDS.get(key, []) and field_value == mask_secret(section.get(field, "")):
                    continue
                section[field] = field_value
        else:
            current_config[key] = value

    try:
        config.save_config(current_config)
    except OSError as e:
        logger.error(f"Failed to save settings: {e}")
        return jsonify({"error": "Failed to save settings"}), 500

    if "log_mode" in new_config:
        reload_log_mode()

    logger.info("Settings updated")
    return jsonify({"config": mask_config(current_config)})


def validate_config(new_config: Dict[str, Any]) -> Optional[str]:
    """Return an error message for an invalid settings update, or None."""
    provider = new_config.get("provider")
    if provider is not None and provider not in PROVIDERS:
        return f"Unknown provider: {provider}"

    source = new_config.get("source_language")
    if source is not None and not (isinstance(source, str) and lc.is_valid_language_code(source, allow_auto=True)):
        return f"Unknown source language: {source}"

    target = new_config.get("target_language")
    if target is not None and not (isinstance(target, str) and lc.is_valid_language_code(target)):
        return f"Unknown target language: {target}"

    log_mode = new_config.get("log_mode")
    if log_mode is not None and log_mode not in LOG_MODES:
        return f"Invalid log_mode: {log_mode}"

    timeout = new_config.get("timeout")
    if timeout is not None and (not isinstance(timeout, (int, float)) or isinstance(timeout, bool) or timeout < 0):
        return "timeout must be a non-negative number"

    max_concurrency = new_config.get("max_concurrency")
    if max_concurrency is not None and (
        not isinstance(max_concurrency, int) or isinstance(max_concurrency, bool) or max_concurrency < 0
    ):
        return "max_concurrency must be a non-negative integer"

    overlay = new_config.get("overlay")
    if overlay is not None:
        if not isinstance(overlay, dict):
            return "overlay must be an object"
        for key in ("timeout_ms", "grace_ms"):
            value = overlay.get(key)
            if value is not None and (not isinstance(value, int) or isinstance(value, bool) or value < 0):
                return f"overlay.{key} must be a non-negative integer"

    for provider_id in PROVIDERS:
        section = new_config.get(provider_id)
        if section is not None and not isinstance(section, dict):
            return f"{provider_id} must be an object"

    return None
