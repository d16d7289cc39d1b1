"""Translation and overlay geometry API routes."""

from __future__ import annotations

import asyncio
from dataclasses import asdict
from typing import Any, Dict

from flask import Blueprint, jsonify, request

import translate_selected.config as config
import translate_selected.language_codes as lc
from translate_selected.editor import Position, Range
from translate_selected.logger import get_logger
from translate_selected.overlay import build_overlay, render_decorations, wrap_line_with_indent
from translate_selected.overlay.geometry import split_lines
from translate_selected.translation import format_error, log_request, translate_text
from translate_selected.translators import (
    ConfigurationError,
    ProviderError,
    TranslationError,
    get_translator,
    resolve_provider,
)

translation_bp = Blueprint("translation", __name__)
logger = get_logger(__name__)


def _error_response(error: TranslationError, status: int):
    body: Dict[str, Any] = {"error": str(error), "code": error.code}
    if error.details:
        body["details"] = error.details
    return jsonify(body), status


def _serialize_decoration(decoration: Dict[str, Any]) -> Dict[str, Any]:
    anchor = decoration["range"].start
    return {
        "line": anchor.line,
        "character": anchor.character,
        "render_options": decoration["render_options"],
    }


@translation_bp.post("/translate")
def translate():
    """Translate text with the configured (or requested) provider."""
    data: Dict[str, Any] = request.get_json(silent=True) or {}
    text = data.get("text")
    if not isinstance(text, str) or not text.strip():
        return jsonify({"error": "Field 'text' is required"}), 400

    current_config = config.load_config()
    source = data.get("source_language") or current_config.get("source_language", "auto")
    target = data.get("target_language") or current_config.get("target_language", "zh-CN")
    if not isinstance(source, str) or not lc.is_valid_language_code(source, allow_auto=True):
        return jsonify({"error": f"Unknown source language: {source}"}), 400
    if not isinstance(target, str) or not lc.is_valid_language_code(target):
        return jsonify({"error": f"Unknown target language: {target}"}), 400

    provider = resolve_provider(current_config, data.get("provider"))
    translator = get_translator(current_config, provider)

    log_request(provider, text, source, target)
    try:
        translated = asyncio.run(translate_text(
            text,
            translator,
            source,
            target,
            max_concurrency=current_config.get("max_concurrency"),
        ))
    except ConfigurationError as e:
        logger.warning("Translation configuration error: %s", e)
        return _error_response(e, 400)
    except ProviderError as e:
        logger.error(format_error(e))
        return _error_response(e, 502)

    return jsonify({
        "translation": translated,
        "provider": provider,
        "source_language": source,
        "target_language": target,
    })


@translation_bp.post("/overlay")
def overlay():
    """Compute overlay rows and decorations for a translation."""
    data: Dict[str, Any] = request.get_json(silent=True) or {}
    original = data.get("original")
    translated = data.get("translation")
    if not isinstance(original, str) or not isinstance(translated, str):
        return jsonify({"error": "Fields 'original' and 'translation' must be strings"}), 400

    try:
        start = Position(int(data.get("start_line", 0)), int(data.get("start_character", 0)))
        max_columns = data.get("max_columns")
        max_columns = int(max_columns) if max_columns is not None else None
    except (TypeError, ValueError):
        return jsonify({"error": "Line, character and column values must be integers"}), 400
    if start.line < 0 or start.character < 0:
        return jsonify({"error": "Line and character must not be negative"}), 400

    rows = build_overlay(Range.at(start), original, translated)
    body: Dict[str, Any] = {
        "lines": [asdict(row) for row in rows],
        "decorations": [_serialize_decoration(d) for d in render_decorations(rows)],
        "width": rows[0].visual_width,
    }
    if max_columns is not None:
        body["wrapped"] = [
            chunk
            for line in split_lines(translated)
            for chunk in wrap_line_with_indent(line, max_columns)
        ]

    logger.debug(f"Overlay computed | lines={len(rows)} width={body['width']}")
    return jsonify(body)
