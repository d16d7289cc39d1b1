"""
User-facing commands.

TranslateSelected wires a host window to the translator, the dispatcher and
the overlay lifecycle:
- translate_selection: translate the active selection and show it inline
- translate_input: translate prompted text, inline at the cursor or in the
  status bar when no editor is open
"""

from typing import Any, Callable, Dict, List, Optional

from translate_selected.config import OVERLAY_GRACE_MS, OVERLAY_TIMEOUT_MS, get_setting, load_config
from translate_selected.editor import Range, TextEditor, Window
from translate_selected.logger import get_logger
from translate_selected.overlay import OverlayLifecycleManager, max_lines, wrap_columns
from translate_selected.translation import format_error, log_request, translate_text, user_message
from translate_selected.translators import get_translator, resolve_provider

logger = get_logger(__name__)


class TranslateSelected:
    """
    The add-on's commands for one host window.

    Args:
        window: Host window (active editor, messages, input box, events)
        config_loader: Returns the current configuration on every call
        translator_factory: Builds a translator from (config, provider_override)
        overlay: Lifecycle manager; built from the overlay config when omitted
    """

    def __init__(
        self,
        window: Window,
        config_loader: Callable[[], Dict[str, Any]] = load_config,
        translator_factory: Callable[..., Any] = get_translator,
        overlay: Optional[OverlayLifecycleManager] = None,
    ):
        self.window = window
        self._config_loader = config_loader
        self._translator_factory = translator_factory
        if overlay is None:
            config = config_loader()
            overlay = OverlayLifecycleManager(
                timeout_ms=get_setting(config, 'overlay.timeout_ms', OVERLAY_TIMEOUT_MS),
                grace_ms=get_setting(config, 'overlay.grace_ms', OVERLAY_GRACE_MS),
            )
        self.overlay = overlay
        self._request_seq = 0
        self._subscriptions: List[Callable[[], None]] = []

    def activate(self) -> None:
        """Subscribe the overlay's dismissal watchers to the window's events."""
        self._subscriptions = [
            self.window.on_did_change_text_editor_selection.subscribe(self.overlay.on_selection_changed),
            self.window.on_did_change_active_text_editor.subscribe(self.overlay.on_active_editor_changed),
            self.window.on_did_change_text_document.subscribe(self.overlay.on_document_changed),
        ]
        logger.info("translate-selected activated")

    def deactivate(self) -> None:
        self.overlay.clear("deactivate")
        for dispose in self._subscriptions:
            dispose()
        self._subscriptions = []

    async def translate(self, text: str) -> str:
        """Translate text with the configured provider and languages."""
        config = self._config_loader()
        source = config.get('source_language', 'auto')
        target = config.get('target_language', 'zh-CN')
        provider = resolve_provider(config)
        translator = self._translator_factory(config, provider)

        log_request(provider, text, source, target)
        return await translate_text(
            text,
            translator,
            source,
            target,
            max_concurrency=config.get('max_concurrency'),
        )

    def _next_request(self) -> int:
        self._request_seq += 1
        return self._request_seq

    def _is_stale(self, seq: int) -> bool:
        if seq != self._request_seq:
            logger.info(f"Dropping stale translation result | request={seq} latest={self._request_seq}")
            return True
        return False

    def _show_inline(self, editor: TextEditor, anchor: Range, original: str, translated: str) -> None:
        logger.debug(f"Viewport hints | wrap_columns={wrap_columns(editor)} max_lines={max_lines(editor)}")
        self.overlay.show(editor, anchor, original, translated)

    def _report_failure(self, command: str, error: Exception) -> None:
        logger.error(f"{command} failed.")
        logger.error(format_error(error))
        self.window.show_error_message(user_message(error))

    async def translate_selection(self) -> Optional[str]:
        """Translate the active editor's selection and show it above the selection."""
        logger.info("Translate Selection invoked.")
        editor = self.window.active_text_editor
        selection_text = editor.document.get_text(editor.selection.to_range()).strip() if editor else ""

        if not selection_text:
            self.window.show_warning_message("No text selected.")
            return None

        seq = self._next_request()
        try:
            translated = await self.translate(selection_text)
        except Exception as e:
            if not self._is_stale(seq):
                self._report_failure("Translate Selection", e)
            return None

        logger.info(f"Translate Selection translated | length={len(translated)}")
        if self._is_stale(seq):
            return translated

        selection = editor.selection
        anchor = Range.at(selection.active) if selection.is_empty else selection.to_range()
        self._show_inline(editor, anchor, selection_text, translated)
        return translated

    async def translate_input(self) -> Optional[str]:
        """Prompt for text, translate it, and show it at the cursor."""
        logger.info("Translate Input invoked.")
        text = await self.window.show_input_box("Enter text to translate")
        if not text:
            return None

        seq = self._next_request()
        try:
            translated = await self.translate(text)
        except Exception as e:
            if not self._is_stale(seq):
                self._report_failure("Translate Input", e)
            return None

        if self._is_stale(seq):
            return translated

        editor = self.window.active_text_editor
        if editor is not None:
            self._show_inline(editor, Range.at(editor.selection.active), text, translated)
        else:
            self.window.set_status_bar_message(translated, self.overlay.timeout_ms)
        return translated
