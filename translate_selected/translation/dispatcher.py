"""
Translation Dispatcher Module

Sends selected text to a translator:
- Single-line text goes out as one request
- Multi-line text goes out as one request per non-blank line, concurrently,
  and is joined back in the original line order
"""

import asyncio
from dataclasses import dataclass
from typing import List, Optional

from translate_selected.logger import get_logger
from translate_selected.translation.utils import format_preview
from translate_selected.translators.providers import Translator

logger = get_logger(__name__)


@dataclass(frozen=True)
class TranslationRequest:
    """One user-initiated translation."""
    text: str
    source_language: str
    target_language: str

    def __post_init__(self):
        if not self.text:
            raise ValueError("Translation text must not be empty")

    @property
    def lines(self) -> List[str]:
        return self.text.split("\n")


async def translate_text(
    text: str,
    translator: Translator,
    source_language: str,
    target_language: str,
    max_concurrency: Optional[int] = None,
) -> str:
    """
    Translate text, keeping its line structure.

    Args:
        text: Text to translate
        translator: Provider client
        source_language: Source language code or 'auto'
        target_language: Target language code
        max_concurrency: Upper bound on in-flight line requests (None or 0 = unbounded)

    Returns:
        Translated text with the same number of lines as the input

    Raises:
        TranslationError: The first failing line's error, unchanged
    """
    request = TranslationRequest(text, source_language, target_language)
    lines = request.lines

    if len(lines) == 1:
        translated = await translator.translate(request.text, source_language, target_language)
        logger.info(f"Translate success | length={len(translated)}")
        return translated

    semaphore = asyncio.Semaphore(max_concurrency) if max_concurrency else None

    async def translate_line(line: str) -> str:
        if not line.strip():
            return ""
        try:
            if semaphore is None:
                return await translator.translate(line, source_language, target_language)
            async with semaphore:
                return await translator.translate(line, source_language, target_language)
        except Exception as e:
            logger.error(f'Line translation failed: "{line[:30]}" error={e}')
            raise

    translated_lines = await _gather_in_order([translate_line(line) for line in lines])

    result = "\n".join(translated_lines)
    logger.info(f"Translate success (multi-line) | lines={len(lines)} total_length={len(result)}")
    return result


async def _gather_in_order(coros) -> List[str]:
    """
    Run coroutines concurrently and return their results by position.

    The first failure, in completion order, cancels whatever is still running
    and is re-raised.
    """
    tasks = [asyncio.ensure_future(coro) for coro in coros]
    failures: List[BaseException] = []

    def record_failure(task: asyncio.Future) -> None:
        if not task.cancelled() and task.exception() is not None:
            failures.append(task.exception())

    for task in tasks:
        task.add_done_callback(record_failure)

    try:
        await asyncio.wait(tasks, return_when=asyncio.FIRST_EXCEPTION)
    except asyncio.CancelledError:
        for task in tasks:
            task.cancel()
        raise

    if failures:
        pending = [task for task in tasks if not task.done()]
        for task in pending:
            task.cancel()
        if pending:
            await asyncio.gather(*pending, return_exceptions=True)
        raise failures[0]

    return [task.result() for task in tasks]


def log_request(provider: str, text: str, source_language: str, target_language: str) -> None:
    """Log the start of a translation the way the output channel shows it."""
    logger.info(f"Translate start | provider={provider} source={source_language} target={target_language}")
    logger.info(f'Text length={len(text)} preview="{format_preview(text)}"')
