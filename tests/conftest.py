import asyncio
import json

import pytest

from translate_selected.config import CONFIG_ENV_VAR, DEFAULT_CONFIG


class FakeClock:
    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, ms: float) -> None:
        self.now += ms / 1000


class FakeHandle:
    def __init__(self, delay, callback, args):
        self.delay = delay
        self.callback = callback
        self.args = args
        self.cancelled = False

    def cancel(self):
        self.cancelled = True


class FakeScheduler:
    """Stands in for loop.call_later; fire() runs a handle by hand."""

    def __init__(self):
        self.handles = []

    def call_later(self, delay, callback, *args):
        handle = FakeHandle(delay, callback, args)
        self.handles.append(handle)
        return handle

    @property
    def pending(self):
        return [h for h in self.handles if not h.cancelled]

    def fire(self, handle):
        handle.callback(*handle.args)


class FakeTranslator:
    """Records calls; per-text delays, results and failures are configurable."""

    def __init__(self, results=None, failures=None, delays=None):
        self.results = results or {}
        self.failures = failures or {}
        self.delays = delays or {}
        self.calls = []

    async def translate(self, text, source, target):
        self.calls.append((text, source, target))
        await asyncio.sleep(self.delays.get(text, 0))
        if text in self.failures:
            raise self.failures[text]
        return self.results.get(text, f"<{text}>")


@pytest.fixture(autouse=True)
def config_file(tmp_path, monkeypatch):
    """Point configuration at a throwaway file for every test."""
    path = tmp_path / "config.json"
    monkeypatch.setenv(CONFIG_ENV_VAR, str(path))
    return path


@pytest.fixture
def write_config(config_file):
    def _write(**overrides):
        data = json.loads(json.dumps(DEFAULT_CONFIG))
        for key, value in overrides.items():
            if isinstance(value, dict) and isinstance(data.get(key), dict):
                data[key].update(value)
            else:
                data[key] = value
        config_file.write_text(json.dumps(data), encoding="utf-8")
        return data
    return _write


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def scheduler():
    return FakeScheduler()
