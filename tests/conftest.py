"""Shared fixtures for pace calculator tests."""

import pytest


class ToolRecorder:
    """Stand-in for FastMCP that keeps registered tool functions by name."""

    def __init__(self):
        self.tools = {}

    def tool(self):
        def decorator(fn):
            self.tools[fn.__name__] = fn
            return fn

        return decorator


@pytest.fixture
def tool_recorder() -> ToolRecorder:
    """Recorder with every pace tool registered."""
    from pace_calculator.tools import register_all_tools

    recorder = ToolRecorder()
    register_all_tools(recorder)
    return recorder


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Run every test without PACE_* variables and away from any local .env."""
    monkeypatch.delenv("PACE_LOG_LEVEL", raising=False)
    monkeypatch.delenv("PACE_NAME_WIDTH", raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def three_hour_marathon_pace() -> float:
    """Seconds per km for a 6:52 per mile pace."""
    from pace_calculator.converter import convert_to_per_km

    return convert_to_per_km(6 * 60 + 52)


@pytest.fixture(autouse=True)
def reset_logger():
    """Drop loguru sinks added by a test so later tests never write to a closed capture."""
    yield
    from loguru import logger

    logger.remove()
