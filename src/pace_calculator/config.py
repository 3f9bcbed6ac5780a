"""Configuration loaded from the environment and optional .env files."""

import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel

from pace_calculator.utils.formatting import DEFAULT_NAME_WIDTH

DEFAULT_LOG_LEVEL = "WARNING"
LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseModel):
    """Runtime settings for the CLI and MCP server."""

    log_level: str = DEFAULT_LOG_LEVEL
    name_width: int = DEFAULT_NAME_WIDTH


def _log_level_from_env() -> str:
    level = os.environ.get("PACE_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper()
    if level not in LOG_LEVELS:
        return DEFAULT_LOG_LEVEL
    return level


def _name_width_from_env() -> int:
    raw = os.environ.get("PACE_NAME_WIDTH")
    if not raw:
        return DEFAULT_NAME_WIDTH
    try:
        width = int(raw)
    except ValueError:
        return DEFAULT_NAME_WIDTH
    return width if width > 0 else DEFAULT_NAME_WIDTH


def load_settings(env_file: Optional[str] = None) -> Settings:
    """
    Build settings from environment variables.

    Args:
        env_file: Path to a .env file. When given, its values override the
            current environment; otherwise a .env in the working directory
            is loaded without overriding.

    Returns:
        Settings instance
    """
    if env_file:
        load_dotenv(dotenv_path=env_file, override=True)
    else:
        load_dotenv()

    return Settings(log_level=_log_level_from_env(), name_width=_name_width_from_env())
