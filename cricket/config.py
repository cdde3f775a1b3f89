"""Settings for the Cricket Darts console"""

import os
import logging
import tomllib
from pathlib import Path
from typing import List, Optional, Union

from dotenv import load_dotenv
from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent / "cricket.toml"


class AppSettings(BaseModel):
    """Startup settings; the game rules themselves are fixed"""
    demo_players: List[str] = Field(
        default_factory=lambda: ["Player 1", "Player 2"],
        description="Names added to the roster at startup"
    )
    log_level: str = Field("INFO", description="Root logging level")


def load_config_toml(path: Union[str, Path]) -> dict:
    """Load the [cricket] table from a TOML file."""
    with open(path, "rb") as f:
        return tomllib.load(f).get("cricket", {})


def load_settings(path: Optional[Union[str, Path]] = None) -> AppSettings:
    """
    Build settings from the TOML file, then environment overrides.

    An explicit path must exist; the default file is optional.
    """
    load_dotenv()

    values: dict = {}
    if path is not None:
        values.update(load_config_toml(path))
    elif DEFAULT_CONFIG_PATH.exists():
        values.update(load_config_toml(DEFAULT_CONFIG_PATH))

    demo_players = os.getenv("CRICKET_DEMO_PLAYERS")
    if demo_players is not None:
        values["demo_players"] = [name.strip() for name in demo_players.split(",") if name.strip()]

    log_level = os.getenv("CRICKET_LOG_LEVEL")
    if log_level:
        values["log_level"] = log_level

    settings = AppSettings(**values)
    logger.debug(f"Loaded settings: {settings.model_dump()}")
    return settings
