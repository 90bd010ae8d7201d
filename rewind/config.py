"""Settings for the demo entry point using pydantic-settings."""

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

from .domain import OVERDRAFT_LIMIT


class RewindSettings(BaseSettings):
    """Settings for running the demos.

    All settings can be configured via environment variables with the
    REWIND_ prefix. For example:
    - REWIND_LOG_LEVEL=DEBUG
    - REWIND_MEMENTO_OPENING_BALANCE=250

    Attributes:
        log_level: Name of the logging level used by ``main``.
            Case-insensitive.
        command_opening_balance: Starting balance for the command demo.
            Cannot be below the overdraft floor.
        memento_opening_balance: Starting balance for the memento demo.
    """

    log_level: str = "INFO"
    command_opening_balance: int = Field(default=0, ge=OVERDRAFT_LIMIT)
    memento_opening_balance: int = 100

    model_config = {"env_prefix": "REWIND_"}

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(getattr(logging, level, None), int):
            raise ValueError(f"Unknown log level {value!r}")
        return level

    @property
    def level(self) -> int:
        """The numeric logging level."""
        return getattr(logging, self.log_level)
