from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from turnguard_core.reasoning import DEFAULT_PLACEHOLDER_TEXT
from turnguard_core.results import ContextStrategy, ValidationOptions


class TurnGuardConfig(BaseSettings):
    """Configuration for TurnGuard.

    Settings can be provided via environment variables with TURNGUARD_ prefix.
    Per-call options and strategies override these defaults.
    """

    model_config = SettingsConfigDict(
        env_prefix="TURNGUARD_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Pairing validation defaults
    fix_errors: bool = True
    log_errors: bool = True

    # Default strategy when the caller passes none
    use_extended_thinking: bool = False

    # Block synthesized for tool-invoking assistant turns without reasoning
    placeholder_reasoning_text: str = Field(default=DEFAULT_PLACEHOLDER_TEXT, min_length=1)
    placeholder_reasoning_type: Literal["reasoning", "thinking"] = "reasoning"

    def validation_options(self) -> ValidationOptions:
        """Get the default validate/fix options."""
        return ValidationOptions(fix_errors=self.fix_errors, log_errors=self.log_errors)

    def default_strategy(self) -> ContextStrategy:
        """Get the strategy used when none is supplied."""
        return ContextStrategy(use_extended_thinking=self.use_extended_thinking)
