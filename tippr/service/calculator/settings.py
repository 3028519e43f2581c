"""
Calculator Settings for the Tippr engine.

This module contains every tunable constant of the calculation engine:
validation thresholds, the tip cap, split bounds, the card-number heuristic
and the user-facing messages. They can be adjusted via environment variables
without touching the engine code.

Environment variables use the CALCULATOR_ prefix:
    CALCULATOR_LARGE_AMOUNT_THRESHOLD=5000
    CALCULATOR_MAX_SPLIT_COUNT=20
    CALCULATOR_TIP_PRESETS_JSON=[10,15,20]

Usage:
    from tippr.service.calculator.settings import calculator_settings

    # Use default settings (loaded from env)
    cap = calculator_settings.max_tip_percent

    # Or create custom settings for testing
    custom = CalculatorSettings(max_split_count=10)
"""

import json
from decimal import Decimal
from functools import lru_cache
from typing import List

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class CalculatorSettings(BaseSettings):
    """
    Configurable parameters for the tip calculation engine.

    All settings can be overridden via environment variables with CALCULATOR_ prefix.
    All monetary values are in whole currency units (dollars).
    """

    model_config = SettingsConfigDict(
        env_prefix="CALCULATOR_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # === Bill Validation ===
    large_amount_threshold: Decimal = Field(
        default=Decimal("10000"),
        gt=0,
        description="Bills above this are accepted with a warning (dollars)",
    )
    max_bill_amount: Decimal = Field(
        default=Decimal("1000000"),
        gt=0,
        description="Bills above this are rejected as implausible (dollars)",
    )
    card_number_min_digits: int = Field(
        default=13,
        ge=1,
        description="Digit count at which undotted input is treated as a pasted card number",
    )

    # === Tip Validation ===
    max_tip_percent: Decimal = Field(
        default=Decimal("100"),
        gt=0,
        description="Tip percentages above this are capped",
    )
    default_tip_percent: Decimal = Field(
        default=Decimal("18"),
        ge=0,
        description="Tip percentage selected before the user picks one",
    )
    tip_presets_json: str = Field(
        default="[15, 18, 20, 25]",
        description="Preset tip percentages as a JSON array of numbers",
    )
    tip_debounce_ms: int = Field(
        default=500,
        ge=0,
        description="Tip changes arriving sooner than this after the last one are ignored",
    )

    # === Split ===
    min_split_count: int = Field(
        default=1,
        ge=1,
        description="Smallest number of people a total can be split between",
    )
    max_split_count: int = Field(
        default=50,
        ge=1,
        description="Largest number of people a total can be split between",
    )
    default_split_count: int = Field(
        default=2,
        ge=1,
        description="Split count shown when splitting is first enabled",
    )
    drastic_change_ratio: Decimal = Field(
        default=Decimal("0.5"),
        gt=0,
        description="Bill changes larger than this fraction of the previous bill are flagged while splitting",
    )

    # === Messages ===
    invalid_bill_message: str = "Please enter a valid bill amount"
    invalid_tip_message: str = "Please enter a valid tip percentage"
    large_amount_warning: str = "That's a large amount - continue?"
    tip_capped_warning: str = "Maximum tip is {max_tip}%"

    @field_validator("tip_presets_json")
    @classmethod
    def validate_presets_json(cls, v: str) -> str:
        """Validate that presets JSON is a list of non-negative numbers."""
        try:
            presets = json.loads(v)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON: {e}")
        if not isinstance(presets, list) or not presets:
            raise ValueError("Presets must be a non-empty list")
        for preset in presets:
            if isinstance(preset, bool) or not isinstance(preset, (int, float)):
                raise ValueError(f"Preset must be a number: {preset!r}")
            if preset < 0:
                raise ValueError(f"Preset cannot be negative: {preset}")
        return v

    @model_validator(mode="after")
    def validate_bounds(self) -> "CalculatorSettings":
        """Cross-field checks on thresholds and split bounds."""
        if self.large_amount_threshold >= self.max_bill_amount:
            raise ValueError(
                f"large_amount_threshold ({self.large_amount_threshold}) must be "
                f"below max_bill_amount ({self.max_bill_amount})"
            )
        if self.min_split_count > self.max_split_count:
            raise ValueError(
                f"min_split_count ({self.min_split_count}) > "
                f"max_split_count ({self.max_split_count})"
            )
        if self.default_tip_percent > self.max_tip_percent:
            raise ValueError("default_tip_percent cannot exceed max_tip_percent")
        return self

    @property
    def tip_presets(self) -> List[Decimal]:
        """Preset tip percentages, in the configured order."""
        return [Decimal(str(p)) for p in json.loads(self.tip_presets_json)]

    @property
    def clamped_default_split_count(self) -> int:
        """Default split count forced into the configured bounds."""
        return max(self.min_split_count, min(self.max_split_count, self.default_split_count))


@lru_cache
def get_calculator_settings() -> CalculatorSettings:
    """Get cached calculator settings instance."""
    return CalculatorSettings()


calculator_settings = get_calculator_settings()
