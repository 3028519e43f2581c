"""
Calculator State for the Tippr engine.

An interactive calculator is modelled as an immutable CalculatorState and a
pure reducer:

    new_state = reduce(state, event)

Every keystroke, preset tap or toggle becomes an event. Time is carried in
the events themselves (at_ms), so the tip debounce needs no clock and the
reducer stays deterministic.
"""

from dataclasses import dataclass, replace
from decimal import Decimal
from typing import Optional, Union

from .arithmetic import round2
from .breakdown import calculate_breakdown
from .models import Breakdown, RoundMode, ZERO
from .sanitize import sanitize_numeric_text
from .settings import CalculatorSettings, calculator_settings
from .split import clamp_split_count, parse_split_count
from .validation import validate_bill_amount, validate_tip_percent


@dataclass(frozen=True)
class CalculatorState:
    """
    Snapshot of an interactive calculator.

    Attributes:
        bill_input: Sanitized bill text as shown in the input
        bill_amount: Last accepted bill (0 while nothing valid is entered)
        tip_percent: Selected tip percentage
        custom_tip_input: Sanitized custom tip text ("" when a preset is in use)
        tip_warning: Message shown next to the custom tip, if any
        split_enabled: Whether the total is being split
        split_count: Number of people to split between
        round_enabled: Whether the total is snapped to a whole unit
        round_mode: Direction used when rounding is enabled
        error_message: Bill rejection message, "" when the bill is acceptable
        large_amount_warning: Whether the bill triggered the large-amount warning
        drastic_change_warning: Whether the bill moved sharply while splitting
        previous_bill: Last non-zero accepted bill, for change detection
        last_tip_change_ms: Time of the last accepted tip change
    """
    bill_input: str = ""
    bill_amount: Decimal = ZERO
    tip_percent: Decimal = round2(calculator_settings.default_tip_percent)
    custom_tip_input: str = ""
    tip_warning: str = ""
    split_enabled: bool = False
    split_count: int = calculator_settings.clamped_default_split_count
    round_enabled: bool = False
    round_mode: RoundMode = RoundMode.UP
    error_message: str = ""
    large_amount_warning: bool = False
    drastic_change_warning: bool = False
    previous_bill: Decimal = ZERO
    last_tip_change_ms: Optional[int] = None

    @property
    def has_bill(self) -> bool:
        return self.bill_amount > 0


# =============================================================================
# Events
# =============================================================================

@dataclass(frozen=True)
class BillChanged:
    text: str


@dataclass(frozen=True)
class TipPresetSelected:
    percent: Decimal
    at_ms: int


@dataclass(frozen=True)
class CustomTipChanged:
    text: str
    at_ms: int


@dataclass(frozen=True)
class SplitToggled:
    pass


@dataclass(frozen=True)
class SplitCountChanged:
    text: str


@dataclass(frozen=True)
class SplitCountStepped:
    delta: int


@dataclass(frozen=True)
class RoundToggled:
    pass


@dataclass(frozen=True)
class RoundModeChanged:
    mode: RoundMode


Event = Union[
    BillChanged,
    TipPresetSelected,
    CustomTipChanged,
    SplitToggled,
    SplitCountChanged,
    SplitCountStepped,
    RoundToggled,
    RoundModeChanged,
]


# =============================================================================
# Reducer
# =============================================================================

def initial_state(settings: CalculatorSettings = calculator_settings) -> CalculatorState:
    """A fresh calculator built from the given settings."""
    return CalculatorState(
        tip_percent=round2(settings.default_tip_percent),
        split_count=settings.clamped_default_split_count,
    )


def reduce(
    state: CalculatorState,
    event: Event,
    settings: CalculatorSettings = calculator_settings,
) -> CalculatorState:
    """
    Apply one event to a calculator state.

    Args:
        state: Current state (never modified)
        event: The user interaction
        settings: Calculator settings (uses defaults if not provided)

    Returns:
        The next state

    Raises:
        TypeError: If the event type is unknown
    """
    if isinstance(event, BillChanged):
        return _change_bill(state, event.text, settings)

    if isinstance(event, TipPresetSelected):
        cleared = replace(state, custom_tip_input="", tip_warning="")
        if _is_debounced(state, event.at_ms, settings):
            return cleared
        return replace(
            cleared,
            tip_percent=round2(event.percent),
            last_tip_change_ms=event.at_ms,
        )

    if isinstance(event, CustomTipChanged):
        return _change_custom_tip(state, event, settings)

    if isinstance(event, SplitToggled):
        return replace(state, split_enabled=not state.split_enabled)

    if isinstance(event, SplitCountChanged):
        return replace(state, split_count=parse_split_count(event.text, settings))

    if isinstance(event, SplitCountStepped):
        return replace(
            state,
            split_count=clamp_split_count(state.split_count + event.delta, settings),
        )

    if isinstance(event, RoundToggled):
        return replace(state, round_enabled=not state.round_enabled)

    if isinstance(event, RoundModeChanged):
        return replace(state, round_mode=RoundMode(event.mode))

    raise TypeError(f"Unknown calculator event: {type(event).__name__}")


def summarize(
    state: CalculatorState,
    settings: CalculatorSettings = calculator_settings,
) -> Breakdown:
    """Derive the display values for a state."""
    return calculate_breakdown(
        bill=state.bill_amount,
        tip_percent=state.tip_percent,
        round_mode=state.round_mode if state.round_enabled else RoundMode.NONE,
        split_count=state.split_count if state.split_enabled else None,
        settings=settings,
    )


def is_preset_tip(
    state: CalculatorState,
    settings: CalculatorSettings = calculator_settings,
) -> bool:
    """True when the current tip came from a preset rather than the custom input."""
    return not state.custom_tip_input and state.tip_percent in settings.tip_presets


def _is_debounced(state: CalculatorState, at_ms: int, settings: CalculatorSettings) -> bool:
    if state.last_tip_change_ms is None:
        return False
    return at_ms - state.last_tip_change_ms < settings.tip_debounce_ms


def _change_bill(state: CalculatorState, text: str, settings: CalculatorSettings) -> CalculatorState:
    cleaned = sanitize_numeric_text(text)
    validation = validate_bill_amount(cleaned, settings)

    if not validation.is_valid:
        return replace(
            state,
            bill_input=cleaned,
            bill_amount=ZERO,
            error_message=validation.error or settings.invalid_bill_message,
            large_amount_warning=False,
            drastic_change_warning=False,
        )

    bill = validation.sanitized
    previous = state.previous_bill
    drastic = (
        state.split_enabled
        and previous > 0
        and bill > 0
        and abs(bill - previous) > previous * settings.drastic_change_ratio
    )

    return replace(
        state,
        bill_input=cleaned,
        bill_amount=bill,
        error_message="",
        large_amount_warning=validation.warning is not None,
        drastic_change_warning=drastic,
        previous_bill=bill if bill > 0 else previous,
    )


def _change_custom_tip(
    state: CalculatorState,
    event: CustomTipChanged,
    settings: CalculatorSettings,
) -> CalculatorState:
    cleaned = sanitize_numeric_text(event.text)
    validation = validate_tip_percent(cleaned, settings)

    if not (validation.is_valid and validation.sanitized > 0):
        return replace(state, custom_tip_input=cleaned, tip_warning="")

    if validation.capped:
        shown = replace(
            state,
            custom_tip_input=format(settings.max_tip_percent, "f"),
            tip_warning=validation.warning or "",
        )
    else:
        shown = replace(state, custom_tip_input=cleaned, tip_warning="")

    # Only the percentage itself is debounced; the input always reflects the keystroke.
    if _is_debounced(state, event.at_ms, settings):
        return shown

    return replace(shown, tip_percent=validation.sanitized, last_tip_change_ms=event.at_ms)
