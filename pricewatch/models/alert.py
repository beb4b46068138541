"""Alert configuration and message models."""

import math
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, field_validator


class AlertMode(str, Enum):
    """How the price change is measured against the threshold."""

    ABSOLUTE_DELTA = "absolute"
    PERCENT_DELTA = "percent"

    @classmethod
    def from_selector(cls, selector: str) -> Optional["AlertMode"]:
        """Map the interactive menu choice ("1" or "2") to a mode.

        Args:
            selector: Raw text entered at the prompt.

        Returns:
            The matching mode, or None if the selector is not recognized.
        """
        return _SELECTORS.get(selector.strip())


_SELECTORS = {
    "1": AlertMode.ABSOLUTE_DELTA,
    "2": AlertMode.PERCENT_DELTA,
}


class AlertConfig(BaseModel):
    """Settings for one monitoring session."""

    asset_id: str = Field(..., min_length=1, description="API asset identifier")
    mode: AlertMode = Field(..., description="Absolute or percent change")
    threshold: float = Field(..., gt=0, description="Change that triggers an alert")
    poll_interval: float = Field(default=30.0, gt=0, description="Seconds between polls")

    model_config = {"frozen": True}

    @field_validator("threshold", "poll_interval")
    @classmethod
    def _must_be_finite(cls, value: float) -> float:
        if not math.isfinite(value):
            raise ValueError("must be a finite number")
        return value


class AlertMessage(BaseModel):
    """A triggered alert, ready to be shown to the user."""

    asset_id: str
    mode: AlertMode
    change: float = Field(..., description="Change in USD or percent, depending on mode")
    current_price: float

    model_config = {"frozen": True}

    @property
    def text(self) -> str:
        if self.mode is AlertMode.PERCENT_DELTA:
            change = f"{self.change:.2f}%"
        else:
            change = f"${self.change:.2f}"
        return (
            f"Alert! {self.asset_id} price changed by {change}. "
            f"Current price: ${self.current_price:.2f}"
        )
