"""Threshold alert evaluation.

Compares a current price against the session baseline and decides
whether the move is large enough to report. Everything here is a pure
function of its arguments.
"""

import math
from typing import Any, Optional

from pricewatch.models import AlertMessage, AlertMode


def percent_change(baseline: float, current: float) -> Optional[float]:
    """Calculate the change from baseline in percent.

    Args:
        baseline: Reference price.
        current: Latest price.

    Returns:
        Percent change, or None when the baseline is zero or so small
        that the result overflows.
    """
    if baseline == 0:
        return None
    change = (current - baseline) / baseline * 100
    if not math.isfinite(change):
        return None
    return change


def evaluate(
    baseline: float,
    current: float,
    mode: Any,
    threshold: float,
    asset_id: str = "",
) -> Optional[AlertMessage]:
    """Decide whether a price move should raise an alert.

    The comparison is inclusive: a change exactly equal to the threshold
    triggers.

    Args:
        baseline: Price captured when monitoring started.
        current: Latest fetched price.
        mode: AlertMode to apply. Any other value never alerts.
        threshold: Minimum absolute change in USD or percent.
        asset_id: Asset identifier used in the message text.

    Returns:
        AlertMessage if the threshold is reached, None otherwise.
    """
    if mode is AlertMode.ABSOLUTE_DELTA:
        change = current - baseline
    elif mode is AlertMode.PERCENT_DELTA:
        change = percent_change(baseline, current)
        # Undefined for a zero baseline, overflows for a tiny one
        if change is None:
            return None
    else:
        return None

    if abs(change) < threshold:
        return None

    return AlertMessage(
        asset_id=asset_id,
        mode=mode,
        change=change,
        current_price=current,
    )
