"""Data models for pricewatch."""

from pricewatch.models.quote import Quote
from pricewatch.models.alert import AlertConfig, AlertMessage, AlertMode

__all__ = [
    "AlertConfig",
    "AlertMessage",
    "AlertMode",
    "Quote",
]
