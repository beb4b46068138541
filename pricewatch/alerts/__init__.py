"""Alert evaluation for pricewatch."""

from pricewatch.alerts.evaluator import evaluate, percent_change

__all__ = ["evaluate", "percent_change"]
