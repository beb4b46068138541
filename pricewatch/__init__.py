"""pricewatch - poll a crypto price and alert on large moves."""

__version__ = "0.1.0"
