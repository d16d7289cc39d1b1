"""translate-selected: translate editor selections and show the result inline."""

__version__ = "0.2.0"
