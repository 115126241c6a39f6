"""Single-shop inventory, sales and monthly reporting ledger."""

__version__ = "1.0.0"
