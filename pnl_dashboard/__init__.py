"""P&L dashboard package."""
