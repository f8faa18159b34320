"""Domain constants for P&L reporting."""

CATEGORY_TYPE_INCOME = "income"
CATEGORY_TYPE_EXPENSE = "expense"
CATEGORY_TYPE_PROFIT = "profit"

CATEGORY_TYPES = (
    CATEGORY_TYPE_INCOME,
    CATEGORY_TYPE_EXPENSE,
    CATEGORY_TYPE_PROFIT,
)


__all__ = [
    "CATEGORY_TYPE_INCOME",
    "CATEGORY_TYPE_EXPENSE",
    "CATEGORY_TYPE_PROFIT",
    "CATEGORY_TYPES",
]
