"""Domain normalization helpers."""


def normalize_category_name(name: str | None) -> str:
    """Turn a category name into a display label.

    Args:
        name: Raw category name, e.g. "cost_of_sales".

    Returns:
        str: Label such as "Cost Of Sales"; empty when no name is given.
    """
    if not name:
        return ""
    cleaned = " ".join(name.replace("_", " ").split())
    return " ".join(word[:1].upper() + word[1:] for word in cleaned.split())


def normalize_company_name(name: str | None) -> str:
    """Strip surrounding whitespace from a company name."""
    if not name:
        return ""
    return name.strip()


__all__ = ["normalize_category_name", "normalize_company_name"]
