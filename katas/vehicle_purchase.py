"""Advice on buying and reselling vehicles."""

__all__ = ["needs_license", "choose_vehicle", "calculate_resell_price"]

_LICENSED_KINDS = frozenset({"car", "truck"})


def needs_license(kind: str) -> bool:
    """Return True if driving a vehicle of this kind needs a licence."""
    return kind in _LICENSED_KINDS


def choose_vehicle(option1: str, option2: str) -> str:
    """Recommend whichever option comes first in lexicographical order."""
    return f"{min(option1, option2)} is clearly the better choice."


def calculate_resell_price(original_price: float, age: float) -> float:
    """Return the resell price: 80% under 3 years, 70% under 10, otherwise 50%."""
    if age < 3:
        discount = 0.8
    elif age < 10:
        discount = 0.7
    else:
        discount = 0.5
    return discount * original_price