"""Currency conversion between form values and stored minor units."""
from decimal import Decimal, ROUND_HALF_UP

CENTS = Decimal("0.01")
# appointment_price_in_cents is a 32-bit integer column
MAX_PRICE = Decimal("21474836.47")


def to_cents(amount: Decimal) -> int:
    """150.5 -> 15050. Half-up rounding for sub-cent input."""
    return int((Decimal(amount) * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def from_cents(cents: int) -> Decimal:
    """15050 -> Decimal('150.50'), the value an edit form is pre-filled with."""
    return (Decimal(cents) / 100).quantize(CENTS)
