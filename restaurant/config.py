"""Runtime configuration defaults for ordering, billing and payment."""

from __future__ import annotations

from decimal import Decimal

# Upper bound on accepted order lines collected in one customer session.
MAX_ORDER_LINES = 10

TAX_RATE = Decimal("0.05")
BEVERAGE_SURCHARGE_RATE = Decimal("1.05")

# Lower-case keys are matched; values are shown to the customer.
ACCEPTED_PAYMENT_METHODS: dict[str, str] = {
    "cash": "Cash",
    "card": "Card",
    "upi": "UPI",
}

CURRENCY_SYMBOL = "$"
MANAGER_NAME = "Mr. John"
DEFAULT_LOG_LEVEL = "WARNING"
