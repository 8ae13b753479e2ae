"""Payment method validation and confirmation."""

from __future__ import annotations

import logging
from decimal import Decimal

from rich.console import Console

from restaurant.config import ACCEPTED_PAYMENT_METHODS
from restaurant.errors import InvalidPaymentMethodError
from restaurant.models import PaymentRecord
from restaurant.rendering import format_money

logger = logging.getLogger(__name__)


class PaymentProcessor:
    """Accepts cash, card or UPI; nothing is charged or stored."""

    def __init__(self, console: Console) -> None:
        self.console = console

    def process_payment(self, method: str, amount: Decimal) -> PaymentRecord:
        """
        Validate `method` and report the payment.

        Matching is case-insensitive and ignores surrounding whitespace.
        Raises InvalidPaymentMethodError listing the accepted methods.
        """
        key = method.strip().lower()
        if key not in ACCEPTED_PAYMENT_METHODS:
            logger.info("payment_rejected method=%r", method)
            raise InvalidPaymentMethodError(method, list(ACCEPTED_PAYMENT_METHODS.values()))

        record = PaymentRecord(method=method.strip(), amount=amount)
        logger.info("payment_accepted method=%s amount=%s", key, amount)
        self.console.print(f"Payment of {format_money(amount)} successful via {record.method}")
        return record
