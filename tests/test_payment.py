from decimal import Decimal

import pytest

from restaurant.errors import InvalidPaymentMethodError
from restaurant.payment import PaymentProcessor


@pytest.mark.parametrize("method", ["cash", "CASH", "Card", "upi", "UpI", " card "])
def test_accepted_methods(console, output, method):
    record = PaymentProcessor(console).process_payment(method, Decimal("28.5075"))
    assert record.method == method.strip()
    assert record.amount == Decimal("28.5075")
    assert f"Payment of $28.51 successful via {method.strip()}" in output()


@pytest.mark.parametrize("method", ["", "cheque", "crypto", "cash card", "cards"])
def test_rejected_methods(console, output, method):
    with pytest.raises(InvalidPaymentMethodError) as excinfo:
        PaymentProcessor(console).process_payment(method, Decimal("10"))
    assert str(excinfo.value) == "Invalid payment method! Available: Cash, Card, UPI"
    assert output() == ""
