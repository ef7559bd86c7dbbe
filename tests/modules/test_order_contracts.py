"""Order contracts — structural validation of create requests.

Tests cover:
    - Blank / malformed email rejected, surrounding whitespace stripped
    - Non-positive amounts and more than 2 decimal places rejected
    - Unknown keys rejected, contracts immutable
"""

from decimal import Decimal

import pytest
from pydantic import ValidationError

from order_service.modules.orders.contracts import OrderCreate


def test_accepts_json_number_amount():
    request = OrderCreate.model_validate({"email": "a@b.com", "amount": 99.99})
    assert request.amount == Decimal("99.99")


def test_email_is_stripped():
    assert OrderCreate(email="  a@b.com ", amount=Decimal("1")).email == "a@b.com"


@pytest.mark.parametrize("email", ["", "   ", "not-an-email", "a@b", "a b@c.com"])
def test_rejects_bad_email(email):
    with pytest.raises(ValidationError):
        OrderCreate(email=email, amount=Decimal("1"))


@pytest.mark.parametrize("amount", ["0", "-5", "1.234"])
def test_rejects_bad_amount(amount):
    with pytest.raises(ValidationError):
        OrderCreate(email="a@b.com", amount=Decimal(amount))


def test_rejects_unknown_fields():
    with pytest.raises(ValidationError):
        OrderCreate.model_validate(
            {"email": "a@b.com", "amount": 1, "status": "DELIVERED"},
        )


def test_contract_is_frozen():
    request = OrderCreate(email="a@b.com", amount=Decimal("1"))
    with pytest.raises(ValidationError):
        request.amount = Decimal("2")
