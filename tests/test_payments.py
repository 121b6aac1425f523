from datetime import date

import pytest

from flight_reservation.domain.exceptions import InvalidPaymentMethodError, PaymentLimitExceededError
from flight_reservation.infrastructure.factories.payment_factory import PaymentMethodFactory
from flight_reservation.infrastructure.payments.credit_card import CreditCard, CreditCardPayment
from flight_reservation.infrastructure.payments.paypal import PayPalAccountRegistry, PayPalPayment


def test_credit_card_payment_debits_balance(card):
    payment = CreditCardPayment(card)

    assert payment.is_valid()
    assert payment.pay(250.0) is True
    assert card.balance == pytest.approx(750.0)


def test_credit_card_limit_exceeded_raises_and_keeps_balance():
    card = CreditCard("4111111111111111", date(2099, 1, 1), "123", balance=100.0)
    payment = CreditCardPayment(card)

    with pytest.raises(PaymentLimitExceededError) as excinfo:
        payment.pay(150.0)

    assert excinfo.value.amount == 150.0
    assert excinfo.value.available == 100.0
    assert card.balance == 100.0


def test_credit_card_can_be_charged_down_to_zero():
    card = CreditCard("4111111111111111", date(2099, 1, 1), "123", balance=100.0)

    assert CreditCardPayment(card).pay(100.0) is True
    assert card.balance == 0.0


@pytest.mark.parametrize(
    "number, expiration, cvv",
    [
        ("4111111111111111", date(2000, 1, 1), "123"),
        ("4111-ABCD", date(2099, 1, 1), "123"),
        ("4111111111111111", date(2099, 1, 1), "12"),
        ("", date(2099, 1, 1), "123"),
    ],
)
def test_invalid_credit_card_cannot_pay(number, expiration, cvv):
    payment = CreditCardPayment(CreditCard(number, expiration, cvv, balance=500.0))

    assert not payment.is_valid()
    with pytest.raises(InvalidPaymentMethodError):
        payment.pay(10.0)


def test_credit_card_payment_without_card_is_invalid():
    assert not CreditCardPayment(None).is_valid()


def test_card_validity_checked_against_given_date(card):
    assert card.is_valid(on=date(2099, 12, 31))
    assert not card.is_valid(on=date(2100, 1, 1))


def test_negative_amount_rejected(card):
    with pytest.raises(ValueError):
        CreditCardPayment(card).pay(-1.0)


def test_paypal_valid_only_with_matching_credentials():
    accounts = PayPalAccountRegistry({"amy@example.com": "s3cret"})

    assert PayPalPayment("amy@example.com", "s3cret", accounts).is_valid()
    assert not PayPalPayment("amy@example.com", "wrong", accounts).is_valid()
    assert not PayPalPayment("bob@example.com", "s3cret", accounts).is_valid()
    assert not PayPalPayment(None, None, accounts).is_valid()


def test_paypal_pay_requires_valid_credentials():
    accounts = PayPalAccountRegistry()
    payment = PayPalPayment("amy@example.com", "s3cret", accounts)

    with pytest.raises(InvalidPaymentMethodError):
        payment.pay(99.0)

    accounts.register("amy@example.com", "s3cret")
    assert payment.pay(99.0) is True


def test_payment_factory_creates_methods(card):
    accounts = PayPalAccountRegistry({"amy@example.com": "pw"})

    credit = PaymentMethodFactory.create("credit_card", card=card)
    paypal = PaymentMethodFactory.create("PayPal", email="amy@example.com", password="pw", accounts=accounts)

    assert isinstance(credit, CreditCardPayment)
    assert isinstance(paypal, PayPalPayment)
    assert paypal.is_valid()


def test_payment_factory_rejects_unknown_or_incomplete():
    with pytest.raises(ValueError):
        PaymentMethodFactory.create("bitcoin")
    with pytest.raises(ValueError):
        PaymentMethodFactory.create("paypal", email="amy@example.com")
    with pytest.raises(ValueError):
        PaymentMethodFactory.create("credit_card")
