from __future__ import annotations

from cinevault._redact import redact_for_log
from cinevault.models.checkout import PaymentDetails


def test_login_form_hides_password() -> None:
    assert redact_for_log({"email": "user@example.com", "password": "pw"}) == {
        "email": "user@example.com",
        "password": "<redacted>",
    }


def test_payment_form_hides_every_card_field() -> None:
    details = PaymentDetails(card_number="4242 4242 4242 4242", card_name="Jane", expiry_date="12/30", cvv="123")
    assert redact_for_log(details.model_dump()) == {
        "card_number": "<redacted>",
        "card_name": "<redacted>",
        "expiry_date": "<redacted>",
        "cvv": "<redacted>",
        "method": "credit-card",
    }


def test_nested_form_is_masked_and_original_untouched() -> None:
    form = {"name": "Jane", "card": {"cardNumber": "4242", "card-name": "Jane"}}
    redacted = redact_for_log(form)
    assert redacted == {"name": "Jane", "card": {"cardNumber": "<redacted>", "card-name": "<redacted>"}}
    assert form["card"]["cardNumber"] == "4242"
