"""Shared fixtures: a test app on in-memory SQLite and fake providers."""

from unittest.mock import MagicMock

import pytest

from kycbank import create_app
from kycbank.config import TestingConfig
from kycbank.utils.bank.types import Confidence, MatchStatus, ResolutionResult
from kycbank.utils.jwt_tokens.generate_jwt import create_jwt_token
from kycbank.utils.verification_utils.base_provider import VerificationProvider
from kycbank.utils.verification_utils.results import (
    BankAccountVerification,
    BvnVerification,
    CustomerRecord,
)

CUSTOMER = {
    "email": "ada@example.com",
    "first_name": "Ada",
    "last_name": "Obi",
    "phone": "08012345678",
}


def make_response(status_code=200, json_body=None, text=None, reason="OK"):
    """Fake ``requests.Response`` with the attributes the provider reads."""
    resp = MagicMock()
    resp.status_code = status_code
    resp.ok = 200 <= status_code < 300
    resp.reason = reason
    resp.text = text if text is not None else ("" if json_body is None else str(json_body))
    if json_body is None:
        resp.json.side_effect = ValueError("no json")
    else:
        resp.json.return_value = json_body
    return resp


class FakeProvider(VerificationProvider):
    """Provider whose answers are set per test."""

    name = "fake"

    def __init__(self):
        self.account_name = "Ada Obi"
        self.verified = True
        self.confidence = Confidence.VERIFIED
        self.bvn_names = ("Ada", "", "Obi")
        self.bvn_verified = True
        self.calls = []

    def create_customer(self, customer):
        self.calls.append(("create_customer", customer))
        return CustomerRecord(
            id="1",
            customer_code="CUS_fake",
            first_name=customer["first_name"],
            last_name=customer["last_name"],
            email=customer["email"],
            phone=customer["phone"],
        )

    def identify_bank(self, account_number):
        self.calls.append(("identify_bank", account_number))
        return ResolutionResult("058", "Guaranty Trust Bank", Confidence.VERIFIED)

    def resolve_account(self, *, account_number, bank_code, customer_name=None, account_name_hint=None):
        from kycbank.utils.bank.name_match import compare_names

        self.calls.append(("resolve_account", customer_name))
        return BankAccountVerification(
            account_number=account_number,
            account_name=self.account_name,
            bank_code=bank_code,
            bank_name="Guaranty Trust Bank",
            verified=self.verified,
            match_status=compare_names(customer_name, self.account_name),
            confidence=self.confidence,
        )

    def match_bvn(self, bvn_data, customer_name=None):
        self.calls.append(("match_bvn", bvn_data))
        first, middle, last = self.bvn_names
        return BvnVerification(
            bvn=bvn_data["bvn"],
            first_name=first,
            middle_name=middle,
            last_name=last,
            verified=self.bvn_verified,
            match_status=MatchStatus.MATCH,
            confidence=Confidence.VERIFIED,
        )


@pytest.fixture
def app():
    return create_app(TestingConfig)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def auth_headers(app):
    with app.app_context():
        token = create_jwt_token("user-1", email="ada@example.com")
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def customer():
    return dict(CUSTOMER)


@pytest.fixture
def fake_provider():
    return FakeProvider()
