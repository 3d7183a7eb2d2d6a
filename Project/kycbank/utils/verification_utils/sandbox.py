import logging
from datetime import datetime, timezone

from kycbank.utils.bank.classifier import classify_account_number
from kycbank.utils.bank.types import Confidence, MatchStatus, ResolutionResult
from kycbank.utils.helpers.references import generate_customer_code
from kycbank.utils.verification_utils.base_provider import VerificationProvider
from kycbank.utils.verification_utils.results import (
    BankAccountVerification,
    BvnVerification,
    CustomerRecord,
)

logger = logging.getLogger(__name__)


class SandboxVerificationProvider(VerificationProvider):
    """
    Offline stand-in for Paystack.

    Returns synthetic results so sandbox keys never burn the provider's
    daily test quota.
    """

    name = "sandbox"

    def create_customer(self, customer: dict) -> CustomerRecord:
        code = generate_customer_code()
        now = datetime.now(timezone.utc).isoformat()
        logger.debug("sandbox customer %s created", code)

        return CustomerRecord(
            id=code,
            customer_code=code,
            first_name=customer["first_name"],
            last_name=customer["last_name"],
            email=customer["email"],
            phone=customer["phone"],
            metadata={},
            domain="test",
            created_at=now,
            updated_at=now,
        )

    def identify_bank(self, account_number: str) -> ResolutionResult:
        return classify_account_number(account_number)

    def resolve_account(
        self,
        *,
        account_number: str,
        bank_code: str,
        customer_name: str | None = None,
        account_name_hint: str | None = None,
    ) -> BankAccountVerification:
        return BankAccountVerification(
            account_number=account_number,
            account_name=account_name_hint or customer_name or "Test User",
            bank_code=bank_code,
            bank_name="Test Bank",
            verified=True,
            match_status=MatchStatus.MATCH,
            confidence=Confidence.SIMULATED,
        )

    def match_bvn(self, bvn_data: dict, customer_name: str | None = None) -> BvnVerification:
        return BvnVerification(
            bvn=bvn_data["bvn"],
            first_name="Test",
            last_name="User",
            middle_name="Mock",
            date_of_birth="1990-01-01",
            phone="+2348012345678",
            registration_date=datetime.now(timezone.utc).isoformat(),
            gender="Male",
            email="test@example.com",
            nationality="Nigerian",
            residential_address="123 Test Street, Lagos",
            state_of_origin="Lagos",
            lga_of_origin="Lagos Mainland",
            lga_of_residence="Lagos Mainland",
            marital_status="Single",
            nin="12345678901",
            verified=True,
            match_status=MatchStatus.MATCH,
            confidence=Confidence.SIMULATED,
        )
