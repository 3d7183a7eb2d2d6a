import logging
from datetime import datetime, timezone

from kycbank.Database.kyc_application import (
    CUSTOMER_CREATED,
    IN_PROGRESS,
    VERIFIED,
    KycApplication,
)
from kycbank.Database.verification_record import VerificationRecord
from kycbank.extensions import session_scope
from kycbank.utils.bank.types import Confidence, MatchStatus
from kycbank.utils.bank.validators import (
    require_account_number,
    require_bank_account_data,
    require_bvn_data,
    require_customer_data,
)
from kycbank.utils.verification_utils.errors import ApplicationNotFound, KycStateError

logger = logging.getLogger(__name__)


class KycService:
    """
    Runs the KYC steps for one user at a time:
    customer creation -> bank account resolution -> BVN match.

    Provider calls happen outside database transactions; each attempt is
    independent and nothing is retried automatically.
    """

    def __init__(self, provider, *, accept_heuristic: bool = True, require_name_match: bool = False):
        self.provider = provider
        self.accept_heuristic = accept_heuristic
        self.require_name_match = require_name_match

    @classmethod
    def from_config(cls, provider, config):
        return cls(
            provider,
            accept_heuristic=config.get("KYC_ACCEPT_HEURISTIC", True),
            require_name_match=config.get("KYC_REQUIRE_NAME_MATCH", False),
        )

    # -------------------------
    # HELPERS
    # -------------------------
    @staticmethod
    def _get_application(session, user_id, *, lock=False) -> KycApplication:
        query = session.query(KycApplication).filter_by(user_id=str(user_id))
        if lock:
            query = query.with_for_update()
        application = query.first()

        if not application:
            raise ApplicationNotFound("KYC not started. Create a customer first.")
        return application

    @staticmethod
    def _ensure_open(application):
        if application.status == VERIFIED:
            raise KycStateError("KYC already verified")

    def _accepts(self, verification) -> bool:
        trusted = verification.verified or (
            verification.confidence is Confidence.HEURISTIC and self.accept_heuristic
        )
        if not trusted:
            return False

        if self.require_name_match and verification.match_status is MatchStatus.NO_MATCH:
            return False

        return True

    @staticmethod
    def _advance(application):
        if application.bvn_verified and application.bank_verified:
            application.status = VERIFIED
            application.verified_at = datetime.now(timezone.utc)
        else:
            application.status = IN_PROGRESS

    # -------------------------
    # STEP 1: CUSTOMER
    # -------------------------
    def start(self, user_id, customer: dict) -> dict:
        require_customer_data(customer)

        with session_scope() as session:
            existing = session.query(KycApplication).filter_by(user_id=str(user_id)).first()
            if existing:
                self._ensure_open(existing)

        record = self.provider.create_customer(customer)

        with session_scope() as session:
            application = session.query(KycApplication).filter_by(user_id=str(user_id)).first()
            if application is None:
                application = KycApplication(user_id=str(user_id))
                session.add(application)

            application.email = customer["email"]
            application.first_name = customer["first_name"]
            application.last_name = customer["last_name"]
            application.phone = customer["phone"]
            application.customer_code = record.customer_code
            application.provider = self.provider.name
            application.status = CUSTOMER_CREATED

            # new customer details invalidate earlier checks
            application.bvn_verified = False
            application.bank_verified = False
            session.flush()

            logger.info("KYC customer %s created for user %s", record.customer_code, user_id)
            return {
                "customer": record.to_dict(),
                "application": application.to_dict(),
            }

    # -------------------------
    # BANK IDENTIFICATION
    # -------------------------
    def identify_bank(self, account_number: str):
        require_account_number(account_number)
        return self.provider.identify_bank(account_number)

    # -------------------------
    # STEP 2: BANK ACCOUNT
    # -------------------------
    def verify_bank_account(self, user_id, bank_account: dict) -> dict:
        require_bank_account_data(bank_account)

        with session_scope() as session:
            application = self._get_application(session, user_id)
            self._ensure_open(application)
            # prefer the identity-verified name once the BVN step has passed
            if application.bvn_verified and application.bvn_name:
                compare_name = application.bvn_name
            else:
                compare_name = application.customer_name

        verification = self.provider.resolve_account(
            account_number=bank_account["account_number"],
            bank_code=bank_account["bank_code"],
            customer_name=compare_name,
            account_name_hint=bank_account.get("account_name"),
        )
        accepted = self._accepts(verification)

        with session_scope() as session:
            application = self._get_application(session, user_id, lock=True)
            record = VerificationRecord.from_verification(
                application, verification, provider=self.provider.name, accepted=accepted
            )
            session.add(record)

            if accepted:
                application.bank_code = verification.bank_code
                application.bank_name = verification.bank_name
                application.account_number = verification.account_number
                application.account_name = verification.account_name
                application.bank_verified = True
            self._advance(application)
            session.flush()

            if verification.confidence is Confidence.HEURISTIC:
                logger.warning(
                    "Bank account for user %s checked heuristically (accepted=%s)", user_id, accepted
                )
            else:
                logger.info(
                    "Bank account verification for user %s: %s, accepted=%s",
                    user_id, verification.match_status.value, accepted,
                )

            return {
                "verification": verification.to_dict(),
                "record_id": record.id,
                "accepted": accepted,
                "application": application.to_dict(),
            }

    # -------------------------
    # STEP 3: BVN
    # -------------------------
    def verify_bvn(self, user_id, bvn_data: dict) -> dict:
        require_bvn_data(bvn_data)

        with session_scope() as session:
            application = self._get_application(session, user_id)
            self._ensure_open(application)
            customer_name = application.customer_name
            payload = {
                "bvn": bvn_data["bvn"],
                "first_name": bvn_data.get("first_name") or application.first_name,
                "last_name": bvn_data.get("last_name") or application.last_name,
                "middle_name": bvn_data.get("middle_name") or "",
            }

        verification = self.provider.match_bvn(payload, customer_name=customer_name)
        accepted = self._accepts(verification)

        with session_scope() as session:
            application = self._get_application(session, user_id, lock=True)
            application.bvn = verification.bvn
            application.bvn_name = verification.full_name
            application.bvn_verified = accepted
            self._advance(application)
            session.flush()

            logger.info(
                "BVN verification for user %s: %s, accepted=%s",
                user_id, verification.match_status.value, accepted,
            )
            return {
                "verification": verification.to_dict(),
                "accepted": accepted,
                "application": application.to_dict(),
            }

    # -------------------------
    # STATUS
    # -------------------------
    def status(self, user_id) -> dict:
        with session_scope() as session:
            application = self._get_application(session, user_id)
            return application.to_dict(include_records=True)
