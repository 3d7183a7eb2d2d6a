from datetime import datetime, timedelta, timezone

import pytest

from kycbank.Database.verification_record import VerificationRecord
from kycbank.extensions import session_scope
from kycbank.utils.bank.types import Confidence
from kycbank.utils.kyc.service import KycService
from kycbank.utils.verification_utils.errors import (
    ApplicationNotFound,
    KycStateError,
    KycValidationError,
)

BANK_ACCOUNT = {"bank_code": "058", "country_code": "NG", "account_number": "0123456789"}
BVN = {"bvn": "12345678901"}


@pytest.fixture
def service(app, fake_provider):
    return KycService(fake_provider)


def test_start_creates_application(service, customer):
    result = service.start("user-1", customer)

    assert result["customer"]["customer_code"] == "CUS_fake"
    assert result["application"]["status"] == "customer_created"
    assert result["application"]["provider"] == "fake"


def test_start_validates_before_calling_provider(service, fake_provider, customer):
    customer["email"] = ""
    with pytest.raises(KycValidationError):
        service.start("user-1", customer)

    assert fake_provider.calls == []


def test_steps_require_started_application(service):
    with pytest.raises(ApplicationNotFound):
        service.verify_bank_account("nobody", BANK_ACCOUNT)
    with pytest.raises(ApplicationNotFound):
        service.verify_bvn("nobody", BVN)
    with pytest.raises(ApplicationNotFound):
        service.status("nobody")


def test_full_flow_reaches_verified(service, customer):
    service.start("user-1", customer)

    bvn = service.verify_bvn("user-1", BVN)
    assert bvn["accepted"] is True
    assert bvn["application"]["status"] == "in_progress"

    bank = service.verify_bank_account("user-1", BANK_ACCOUNT)
    assert bank["accepted"] is True
    assert bank["verification"]["match_status"] == "match"

    status = service.status("user-1")
    assert status["status"] == "verified"
    assert status["verified_at"] is not None
    assert status["bank_account"]["account_name"] == "Ada Obi"
    assert [r["accepted"] for r in status["records"]] == [True]


def test_verified_at_is_utc(service, customer):
    service.start("user-1", customer)
    service.verify_bvn("user-1", BVN)

    result = service.verify_bank_account("user-1", BANK_ACCOUNT)

    verified_at = datetime.fromisoformat(result["application"]["verified_at"]).replace(tzinfo=None)
    now = datetime.now(timezone.utc).replace(tzinfo=None)
    assert abs(now - verified_at) < timedelta(minutes=1)


def test_bank_step_compares_against_bvn_name(service, fake_provider, customer):
    fake_provider.bvn_names = ("Adaeze", "Ngozi", "Obi")
    service.start("user-1", customer)
    service.verify_bvn("user-1", BVN)

    service.verify_bank_account("user-1", BANK_ACCOUNT)

    assert ("resolve_account", "Adaeze Ngozi Obi") in fake_provider.calls


def test_verified_application_cannot_restart(service, customer):
    service.start("user-1", customer)
    service.verify_bvn("user-1", BVN)
    service.verify_bank_account("user-1", BANK_ACCOUNT)

    with pytest.raises(KycStateError):
        service.start("user-1", customer)
    with pytest.raises(KycStateError):
        service.verify_bank_account("user-1", BANK_ACCOUNT)


def test_unverified_account_is_recorded_but_not_accepted(service, fake_provider, customer):
    fake_provider.verified = False
    service.start("user-1", customer)

    result = service.verify_bank_account("user-1", BANK_ACCOUNT)

    assert result["accepted"] is False
    status = service.status("user-1")
    assert status["bank_verified"] is False
    assert status["bank_account"] is None
    assert len(status["records"]) == 1


@pytest.mark.parametrize("accept_heuristic", [True, False])
def test_heuristic_results_follow_config(app, fake_provider, customer, accept_heuristic):
    fake_provider.verified = False
    fake_provider.confidence = Confidence.HEURISTIC
    service = KycService(fake_provider, accept_heuristic=accept_heuristic)
    service.start("user-1", customer)

    result = service.verify_bank_account("user-1", BANK_ACCOUNT)

    assert result["accepted"] is accept_heuristic
    assert result["verification"]["confidence"] == "heuristic"


def test_require_name_match_rejects_no_match(app, fake_provider, customer):
    fake_provider.account_name = "Chidi Eze"
    service = KycService(fake_provider, require_name_match=True)
    service.start("user-1", customer)

    result = service.verify_bank_account("user-1", BANK_ACCOUNT)

    assert result["verification"]["match_status"] == "no_match"
    assert result["accepted"] is False


def test_restart_resets_previous_checks(service, customer):
    service.start("user-1", customer)
    service.verify_bvn("user-1", BVN)

    result = service.start("user-1", customer)

    assert result["application"]["bvn_verified"] is False


def test_verification_records_are_write_once(service, customer):
    service.start("user-1", customer)
    record_id = service.verify_bank_account("user-1", BANK_ACCOUNT)["record_id"]

    with pytest.raises(RuntimeError, match="write-once"):
        with session_scope() as session:
            record = session.get(VerificationRecord, record_id)
            record.match_status = "no_match"


def test_identify_bank_validates(service, fake_provider):
    with pytest.raises(KycValidationError):
        service.identify_bank("12345")

    assert service.identify_bank("0123456789").bank_code == "058"
    assert fake_provider.calls == [("identify_bank", "0123456789")]
