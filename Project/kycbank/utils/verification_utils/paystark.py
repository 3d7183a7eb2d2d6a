import logging

import requests

from kycbank.utils.bank.classifier import classify_account_number
from kycbank.utils.bank.name_match import compare_names
from kycbank.utils.bank.nigerian_banks import get_bank_name_by_code
from kycbank.utils.bank.types import Confidence, MatchStatus, ResolutionResult
from kycbank.utils.verification_utils.base_provider import VerificationProvider
from kycbank.utils.verification_utils.errors import (
    InvalidResponseError,
    ProviderError,
    ProviderUnavailableError,
    RateLimitError,
    classify_provider_error,
)
from kycbank.utils.verification_utils.results import (
    BankAccountVerification,
    BvnVerification,
    CustomerRecord,
)

logger = logging.getLogger(__name__)


class PaystackVerificationProvider(VerificationProvider):
    """
    Paystack live verification
    POST /customer
    GET  /bank/resolve?account_number=&bank_code=
    POST /bvn/match
    """

    name = "paystack"
    BASE_URL = "https://api.paystack.co"

    def __init__(self, secret_key: str, base_url: str | None = None, timeout: float = 15):
        if not secret_key:
            raise RuntimeError("PAYSTACK_SECRET_KEY not set")

        self.secret_key = secret_key
        self.base_url = (base_url or self.BASE_URL).rstrip("/")
        self.timeout = timeout

    def _headers(self):
        return {
            "Authorization": f"Bearer {self.secret_key}",
            "Content-Type": "application/json",
        }

    def _request(self, method: str, path: str, *, params=None, payload=None) -> dict:
        url = f"{self.base_url}{path}"

        try:
            if method == "GET":
                resp = requests.get(url, params=params, headers=self._headers(), timeout=self.timeout)
            else:
                resp = requests.post(url, json=payload, headers=self._headers(), timeout=self.timeout)
        except requests.RequestException as e:
            raise ProviderUnavailableError(f"Paystack request failed: {e}") from e

        if not resp.ok:
            raise classify_provider_error(resp.status_code, resp.text, resp.reason)

        try:
            body = resp.json()
        except ValueError as e:
            raise InvalidResponseError() from e

        if not isinstance(body, dict) or not body.get("status") or not body.get("data"):
            raise InvalidResponseError()

        return body

    @staticmethod
    def _data(body: dict) -> dict:
        # some endpoints wrap the payload one level deeper
        data = body["data"]
        nested = data.get("data") if isinstance(data, dict) else None
        if isinstance(nested, dict):
            return nested
        if not isinstance(data, dict):
            raise InvalidResponseError()
        return data

    @staticmethod
    def _verified(body: dict) -> bool:
        return body.get("status") is True or body.get("status") == "success"

    # -------------------------
    # CUSTOMER
    # -------------------------
    def create_customer(self, customer: dict) -> CustomerRecord:
        body = self._request(
            "POST",
            "/customer",
            payload={
                "email": customer["email"],
                "first_name": customer["first_name"],
                "last_name": customer["last_name"],
                "phone": customer["phone"],
            },
        )
        data = self._data(body)

        return CustomerRecord(
            id=str(data.get("id")),
            customer_code=data.get("customer_code"),
            first_name=data.get("first_name"),
            last_name=data.get("last_name"),
            email=data.get("email"),
            phone=data.get("phone"),
            metadata=data.get("metadata") or {},
            domain=data.get("domain"),
            created_at=data.get("createdAt"),
            updated_at=data.get("updatedAt"),
        )

    # -------------------------
    # BANK IDENTIFICATION
    # -------------------------
    def identify_bank(self, account_number: str) -> ResolutionResult:
        try:
            body = self._request("GET", "/bank/resolve", params={"account_number": account_number})
            data = self._data(body)
        except ProviderError as e:
            logger.info("bank lookup failed (%s), using prefix classifier", e)
            return classify_account_number(account_number)

        if not data.get("bank_code") or not data.get("bank_name"):
            return classify_account_number(account_number)

        return ResolutionResult(
            bank_code=data["bank_code"],
            bank_name=data["bank_name"],
            confidence=Confidence.VERIFIED,
        )

    # -------------------------
    # ACCOUNT RESOLUTION
    # -------------------------
    def resolve_account(
        self,
        *,
        account_number: str,
        bank_code: str,
        customer_name: str | None = None,
        account_name_hint: str | None = None,
    ) -> BankAccountVerification:
        try:
            body = self._request(
                "GET",
                "/bank/resolve",
                params={"account_number": account_number, "bank_code": bank_code},
            )
        except RateLimitError as e:
            logger.warning(
                "Paystack rate limit resolving %s with bank_code=%s, falling back to prefix classifier: %s",
                account_number,
                bank_code,
                e,
            )
            return self._heuristic_resolution(account_number, customer_name, account_name_hint)

        data = self._data(body)
        account_name = data.get("account_name")
        if not account_name:
            raise InvalidResponseError()

        return BankAccountVerification(
            account_number=account_number,
            account_name=account_name,
            bank_code=bank_code,
            bank_name=data.get("bank_name") or get_bank_name_by_code(bank_code) or "",
            verified=self._verified(body),
            match_status=compare_names(customer_name, account_name),
            confidence=Confidence.VERIFIED,
        )

    @staticmethod
    def _heuristic_resolution(account_number, customer_name, account_name_hint):
        guess = classify_account_number(account_number)
        account_name = account_name_hint or customer_name or ""

        return BankAccountVerification(
            account_number=account_number,
            account_name=account_name,
            bank_code=guess.bank_code,
            bank_name=guess.bank_name,
            verified=False,
            match_status=compare_names(customer_name, account_name),
            confidence=Confidence.HEURISTIC,
        )

    # -------------------------
    # BVN
    # -------------------------
    def match_bvn(self, bvn_data: dict, customer_name: str | None = None) -> BvnVerification:
        body = self._request(
            "POST",
            "/bvn/match",
            payload={
                "bvn": bvn_data["bvn"],
                "first_name": bvn_data.get("first_name"),
                "last_name": bvn_data.get("last_name"),
                "middle_name": bvn_data.get("middle_name") or "",
            },
        )
        data = self._data(body)

        first_name = data.get("first_name") or ""
        middle_name = data.get("middle_name") or ""
        last_name = data.get("last_name") or ""

        if data.get("match_status") in {s.value for s in MatchStatus}:
            match_status = MatchStatus(data["match_status"])
        elif customer_name:
            full_name = " ".join(p for p in (first_name, middle_name, last_name) if p)
            match_status = compare_names(customer_name, full_name)
        else:
            match_status = MatchStatus.MATCH

        return BvnVerification(
            bvn=bvn_data["bvn"],
            first_name=first_name,
            last_name=last_name,
            middle_name=middle_name,
            date_of_birth=data.get("date_of_birth") or "",
            phone=data.get("mobile") or "",
            registration_date=data.get("registration_date") or "",
            image_base64=data.get("image_base64") or "",
            gender=data.get("gender") or "",
            email=data.get("email") or "",
            nationality=data.get("nationality") or "",
            residential_address=data.get("residential_address") or "",
            state_of_origin=data.get("state_of_origin") or "",
            lga_of_origin=data.get("lga_of_origin") or "",
            lga_of_residence=data.get("lga_of_residence") or "",
            marital_status=data.get("marital_status") or "",
            nin=data.get("nin") or "",
            verified=self._verified(body),
            match_status=match_status,
            confidence=Confidence.VERIFIED,
        )
