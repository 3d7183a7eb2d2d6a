from abc import ABC, abstractmethod

from kycbank.utils.bank.types import ResolutionResult
from kycbank.utils.verification_utils.results import (
    BankAccountVerification,
    BvnVerification,
    CustomerRecord,
)


class VerificationProvider(ABC):
    """
    Identity/bank verification backend.

    Callers validate input before reaching a provider; providers only
    talk to (or imitate) the remote API.
    """

    name = "base"

    @abstractmethod
    def create_customer(self, customer: dict) -> CustomerRecord:
        ...

    @abstractmethod
    def identify_bank(self, account_number: str) -> ResolutionResult:
        """Best bank for an account number. Must not raise after validation."""

    @abstractmethod
    def resolve_account(
        self,
        *,
        account_number: str,
        bank_code: str,
        customer_name: str | None = None,
        account_name_hint: str | None = None,
    ) -> BankAccountVerification:
        ...

    @abstractmethod
    def match_bvn(self, bvn_data: dict, customer_name: str | None = None) -> BvnVerification:
        ...
