"""
Results returned by verification providers.
"""

from dataclasses import asdict, dataclass, field

from kycbank.utils.bank.types import Confidence, MatchStatus


@dataclass(frozen=True)
class CustomerRecord:
    id: str
    customer_code: str
    first_name: str
    last_name: str
    email: str
    phone: str
    metadata: dict = field(default_factory=dict)
    domain: str | None = None
    created_at: str | None = None
    updated_at: str | None = None

    def to_dict(self):
        return asdict(self)


@dataclass(frozen=True)
class BankAccountVerification:
    account_number: str
    account_name: str
    bank_code: str
    bank_name: str
    verified: bool
    match_status: MatchStatus
    confidence: Confidence

    def to_dict(self):
        data = asdict(self)
        data["match_status"] = self.match_status.value
        data["confidence"] = self.confidence.value
        return data


@dataclass(frozen=True)
class BvnVerification:
    bvn: str
    first_name: str
    last_name: str
    middle_name: str
    verified: bool
    match_status: MatchStatus
    confidence: Confidence
    date_of_birth: str = ""
    phone: str = ""
    registration_date: str = ""
    image_base64: str = ""
    gender: str = ""
    email: str = ""
    nationality: str = ""
    residential_address: str = ""
    state_of_origin: str = ""
    lga_of_origin: str = ""
    lga_of_residence: str = ""
    marital_status: str = ""
    nin: str = ""

    @property
    def full_name(self) -> str:
        parts = (self.first_name, self.middle_name, self.last_name)
        return " ".join(p for p in parts if p)

    def to_dict(self):
        data = asdict(self)
        data["match_status"] = self.match_status.value
        data["confidence"] = self.confidence.value
        return data
