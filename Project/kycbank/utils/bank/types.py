"""
Value types shared by the bank catalog, the account number classifier
and the verification providers.
"""

from dataclasses import dataclass
from enum import Enum


class MatchStatus(str, Enum):
    MATCH = "match"
    PARTIAL_MATCH = "partial_match"
    NO_MATCH = "no_match"


class Confidence(str, Enum):
    """
    How a result was obtained.

    verified  : returned by the provider's live API
    heuristic : guessed offline from the account number prefix
    simulated : synthetic sandbox response, no network call made
    """

    VERIFIED = "verified"
    HEURISTIC = "heuristic"
    SIMULATED = "simulated"


@dataclass(frozen=True)
class BankInfo:
    code: str
    name: str

    def to_dict(self):
        return {"code": self.code, "name": self.name}


@dataclass(frozen=True)
class ResolutionResult:
    bank_code: str
    bank_name: str
    confidence: Confidence = Confidence.HEURISTIC

    def to_dict(self):
        return {
            "bank_code": self.bank_code,
            "bank_name": self.bank_name,
            "confidence": self.confidence.value,
        }
