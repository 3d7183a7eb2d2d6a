"""
Offline guess of the issuing bank from an account number.

Used when the live name-enquiry is unavailable or rate-limited. The prefix
tables are rough observations, not a NUBAN rule, so the result always
carries Confidence.HEURISTIC.
"""

from kycbank.utils.bank.types import BankInfo, Confidence, ResolutionResult

FIRST_BANK = BankInfo("011", "First Bank of Nigeria")
ACCESS_BANK = BankInfo("044", "Access Bank")
ZENITH_BANK = BankInfo("057", "Zenith Bank")
GTBANK = BankInfo("058", "Guaranty Trust Bank")
FCMB = BankInfo("214", "First City Monument Bank")
UBA = BankInfo("033", "United Bank for Africa")

TWO_DIGIT_PREFIXES = {
    "20": FIRST_BANK,
    "30": FIRST_BANK,
    "07": ACCESS_BANK,
    "08": ACCESS_BANK,
    "10": ZENITH_BANK,
    "21": ZENITH_BANK,
    "01": GTBANK,
    "02": GTBANK,
    "03": FCMB,
    "04": FCMB,
    "05": UBA,
    "06": UBA,
    "09": BankInfo("032", "Union Bank of Nigeria"),
    "11": BankInfo("035", "Wema Bank"),
    "12": BankInfo("070", "Fidelity Bank"),
    "13": BankInfo("076", "Polaris Bank"),
    "14": BankInfo("221", "Stanbic IBTC Bank"),
    "15": BankInfo("232", "Sterling Bank"),
    "16": BankInfo("215", "Unity Bank"),
    "17": BankInfo("101", "Providus Bank"),
    "18": BankInfo("100", "Suntrust Bank"),
    "19": BankInfo("082", "Keystone Bank"),
}

ONE_DIGIT_PREFIXES = {
    "0": FIRST_BANK,
    "1": ZENITH_BANK,
    "2": ACCESS_BANK,
}

DEFAULT_BANK = FIRST_BANK


def classify_account_number(account_number: str) -> ResolutionResult:
    """Best-guess bank for ``account_number``. Never fails."""
    bank = (
        TWO_DIGIT_PREFIXES.get(account_number[:2])
        or ONE_DIGIT_PREFIXES.get(account_number[:1])
        or DEFAULT_BANK
    )
    return ResolutionResult(
        bank_code=bank.code,
        bank_name=bank.name,
        confidence=Confidence.HEURISTIC,
    )
