"""
Nigerian bank codes as used by Paystack's bank endpoints.
"""

from kycbank.utils.bank.types import BankInfo

NIGERIAN_BANKS = tuple(sorted(
    (
        BankInfo("044", "Access Bank"),
        BankInfo("063", "Access Bank (Diamond)"),
        BankInfo("035A", "ALAT by WEMA"),
        BankInfo("401", "ASO Savings and Loans"),
        BankInfo("50931", "Bowen Microfinance Bank"),
        BankInfo("50823", "CEMCS Microfinance Bank"),
        BankInfo("023", "Citibank Nigeria"),
        BankInfo("050", "Ecobank Nigeria"),
        BankInfo("070", "Fidelity Bank"),
        BankInfo("011", "First Bank of Nigeria"),
        BankInfo("214", "First City Monument Bank"),
        BankInfo("103", "Globus Bank"),
        BankInfo("058", "Guaranty Trust Bank"),
        BankInfo("030", "Heritage Bank"),
        BankInfo("301", "Jaiz Bank"),
        BankInfo("082", "Keystone Bank"),
        BankInfo("50211", "Kuda Bank"),
        BankInfo("565", "One Finance"),
        BankInfo("526", "Parallex Bank"),
        BankInfo("999992", "Paycom Nigeria (Opay)"),
        BankInfo("076", "Polaris Bank"),
        BankInfo("101", "Providus Bank"),
        BankInfo("125", "Rubies MFB"),
        BankInfo("51310", "Sparkle Microfinance Bank"),
        BankInfo("221", "Stanbic IBTC Bank"),
        BankInfo("068", "Standard Chartered Bank"),
        BankInfo("232", "Sterling Bank"),
        BankInfo("100", "Suntrust Bank"),
        BankInfo("302", "TAJBank"),
        BankInfo("51211", "TCF MFB"),
        BankInfo("102", "Titan Bank"),
        BankInfo("032", "Union Bank of Nigeria"),
        BankInfo("033", "United Bank for Africa"),
        BankInfo("215", "Unity Bank"),
        BankInfo("566", "VFD Microfinance Bank"),
        BankInfo("035", "Wema Bank"),
        BankInfo("057", "Zenith Bank"),
    ),
    key=lambda bank: bank.name.lower(),
))

_BY_CODE = {bank.code: bank for bank in NIGERIAN_BANKS}


def get_bank_name_by_code(code: str) -> str | None:
    bank = _BY_CODE.get(code)
    return bank.name if bank else None


def list_banks() -> list[dict]:
    return [bank.to_dict() for bank in NIGERIAN_BANKS]
