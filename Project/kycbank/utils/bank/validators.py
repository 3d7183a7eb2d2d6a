"""
Input checks run before any provider call.

The ``validate_*`` functions return a bool; ``require_*`` raise
KycValidationError with a message fit for the caller.
"""

import re

from kycbank.utils.verification_utils.errors import KycValidationError

ACCOUNT_NUMBER_RE = re.compile(r"^[0-9]{10,12}$")
COUNTRY_CODE_RE = re.compile(r"^[A-Z]{2}$")
EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
PHONE_RE = re.compile(r"^\+?234[0-9]{10}$|^[0-9]{11}$")
BVN_RE = re.compile(r"^[0-9]{11}$")

CUSTOMER_FIELDS = ("email", "first_name", "last_name", "phone")
BANK_ACCOUNT_FIELDS = ("bank_code", "account_number", "country_code")


def _missing(data: dict, fields) -> list[str]:
    return [k for k in fields if not (data or {}).get(k)]


def validate_account_number(account_number) -> bool:
    return isinstance(account_number, str) and bool(ACCOUNT_NUMBER_RE.fullmatch(account_number))


def validate_bank_account_data(data: dict) -> bool:
    if _missing(data, BANK_ACCOUNT_FIELDS):
        return False
    if not validate_account_number(data["account_number"]):
        return False
    return bool(COUNTRY_CODE_RE.fullmatch(str(data["country_code"])))


def validate_customer_data(data: dict) -> bool:
    if _missing(data, CUSTOMER_FIELDS):
        return False
    if not EMAIL_RE.fullmatch(str(data["email"])):
        return False
    return bool(PHONE_RE.fullmatch(str(data["phone"])))


def validate_bvn_data(data: dict) -> bool:
    bvn = (data or {}).get("bvn")
    return isinstance(bvn, str) and bool(BVN_RE.fullmatch(bvn))


def require_account_number(account_number):
    if not validate_account_number(account_number):
        raise KycValidationError("Invalid account number. Must be 10-12 digits.")


def require_bank_account_data(data: dict):
    if _missing(data, BANK_ACCOUNT_FIELDS):
        raise KycValidationError("Missing required bank account fields")
    if not validate_account_number(data["account_number"]):
        raise KycValidationError("Invalid account number. Must be 10-12 digits.")
    if not validate_bank_account_data(data):
        raise KycValidationError("Invalid country code. Must be two uppercase letters.")


def require_customer_data(data: dict):
    if _missing(data, CUSTOMER_FIELDS):
        raise KycValidationError("Missing required customer fields")
    if not validate_customer_data(data):
        raise KycValidationError("Invalid email or phone number")


def require_bvn_data(data: dict):
    if not validate_bvn_data(data):
        raise KycValidationError("Invalid BVN data provided")
