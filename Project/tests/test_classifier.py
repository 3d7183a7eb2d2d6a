import pytest

from kycbank.utils.bank.classifier import (
    DEFAULT_BANK,
    ONE_DIGIT_PREFIXES,
    TWO_DIGIT_PREFIXES,
    classify_account_number,
)
from kycbank.utils.bank.types import Confidence


@pytest.mark.parametrize("prefix,bank", sorted(TWO_DIGIT_PREFIXES.items()))
def test_two_digit_prefix_returns_table_entry(prefix, bank):
    result = classify_account_number(prefix + "12345678")

    assert (result.bank_code, result.bank_name) == (bank.code, bank.name)


def test_first_bank_prefix():
    result = classify_account_number("2012345678")

    assert result.bank_code == "011"
    assert result.bank_name == "First Bank of Nigeria"


def test_access_bank_prefix():
    result = classify_account_number("0712345678")

    assert result.bank_code == "044"
    assert result.bank_name == "Access Bank"


def test_falls_back_to_first_digit():
    # "25" is not a known prefix, "2" is
    result = classify_account_number("2512345678")

    assert result.bank_code == ONE_DIGIT_PREFIXES["2"].code


@pytest.mark.parametrize("account_number", ["5512345678", "9912345678", "400000000000"])
def test_unknown_prefix_returns_default_bank(account_number):
    result = classify_account_number(account_number)

    assert result.bank_code == "011"
    assert result.bank_name == DEFAULT_BANK.name


def test_result_is_marked_heuristic():
    assert classify_account_number("0712345678").confidence is Confidence.HEURISTIC


def test_to_dict():
    assert classify_account_number("1012345678").to_dict() == {
        "bank_code": "057",
        "bank_name": "Zenith Bank",
        "confidence": "heuristic",
    }
