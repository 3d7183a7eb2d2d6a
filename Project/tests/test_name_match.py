import pytest

from kycbank.utils.bank.name_match import compare_names
from kycbank.utils.bank.types import MatchStatus


def test_exact_match_ignores_case_and_outer_whitespace():
    assert compare_names(" Jane Doe ", "jane doe") is MatchStatus.MATCH


@pytest.mark.parametrize("customer,account", [("", "Jane Doe"), ("Jane Doe", ""), (None, "Jane"), ("   ", "Jane")])
def test_empty_side_is_no_match(customer, account):
    assert compare_names(customer, account) is MatchStatus.NO_MATCH


@pytest.mark.parametrize("a,b", [("Jane Doe", "Jane Doe Okafor"), ("ADA OBI", "ada")])
def test_substring_is_partial_either_order(a, b):
    assert compare_names(a, b) is MatchStatus.PARTIAL_MATCH
    assert compare_names(b, a) is MatchStatus.PARTIAL_MATCH


def test_shared_token_is_partial():
    assert compare_names("John Smith", "Smith John A.") is MatchStatus.PARTIAL_MATCH


def test_extra_inner_spaces_do_not_create_empty_tokens():
    assert compare_names("Ada  Obi", "Chidi  Eze") is MatchStatus.NO_MATCH


def test_no_overlap_is_no_match():
    assert compare_names("John Smith", "Chidi Eze") is MatchStatus.NO_MATCH
