from kycbank.utils.bank.types import MatchStatus


def _normalize(name):
    return (name or "").strip().lower()


def compare_names(customer_name: str | None, account_name: str | None) -> MatchStatus:
    """
    Classify how well a declared name matches a provider-returned name.

    Coarse on purpose: exact, substring, or one shared token.
    No edit distance and no phonetic matching.
    """
    customer = _normalize(customer_name)
    account = _normalize(account_name)

    if not customer or not account:
        return MatchStatus.NO_MATCH

    if customer == account:
        return MatchStatus.MATCH

    if customer in account or account in customer:
        return MatchStatus.PARTIAL_MATCH

    if set(customer.split()) & set(account.split()):
        return MatchStatus.PARTIAL_MATCH

    return MatchStatus.NO_MATCH
