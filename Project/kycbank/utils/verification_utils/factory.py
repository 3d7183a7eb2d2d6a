import logging

from kycbank.utils.verification_utils.paystark import PaystackVerificationProvider
from kycbank.utils.verification_utils.sandbox import SandboxVerificationProvider

logger = logging.getLogger(__name__)

MODES = ("auto", "sandbox", "live")


def is_live_key(secret_key: str | None) -> bool:
    return bool(secret_key) and secret_key.startswith("sk_live_")


def resolve_mode(mode: str | None, secret_key: str | None) -> str:
    mode = (mode or "auto").lower().strip()

    if mode not in MODES:
        raise ValueError(f"Unsupported KYC provider mode: {mode}")

    if mode == "auto":
        return "live" if is_live_key(secret_key) else "sandbox"

    return mode


def get_provider(config) -> PaystackVerificationProvider | SandboxVerificationProvider:
    """Build the verification provider once, from app config."""
    secret_key = config.get("PAYSTACK_SECRET_KEY")
    mode = resolve_mode(config.get("KYC_PROVIDER_MODE"), secret_key)

    if mode == "sandbox":
        logger.info("KYC provider: sandbox (no network calls)")
        return SandboxVerificationProvider()

    logger.info("KYC provider: paystack live")
    return PaystackVerificationProvider(
        secret_key,
        base_url=config.get("PAYSTACK_BASE_URL"),
        timeout=config.get("PAYSTACK_TIMEOUT", 15),
    )
