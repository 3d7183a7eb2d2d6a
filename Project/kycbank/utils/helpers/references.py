import secrets
import string
import time

_BASE36 = string.digits + string.ascii_lowercase


def generate_customer_code(prefix: str = "CUS") -> str:
    """
    Generate a Paystack-looking customer code for sandbox customers.

    Format:
    CUS_<unix_ms>_<9 base36 chars>

    Example:
    CUS_1703173379123_k3x9a0q2z
    """
    timestamp = int(time.time() * 1000)
    rand = "".join(secrets.choice(_BASE36) for _ in range(9))

    return f"{prefix}_{timestamp}_{rand}"
