import math
import secrets
import string
import time
from datetime import datetime, timezone


_BASE36 = string.digits + string.ascii_lowercase


def get_current_timestamp() -> datetime:
    """Get current UTC timestamp."""
    return datetime.now(timezone.utc)


def generate_uuid(length: int = 9) -> str:
    """Generate an id token from the current time in milliseconds and a random base36 suffix."""
    suffix = ''.join(secrets.choice(_BASE36) for _ in range(length))
    return f"{int(time.time() * 1000)}_{suffix}"


def round_currency(amount: float) -> float:
    """Round an amount to cents, halves rounded up."""
    return math.floor(amount * 100 + 0.5) / 100
