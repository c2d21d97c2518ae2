"""
Utility functions for the application.
"""
import secrets
from typing import Optional
from splittrip.core.config import settings

# Excludes easily confused characters: 0, O, 1, I
TRIP_CODE_ALPHABET = "ABCDEFGHJKLMNPQRSTUVWXYZ23456789"


def generate_trip_code(length: Optional[int] = None) -> str:
    """Generate a random shareable trip code, e.g. 'TR45K9'."""
    if length is None:
        length = settings.TRIP_CODE_LENGTH
    return "".join(secrets.choice(TRIP_CODE_ALPHABET) for _ in range(length))


def normalize_trip_code(code: str) -> str:
    """Normalize user-entered trip codes for lookup."""
    return code.strip().upper()
