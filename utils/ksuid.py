"""
KSUID - K-Sortable Unique Identifier.

Used for snapshot and error ids: 4 bytes of seconds since the KSUID epoch
followed by 16 random bytes, rendered as 27 base62 characters.
"""

import secrets
import time

KSUID_EPOCH = 1400000000
KSUID_LENGTH = 27
BASE62 = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"


def _base62(n, width):
    digits = []
    while n:
        n, remainder = divmod(n, 62)
        digits.append(BASE62[remainder])
    return "".join(reversed(digits)).rjust(width, "0")


def generate_ksuid(now=None):
    """Generate a 27-character time-sortable unique id."""
    seconds = int(now if now is not None else time.time()) - KSUID_EPOCH
    payload = seconds.to_bytes(4, "big") + secrets.token_bytes(16)
    return _base62(int.from_bytes(payload, "big"), KSUID_LENGTH)
