from __future__ import annotations

import datetime
import random

_ALPHABET = "123456789abcdefghijkmnopqrstuvwxyzABCDEFGHJKLMNPQRSTUVWXYZ"
_BASE_COUNT = len(_ALPHABET)
_CHECKSUM_MODULUS = 997
REQ_ID_HEADER = "X-BinConv-Req-ID"


def to_base58(num: int) -> str:
    if num < 0:
        raise ValueError("Number must be non-negative")

    digits = []
    current = num
    while current:
        current, mod = divmod(current, _BASE_COUNT)
        digits.append(_ALPHABET[mod])
    return "".join(reversed(digits)) or _ALPHABET[0]


def generate_req_id() -> str:
    """Build a short id: random digits, centisecond timestamp and a mod-997 checksum."""
    timestamp = str(int(datetime.datetime.now(datetime.timezone.utc).timestamp() * 100))
    random_part = str(random.randint(1, 9))
    for _ in range(16 - len(timestamp)):
        random_part += str(random.randint(0, 9))
    timestamp_position = str(len(random_part))
    body = random_part + timestamp + timestamp_position
    checksum = str(int(body) % _CHECKSUM_MODULUS).zfill(3)
    return to_base58(int(body + checksum)).zfill(12)
