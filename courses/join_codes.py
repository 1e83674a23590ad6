"""Join code generation.

Codes are the leading characters of an MD5 digest over the current time
and a random number, uppercased. MD5 is used as a fast mixer here, not
for security; uniqueness is enforced by the `Course.join_code` column.
"""
from __future__ import annotations

import hashlib
import random
import time

from django.conf import settings


def generate_join_code(length: int | None = None) -> str:
    length = length or settings.STUDENTINTRO["JOIN_CODE_LENGTH"]
    seed = f"{time.time()}{random.random()}".encode()
    return hashlib.md5(seed, usedforsecurity=False).hexdigest()[:length].upper()


def normalise_join_code(code: str | None) -> str:
    """Codes are typed by humans: ignore case and surrounding spaces."""
    return (code or "").strip().upper()
