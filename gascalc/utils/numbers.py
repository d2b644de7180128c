from __future__ import annotations

import re
from typing import Any

from gascalc.utils.errors import InvalidNumberError

_UINT_RE = re.compile(r"^[0-9]+$")


def parse_uint(value: Any, field: str) -> int:
    """Parse an unsigned decimal integer as returned by the explorer API."""
    if isinstance(value, bool):
        raise InvalidNumberError(f"'{field}' is not an unsigned integer: {value!r}")
    if isinstance(value, int):
        if value < 0:
            raise InvalidNumberError(f"'{field}' is negative: {value}")
        return value
    if isinstance(value, str) and _UINT_RE.match(value.strip()):
        try:
            return int(value.strip())
        except ValueError as e:
            # int() refuses digit strings beyond sys.get_int_max_str_digits()
            raise InvalidNumberError(
                f"'{field}' is too long to be an unsigned integer ({len(value)} chars)"
            ) from e
    raise InvalidNumberError(f"'{field}' is not an unsigned integer: {value!r:.80}")
