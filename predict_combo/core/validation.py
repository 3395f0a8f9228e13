import re

from predict_combo.core.errors import ParseError, RangeError
from predict_combo.core.labels import MIN_NUMBER, MAX_NUMBER, BASE_BET

RANGE_MESSAGE = f"Numbers must be {MIN_NUMBER}..{MAX_NUMBER}"
MAX_TOKEN_LEN = 32
MAX_BET = 2**31 - 1


def is_valid_number(n) -> bool:
    return isinstance(n, int) and not isinstance(n, bool) and MIN_NUMBER <= n <= MAX_NUMBER


def check_number(n: int) -> int:
    if not is_valid_number(n):
        raise RangeError(RANGE_MESSAGE)
    return n


def parse_numbers(text: str | None) -> list[int]:
    """Parse comma separated draws, most recent last.

    Blank input gives an empty list; callers decide whether that is an error.
    """
    if not text or not text.strip():
        return []
    out = []
    for tok in text.split(','):
        tok = tok.strip()
        if not tok:
            continue
        if len(tok) > MAX_TOKEN_LEN:
            raise ParseError(f"Invalid number: {tok[:MAX_TOKEN_LEN]!r}...")
        if not re.fullmatch(r"[+-]?\d+", tok):
            raise ParseError(f"Invalid number: {tok!r}")
        out.append(check_number(int(tok)))
    return out


def parse_bet(text: str | None, default: int = BASE_BET) -> int:
    # mirrors a digits-only input field
    digits = ''.join(ch for ch in (text or '') if ch in '0123456789')
    # values past a 32-bit int fall back like an unreadable field
    if not digits or len(digits) > 10 or int(digits) > MAX_BET:
        return default
    return int(digits)
