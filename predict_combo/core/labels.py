from enum import Enum

# Number domain and rule constants
MIN_NUMBER = 1
MAX_NUMBER = 75
OVER_FROM = 38
WINDOW = 3
BASE_BET = 10


class RangeLabel(str, Enum):
    UNDER = 'U'
    OVER = 'O'


class ParityLabel(str, Enum):
    EVEN = 'E'
    ODD = 'O'


def range_label(n: int) -> RangeLabel:
    return RangeLabel.UNDER if n < OVER_FROM else RangeLabel.OVER


def parity_label(n: int) -> ParityLabel:
    return ParityLabel.EVEN if n % 2 == 0 else ParityLabel.ODD


def opposite(label):
    """Flip a range or parity label."""
    if isinstance(label, RangeLabel):
        return RangeLabel.OVER if label is RangeLabel.UNDER else RangeLabel.UNDER
    return ParityLabel.ODD if label is ParityLabel.EVEN else ParityLabel.EVEN
