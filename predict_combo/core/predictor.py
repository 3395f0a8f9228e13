"""Next-pick heuristic and martingale bet rule.

Parity always alternates. Range looks at the last ``WINDOW`` draws: a streak
of two equal ranges at the end bounces to the other range, anything else
continues with the latest range.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Sequence

from predict_combo.core.errors import InvalidInputError
from predict_combo.core.labels import (
    BASE_BET, WINDOW, ParityLabel, RangeLabel, opposite, parity_label, range_label,
)
from predict_combo.core.validation import check_number

EMPTY_HISTORY_MESSAGE = "Provide at least one number"


class RangeStrategy(str, Enum):
    BOUNCE = 'bounce'
    CONTINUATION = 'continuation'


class BetAction(str, Enum):
    RESET = 'reset'
    DOUBLE = 'double'


@dataclass(frozen=True)
class Pick:
    range: RangeLabel
    parity: ParityLabel

    def __str__(self) -> str:
        return f"{self.range.value}/{self.parity.value}"


@dataclass(frozen=True)
class RangeReason:
    strategy: RangeStrategy
    window: tuple[RangeLabel, ...]  # pair for a bounce, full window otherwise


@dataclass(frozen=True)
class BetReason:
    action: BetAction
    previous: int
    next: int


@dataclass(frozen=True)
class Explanation:
    last_number: int
    last_range: RangeLabel
    last_parity: ParityLabel
    predicted_range: RangeLabel
    predicted_parity: ParityLabel
    range_reason: RangeReason
    bet_reason: BetReason


@dataclass(frozen=True)
class PredictResult:
    top_pick: Pick
    backup: Pick
    next_bet: int
    explanation: Explanation


def range_window(history: Sequence[int], size: int = WINDOW) -> tuple[RangeLabel, ...]:
    return tuple(range_label(n) for n in history[-size:])


def predict_range(window: tuple[RangeLabel, ...]) -> tuple[RangeLabel, RangeReason]:
    if len(window) >= 2 and window[-1] == window[-2]:
        return opposite(window[-1]), RangeReason(RangeStrategy.BOUNCE, window[-2:])
    return window[-1], RangeReason(RangeStrategy.CONTINUATION, window)


def next_bet(current_bet: int, last_round_won: bool) -> tuple[int, BetReason]:
    if current_bet < 1:
        raise InvalidInputError("Current bet must be at least 1")
    if last_round_won:
        return BASE_BET, BetReason(BetAction.RESET, current_bet, BASE_BET)
    doubled = current_bet * 2
    return doubled, BetReason(BetAction.DOUBLE, current_bet, doubled)


def predict(history: Sequence[int], current_bet: int = BASE_BET, last_round_won: bool = True) -> PredictResult:
    if not history:
        raise InvalidInputError(EMPTY_HISTORY_MESSAGE)
    for n in history:
        check_number(n)

    last = history[-1]
    last_range = range_label(last)
    last_parity = parity_label(last)

    predicted_parity = opposite(last_parity)
    predicted_range, range_reason = predict_range(range_window(history))
    bet, bet_reason = next_bet(current_bet, last_round_won)

    return PredictResult(
        top_pick=Pick(predicted_range, predicted_parity),
        backup=Pick(opposite(predicted_range), predicted_parity),
        next_bet=bet,
        explanation=Explanation(
            last_number=last,
            last_range=last_range,
            last_parity=last_parity,
            predicted_range=predicted_range,
            predicted_parity=predicted_parity,
            range_reason=range_reason,
            bet_reason=bet_reason,
        ),
    )
