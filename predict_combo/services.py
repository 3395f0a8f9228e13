import json
import logging
from typing import Optional

from predict_combo.core.errors import InvalidInputError
from predict_combo.core.labels import BASE_BET
from predict_combo.core.predictor import (
    EMPTY_HISTORY_MESSAGE, BetAction, BetReason, PredictResult, RangeReason, RangeStrategy, predict,
)
from predict_combo.core.validation import parse_bet, parse_numbers

logger = logging.getLogger(__name__)


def _labels(window) -> str:
    return '[' + ', '.join(label.value for label in window) + ']'


def format_range_reason(reason: RangeReason) -> str:
    if reason.strategy is RangeStrategy.BOUNCE:
        return f"last ranges {_labels(reason.window)} → streak → bounce"
    return f"no streak in {_labels(reason.window)} → continuation"


def format_bet_reason(reason: BetReason) -> str:
    if reason.action is BetAction.RESET:
        return f"last round won → reset to base ({reason.next})"
    return f"last round lost → double from {reason.previous} to {reason.next}"


def result_to_dict(res: PredictResult) -> dict:
    e = res.explanation
    return {
        'top_pick': str(res.top_pick),
        'backup': str(res.backup),
        'next_bet': res.next_bet,
        'explanation': {
            'last_number': e.last_number,
            'last_parity': e.last_parity.value,
            'last_range': e.last_range.value,
            'predicted_parity': e.predicted_parity.value,
            'predicted_range': e.predicted_range.value,
            'range_reason': format_range_reason(e.range_reason),
            'bet_reason': format_bet_reason(e.bet_reason),
        },
    }


def render_text(res: PredictResult) -> str:
    return json.dumps(result_to_dict(res), indent=2, ensure_ascii=False)


def predict_numbers(history: list[int], current_bet: int = BASE_BET, last_round_won: bool = True) -> dict:
    res = predict(history, current_bet, last_round_won)
    logger.debug("predicted %s (backup %s) for last=%s", res.top_pick, res.backup, history[-1])
    return result_to_dict(res)


def predict_from_text(numbers_text: str, bet_text: Optional[str] = None, last_round_won: bool = True) -> PredictResult:
    """Run the form pipeline: parse the draws and bet field, then predict."""
    history = parse_numbers(numbers_text)
    if not history:
        raise InvalidInputError(EMPTY_HISTORY_MESSAGE)
    current_bet = parse_bet(bet_text)
    res = predict(history, current_bet, last_round_won)
    logger.debug("predicted %s (backup %s) for last=%s", res.top_pick, res.backup, history[-1])
    return res
