from pydantic import BaseModel, StrictInt

from predict_combo.core.labels import BASE_BET

# Range and emptiness of the history are checked by the core.


class PredictIn(BaseModel):
    history: list[StrictInt]
    current_bet: StrictInt = BASE_BET
    last_round_won: bool = True


class PredictTextIn(BaseModel):
    numbers: str
    current_bet: str = str(BASE_BET)
    last_round_won: bool = True


class ExplanationOut(BaseModel):
    last_number: int
    last_parity: str
    last_range: str
    predicted_parity: str
    predicted_range: str
    range_reason: str
    bet_reason: str


class PredictOut(BaseModel):
    top_pick: str
    backup: str
    next_bet: int
    explanation: ExplanationOut


class LabelsOut(BaseModel):
    number: int
    range: str
    parity: str
