from fastapi import APIRouter, Depends, HTTPException, Header

from predict_combo.api.schemas import LabelsOut, PredictIn, PredictOut, PredictTextIn
from predict_combo.config import settings
from predict_combo.core.labels import parity_label, range_label
from predict_combo.core.validation import RANGE_MESSAGE, is_valid_number
from predict_combo.services import predict_from_text, predict_numbers, result_to_dict

router = APIRouter()


def _auth(api_key_header: str | None = Header(default=None, alias="X-API-Key")):
    if settings.api_key and api_key_header != settings.api_key:
        raise HTTPException(status_code=401, detail="Invalid API key")

@router.post('/predict', response_model=PredictOut)
async def predict(data: PredictIn, ok=Depends(_auth)):
    return predict_numbers(data.history, data.current_bet, data.last_round_won)

@router.post('/predict/text', response_model=PredictOut)
async def predict_text(data: PredictTextIn, ok=Depends(_auth)):
    res = predict_from_text(data.numbers, data.current_bet, data.last_round_won)
    return result_to_dict(res)

@router.get('/labels/{number}', response_model=LabelsOut)
async def labels(number: int):
    if not is_valid_number(number):
        raise HTTPException(400, detail=RANGE_MESSAGE)
    return {'number': number, 'range': range_label(number).value, 'parity': parity_label(number).value}
