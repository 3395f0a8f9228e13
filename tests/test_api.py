import pytest
from fastapi.testclient import TestClient

from predict_combo.api.main import app
from predict_combo.config import settings


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c


def test_home(client):
    assert client.get("/").json() == {"ok": True, "app": "Predict Combo"}

def test_predict(client):
    r = client.post("/predict", json={"history": [64, 18, 24, 38, 75]})
    assert r.status_code == 200
    d = r.json()
    assert d["top_pick"] == "U/E" and d["backup"] == "O/E" and d["next_bet"] == 10
    assert d["explanation"]["predicted_range"] == "U"

def test_predict_loss_doubles(client):
    r = client.post("/predict", json={"history": [10, 40], "current_bet": 30, "last_round_won": False})
    assert r.json()["next_bet"] == 60
    assert r.json()["explanation"]["bet_reason"] == "last round lost → double from 30 to 60"

def test_predict_text(client):
    r = client.post("/predict/text", json={"numbers": "10,40", "current_bet": "1x5", "last_round_won": False})
    assert r.status_code == 200
    assert r.json()["top_pick"] == "O/O"
    assert r.json()["next_bet"] == 30

@pytest.mark.parametrize("body,message", [
    ({"history": []}, "Provide at least one number"),
    ({"history": [0, 12]}, "Numbers must be 1..75"),
    ({"history": [12], "current_bet": 0}, "Current bet must be at least 1"),
])
def test_predict_errors(client, body, message):
    r = client.post("/predict", json=body)
    assert r.status_code == 400
    assert r.json() == {"detail": message}

def test_predict_text_errors(client):
    r = client.post("/predict/text", json={"numbers": "64,abc"})
    assert r.status_code == 400
    assert "abc" in r.json()["detail"]
    r = client.post("/predict/text", json={"numbers": " , "})
    assert r.json() == {"detail": "Provide at least one number"}

def test_labels(client):
    assert client.get("/labels/38").json() == {"number": 38, "range": "O", "parity": "E"}
    assert client.get("/labels/76").status_code == 400

def test_ui(client):
    r = client.get("/ui")
    assert r.status_code == 200
    assert "Last round won" in r.text

def test_api_key(client, monkeypatch):
    monkeypatch.setattr(settings, "api_key", "secret")
    assert client.post("/predict", json={"history": [5]}).status_code == 401
    r = client.post("/predict", json={"history": [5]}, headers={"X-API-Key": "secret"})
    assert r.status_code == 200

def test_predict_text_oversized_token(client):
    r = client.post("/predict/text", json={"numbers": "1" * 5000})
    assert r.status_code == 400
    assert r.json()["detail"].startswith("Invalid number")

def test_predict_text_oversized_bet(client):
    r = client.post("/predict/text", json={"numbers": "5", "current_bet": "9" * 5000, "last_round_won": False})
    assert r.status_code == 200
    assert r.json()["next_bet"] == 20

@pytest.mark.parametrize("body", [
    {"history": [True]},
    {"history": [5], "current_bet": True},
])
def test_predict_rejects_booleans(client, body):
    assert client.post("/predict", json=body).status_code == 422
