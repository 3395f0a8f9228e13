import logging

import typer
import requests
import uvicorn

from predict_combo.config import settings
from predict_combo.core.errors import PredictComboError
from predict_combo.log import setup_logging
from predict_combo.services import predict_from_text, render_text


app = typer.Typer()
logger = logging.getLogger(__name__)




def _headers():
    h = {}
    if settings.api_key:
        h["X-API-Key"] = settings.api_key
    return h


@app.callback()
def main(log_level: str = typer.Option(None, help="Override LOG_LEVEL")):
    setup_logging(log_level)


@app.command()
def local(numbers: str, bet: str = typer.Option("10"), lost: bool = typer.Option(False, "--lost")):
    """Predict in process, e.g. `local 64,18,24,38,75 --bet 20 --lost`."""
    try:
        res = predict_from_text(numbers, bet, not lost)
    except PredictComboError as e:
        logger.info("rejected input: %s", e)
        typer.echo(str(e), err=True)
        raise typer.Exit(code=1)
    typer.echo(render_text(res))


@app.command()
def predict(numbers: str, bet: str = typer.Option("10"), lost: bool = typer.Option(False, "--lost")):
    """Ask a running API for a prediction."""
    r = requests.post(f"{settings.api_base}/predict/text",
                      json={"numbers": numbers, "current_bet": bet, "last_round_won": not lost},
                      headers=_headers())
    typer.echo(r.json())
    if not r.ok:
        raise typer.Exit(code=1)


@app.command()
def serve(host: str = typer.Option(None), port: int = typer.Option(None)):
    uvicorn.run("predict_combo.api.main:app", host=host or settings.host, port=port or settings.port)


if __name__ == "__main__":
    app()
