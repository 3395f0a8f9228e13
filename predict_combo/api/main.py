import logging

from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse, JSONResponse
from contextlib import asynccontextmanager

from predict_combo.api.routes import router
from predict_combo.core.errors import PredictComboError
from predict_combo.log import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    yield

app = FastAPI(title="Predict Combo", lifespan=lifespan)
app.include_router(router)


@app.exception_handler(PredictComboError)
async def input_error(request: Request, exc: PredictComboError):
    logger.info("rejected %s: %s", request.url.path, exc)
    return JSONResponse({"detail": str(exc)}, status_code=400)


@app.get("/")
def home():
    return {"ok": True, "app": "Predict Combo"}


PAGE = r"""<!doctype html><html lang="en"><head>
<meta charset="utf-8"/><meta name="viewport" content="width=device-width,initial-scale=1"/>
<title>Predict Combo</title>
<style>
:root{--bg:#0b0e14;--ink:#e6e6e6;--muted:#97a3b3;--bad:#ef4444;--line:#293241}
*{box-sizing:border-box}body{margin:0;background:var(--bg);color:var(--ink);font-family:ui-monospace,Consolas,monospace}
.wrap{max-width:640px;margin:0 auto;padding:16px}
h1{margin:0 0 10px;font-size:18px}
.row{display:flex;gap:8px;align-items:center;margin-top:10px}
.btn{padding:10px 14px;border-radius:12px;border:1px solid var(--line);cursor:pointer;font-weight:800;background:#10141b;color:var(--ink)}
.card{border:1px solid var(--line);border-radius:14px;padding:14px;margin-top:10px}
pre{white-space:pre-wrap;margin:0}
input[type=text]{width:100%;background:var(--bg);border:1px solid var(--line);border-radius:10px;color:var(--ink);padding:10px}
#bet{width:120px}
.err{color:var(--bad);margin-top:10px}
.note{color:var(--muted);font-size:12px;margin-top:20px}
</style></head><body>
<div class="wrap">
  <h1>Predict Combo</h1>
  <div>Enter last numbers (comma separated, most recent last):</div>
  <input id="numbers" type="text" placeholder="e.g. 64,18,24,38,75"/>
  <div class="row">
    <span>Current bet:</span>
    <input id="bet" type="text" inputmode="numeric" value="10" oninput="this.value=this.value.replace(/\D/g,'')"/>
    <label><input id="won" type="checkbox" checked/> Last round won</label>
  </div>
  <div class="row"><button class="btn" onclick="go()">Predict</button></div>
  <div id="error" class="err"></div>
  <div id="result" class="card" style="display:none"><pre></pre></div>
  <div class="note">Notes:<br/>&bull; Numbers must be between 1 and 75.<br/>
  &bull; This is a simple prediction heuristic and a martingale bet rule for demonstration only.
  Don't use it for real gambling without caution.</div>
</div>
<script>
async function go(){
  const err = document.getElementById('error'), box = document.getElementById('result');
  err.textContent = ''; box.style.display = 'none';
  const body = {numbers: document.getElementById('numbers').value,
                current_bet: document.getElementById('bet').value,
                last_round_won: document.getElementById('won').checked};
  const r = await fetch('/predict/text', {method:'POST', headers:{'Content-Type':'application/json'}, body:JSON.stringify(body)});
  const d = await r.json();
  if(!r.ok){ err.textContent = typeof d.detail === 'string' ? d.detail : 'Error'; return; }
  box.querySelector('pre').textContent = JSON.stringify(d, null, 2);
  box.style.display = 'block';
}
</script>
</body></html>"""


@app.get("/ui", response_class=HTMLResponse)
def ui():
    return HTMLResponse(PAGE)
