"""FastAPI web app for the growth report dashboard."""

import asyncio
import json
import logging

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.responses import HTMLResponse, JSONResponse, StreamingResponse

from .main import AnalysisPipeline, AnalysisResult
from .tables import MSG_BUSY

load_dotenv()

logger = logging.getLogger(__name__)

app = FastAPI(title="Growth Report Dashboard")

# One dashboard, one analysis at a time
pipeline = AnalysisPipeline()


@app.get("/", response_class=HTMLResponse)
async def index():
    return INDEX_HTML


@app.get("/api/analyze")
async def analyze(url: str = ""):
    """Run an analysis and stream stage labels via Server-Sent Events."""
    logger.info("Streaming analysis for %r", url)

    async def event_stream():
        if pipeline.busy:
            yield _sse("error", MSG_BUSY)
            return

        queue: asyncio.Queue[str] = asyncio.Queue()
        task = asyncio.create_task(pipeline.run(url, on_progress=queue.put_nowait))

        while not task.done() or not queue.empty():
            try:
                stage = await asyncio.wait_for(queue.get(), timeout=0.1)
            except asyncio.TimeoutError:
                continue
            if stage:
                yield _sse("progress", stage)

        result: AnalysisResult = task.result()
        if result.report is None:
            yield _sse("error", result.error)
            return

        yield _sse(
            "complete",
            json.dumps({"report": result.report.to_dict(), "warning": result.error}),
        )

    return StreamingResponse(
        event_stream(),
        media_type="text/event-stream",
        headers={
            "Cache-Control": "no-cache",
            "X-Accel-Buffering": "no",
        },
    )


@app.get("/api/report")
async def report(url: str = ""):
    """Run an analysis and return the final report as JSON."""
    logger.info("Analysis requested for %r", url)
    if pipeline.busy:
        return JSONResponse({"error": MSG_BUSY}, status_code=409)

    result = await pipeline.run(url)
    if result.report is None:
        return JSONResponse({"error": result.error}, status_code=422)
    return JSONResponse({"report": result.report.to_dict(), "warning": result.error})


def _sse(event: str, data: str) -> str:
    return f"event: {event}\ndata: {data}\n\n"


# ---------------------------------------------------------------------------
# Inline HTML — single page app
# ---------------------------------------------------------------------------

INDEX_HTML = """\
<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<meta name="viewport" content="width=device-width, initial-scale=1">
<title>Growth Report</title>
<style>
  *, *::before, *::after { margin: 0; padding: 0; box-sizing: border-box; }

  body {
    font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, 'Helvetica Neue', Arial, sans-serif;
    background: #f0f2f5;
    color: #1a1a2e;
    min-height: 100vh;
    padding: 40px 20px;
  }

  .card {
    background: white;
    border-radius: 16px;
    box-shadow: 0 1px 3px rgba(0,0,0,0.08), 0 8px 24px rgba(0,0,0,0.06);
    padding: 36px;
    max-width: 960px;
    margin: 0 auto 20px auto;
  }

  h1 { font-size: 24px; font-weight: 700; margin-bottom: 6px; }
  h2 { font-size: 17px; margin: 20px 0 8px 0; }

  .subtitle { font-size: 14px; color: #6b7280; margin-bottom: 24px; }

  .input-row { display: flex; gap: 10px; }

  input[type="text"] {
    flex: 1;
    padding: 12px 16px;
    border: 1px solid #d1d5db;
    border-radius: 10px;
    font-size: 15px;
    outline: none;
  }

  button {
    padding: 12px 24px;
    background: #1a1a2e;
    color: white;
    border: none;
    border-radius: 10px;
    font-size: 15px;
    font-weight: 600;
    cursor: pointer;
  }

  button:disabled { background: #9ca3af; cursor: not-allowed; }

  #stage { margin-top: 16px; font-size: 14px; color: #4ecdc4; min-height: 20px; }

  .msg { margin-top: 16px; padding: 12px 16px; border-radius: 10px; font-size: 14px; display: none; }
  .msg.error { background: #fef2f2; border: 1px solid #fecaca; color: #991b1b; }
  .msg.warning { background: #fffbeb; border: 1px solid #fde68a; color: #92400e; }

  #result { display: none; }
  .metrics { display: flex; gap: 12px; }
  .metric { flex: 1; background: #f0f2f5; border-radius: 10px; padding: 12px; }
  .metric .value { font-size: 20px; font-weight: 700; }
  table { width: 100%; border-collapse: collapse; font-size: 14px; }
  th { text-align: left; font-size: 11px; color: #6b7280; text-transform: uppercase; padding: 6px 4px; }
  td { padding: 6px 4px; border-top: 1px solid #e5e7eb; }
  .muted { color: #6b7280; font-size: 13px; }
</style>
</head>
<body>
<div class="card">
  <h1>Growth Report</h1>
  <p class="subtitle">Enter a store URL to get competitors, market data and recommendations.</p>
  <form id="form">
    <div class="input-row">
      <input type="text" id="url" placeholder="https://example.com">
      <button type="submit" id="btn">Analyze</button>
    </div>
  </form>
  <div id="stage"></div>
  <div class="msg error" id="error"></div>
  <div class="msg warning" id="warning"></div>
</div>

<div class="card" id="result"></div>

<script>
const form = document.getElementById('form');
const btn = document.getElementById('btn');
const stageEl = document.getElementById('stage');
const errorEl = document.getElementById('error');
const warningEl = document.getElementById('warning');
const resultEl = document.getElementById('result');

function esc(s) {
  const d = document.createElement('div');
  d.textContent = s == null ? '' : String(s);
  return d.innerHTML;
}

function render(r) {
  const m = r.currentMetrics;
  let html = '<h1>' + esc(r.website.title || r.website.domain) + '</h1>';
  html += '<p class="muted">' + esc(r.website.domain) + ' &middot; ' + esc(r.industry) +
          ' &middot; source: ' + esc(r.website.method) + '</p><h2>Current metrics</h2>';
  html += '<div class="metrics">' +
    '<div class="metric"><div class="muted">ROAS</div><div class="value">' + esc(m.roas) + '%</div></div>' +
    '<div class="metric"><div class="muted">CTR</div><div class="value">' + esc(m.ctr) + '%</div></div>' +
    '<div class="metric"><div class="muted">CPC</div><div class="value">$' + esc(m.cpc) + '</div></div>' +
    '<div class="metric"><div class="muted">CVR</div><div class="value">' + esc(m.cvr) + '%</div></div></div>';
  html += '<h2>Recommendations</h2><table>';
  r.recommendations.forEach(x => {
    html += '<tr><td>' + esc(x.icon) + '</td><td>' + esc(x.priority) + '</td><td>' + esc(x.category) +
            '</td><td>' + esc(x.action) + '</td><td>' + esc(x.impact) + '</td><td>' + esc(x.confidence) + '%</td></tr>';
  });
  html += '</table><h2>Competitors</h2><table><tr><th>Name</th><th>Revenue</th><th>Ad spend</th><th>ROAS</th><th>Share</th></tr>';
  r.competitors.forEach(c => {
    html += '<tr><td>' + esc(c.name) + '</td><td>' + esc(c.estimatedRevenue) + '</td><td>' + esc(c.adSpend) +
            '</td><td>' + esc(c.roas) + '%</td><td>' + esc(c.marketShare) + '%</td></tr>';
  });
  html += '</table><h2>Market</h2><p>' + esc(r.market.totalMarketSize) + ' growing ' + esc(r.market.growthRate) +
          '. Trends: ' + esc(r.market.topTrends.join(', ')) + '</p>';
  resultEl.innerHTML = html;
  resultEl.style.display = 'block';
}

form.addEventListener('submit', (e) => {
  e.preventDefault();
  const url = document.getElementById('url').value;

  errorEl.style.display = 'none';
  warningEl.style.display = 'none';
  resultEl.style.display = 'none';
  btn.disabled = true;

  const evtSource = new EventSource('/api/analyze?url=' + encodeURIComponent(url));

  evtSource.addEventListener('progress', (e) => { stageEl.textContent = e.data; });

  evtSource.addEventListener('complete', (e) => {
    evtSource.close();
    const data = JSON.parse(e.data);
    if (data.warning) {
      warningEl.textContent = data.warning;
      warningEl.style.display = 'block';
    }
    render(data.report);
    btn.disabled = false;
    setTimeout(() => { stageEl.textContent = ''; }, 2000);
  });

  evtSource.addEventListener('error', (e) => {
    evtSource.close();
    errorEl.textContent = e.data || 'Connection lost. Please try again.';
    errorEl.style.display = 'block';
    stageEl.textContent = '';
    btn.disabled = false;
  });
});
</script>
</body>
</html>
"""
