from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.responses import FileResponse

from marketdash.errors import DashboardError
from marketdash.routers import analyst, history, quotes

app = FastAPI(
    title="Market Dashboard",
    summary="Quotes, price history and analyst ratings proxied from Yahoo Finance.",
    description=(
        "Backend for a small market dashboard. Every value is fetched from Yahoo "
        "Finance on request and reshaped into JSON; nothing is cached or stored.\n\n"
        "**Key concepts:**\n"
        "- The batch endpoint looks up each ticker concurrently and reports a "
        "per-ticker result, so one unknown symbol never fails the whole request.\n"
        "- Results always come back in request order.\n"
        "- Errors are returned as `{error, details}` with status 400 for bad input "
        "and 500 when the provider call fails.\n"
    ),
    version="1.0.0",
    openapi_tags=[
        {
            "name": "quotes",
            "description": "Latest quotes for a single ticker or a comma-separated batch of tickers.",
        },
        {
            "name": "history",
            "description": "Daily closing prices over 1m, 3m, 6m or 1y.",
        },
        {
            "name": "analyst",
            "description": "Analyst price targets, consensus rating, rating trend and recent upgrades/downgrades.",
        },
        {
            "name": "system",
            "description": "Health checks and operational endpoints.",
        },
    ],
)

app.include_router(quotes.router)
app.include_router(history.router)
app.include_router(analyst.router)


@app.exception_handler(DashboardError)
async def dashboard_error_handler(request: Request, exc: DashboardError):
    return JSONResponse(status_code=exc.status_code, content=exc.to_payload())


@app.get("/api/health", summary="Health check", tags=["system"])
async def health():
    """Return `{\"status\": \"ok\"}` when the service is running."""
    return {"status": "ok"}


# --- SPA static serving (production only) ---
# A built dashboard frontend is copied into ./static next to the package.
# Without it (dev, tests) the mount is skipped entirely.
_SPA_DIR = Path(__file__).resolve().parent.parent / "static"

if (_SPA_DIR / "index.html").exists():
    app.mount("/assets", StaticFiles(directory=_SPA_DIR / "assets"), name="static-assets")

    @app.get("/{path:path}", include_in_schema=False)
    async def _spa_fallback(path: str):
        file = _SPA_DIR / path
        if file.is_file() and file.resolve().is_relative_to(_SPA_DIR.resolve()):
            return FileResponse(file)
        return FileResponse(_SPA_DIR / "index.html")
