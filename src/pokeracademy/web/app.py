from __future__ import annotations

import logging
import os
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import HTMLResponse

from ..features.session import SessionManager, create_session_router
from ..features.session.concurrency import shutdown_executor

logger = logging.getLogger(__name__)


@asynccontextmanager
async def _lifespan(_app: FastAPI) -> AsyncIterator[None]:
    yield
    shutdown_executor()


app = FastAPI(title="Poker Academy", lifespan=_lifespan)
_manager = SessionManager()
app.include_router(create_session_router(_manager))


@app.get("/healthz")
def healthz() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/", response_class=HTMLResponse)
def index() -> str:
    try:
        from importlib.resources import files

        data_dir = files("pokeracademy.data")
        return (data_dir / "web" / "index.html").read_text(encoding="utf-8")
    except (FileNotFoundError, ModuleNotFoundError) as exc:  # pragma: no cover - packaging edge
        logger.warning("Failed to load bundled UI: %s", exc)
        return f"<html><body><h1>Poker Academy</h1><p>Failed to load UI: {exc}</p></body></html>"


def main() -> None:  # pragma: no cover - runner
    import uvicorn

    host = os.environ.get("BIND", "0.0.0.0")
    port = int(os.environ.get("PORT", "8000"))
    uvicorn.run(app, host=host, port=port, factory=False)


if __name__ == "__main__":  # pragma: no cover
    main()
