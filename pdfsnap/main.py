# pdfsnap/main.py
from __future__ import annotations

import re
from pathlib import Path

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse
from fastapi.staticfiles import StaticFiles

from pdfsnap.api import routers
from pdfsnap.core.config import get_settings
from pdfsnap.core.logging import configure_logging
from pdfsnap.storage.sessions import SessionRegistry

# === Settings and logging ===
settings = get_settings()
logger = configure_logging()

app = FastAPI(title=settings.app_name, version=settings.app_version)

# === CORS ===
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allow_origins,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["Content-Disposition"],
)

# === Sessions ===
# Each browser gets its own workspace, keyed by an opaque cookie.
_SESSION_ID = re.compile(r"[0-9a-f]{32}")


@app.middleware("http")
async def assign_session(request: Request, call_next):
    session_id = request.cookies.get(settings.session_cookie) or ""
    fresh = not _SESSION_ID.fullmatch(session_id)
    if fresh:
        session_id = SessionRegistry.new_id()
    request.state.session_id = session_id

    response = await call_next(request)
    if fresh:
        response.set_cookie(
            settings.session_cookie,
            session_id,
            max_age=settings.session_ttl_minutes * 60,
            httponly=True,
            samesite="lax",
        )
    return response


# === Routers ===
for router in routers:
    app.include_router(router)

public_dir: Path = settings.public_dir


# === Basic endpoints ===
@app.get("/", include_in_schema=False)
async def root() -> FileResponse:
    logger.debug("Login page requested")
    return FileResponse(public_dir / "login.html")


@app.get("/health")
async def health_check() -> dict:
    logger.debug("Health check invoked")
    return {"status": "ok", "message": f"{settings.app_name} is running"}


# === Static assets ===
# Mounted last so the routes above take precedence.
app.mount("/", StaticFiles(directory=str(public_dir)), name="public")


def main() -> None:
    logger.info("Server starting on port %s", settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
