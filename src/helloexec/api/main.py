"""
FastAPI application for the hello-world service.

This module configures the FastAPI application, registers the routes
the UI shell calls, and enforces the optional API key.  Runs are
delegated to :func:`helloexec.dispatcher.run` with the resource root
taken from the configuration.
"""

from __future__ import annotations

import logging
from typing import Dict, List

from fastapi import FastAPI, HTTPException
from fastapi.responses import JSONResponse

from .. import dispatcher
from ..config import Config
from ..executor import SpawnError, UnsupportedLanguageError, resolve, supported_languages
from ..models import LanguageInfo, RunRequest, RunResponse


logger = logging.getLogger("helloexec")

if not logger.handlers:
    handler = logging.StreamHandler()
    formatter = logging.Formatter("[helloexec] %(levelname)s - %(message)s")
    handler.setFormatter(formatter)
    logger.addHandler(handler)


config = Config.from_env()

logger.setLevel(config.log_level)

logger.info(
    "Loaded config: resource_dir=%s, host=%s, port=%s",
    config.resource_dir,
    config.host,
    config.port,
)

if not (config.resource_dir / "binaries").is_dir():
    logger.warning(
        "No binaries directory under %s; run build-binaries.sh first",
        config.resource_dir,
    )


app = FastAPI(title="Hello World Explorer", version="0.1.0")


@app.middleware("http")
async def authenticate(request, call_next):
    """Middleware to enforce API key authentication on all requests."""
    path = request.url.path
    method = request.method
    client = getattr(request.client, "host", "unknown")

    logger.info("Incoming request: %s %s from %s", method, path, client)

    if config.api_key:
        provided_key = request.headers.get("x-api-key")
        if provided_key != config.api_key:
            logger.warning("Invalid API key for %s %s from %s", method, path, client)
            return JSONResponse(status_code=401, content={"detail": "Invalid API key"})

    response = await call_next(request)
    logger.info("Response: %s %s -> %s", method, path, response.status_code)
    return response


@app.get("/health")
async def health() -> Dict[str, str]:
    """Return a simple health check response."""
    return {"status": "ok"}


@app.get("/languages", response_model=List[LanguageInfo])
async def list_languages() -> List[LanguageInfo]:
    """List every language that has an execution strategy."""
    return [LanguageInfo.from_strategy(lang, resolve(lang)) for lang in supported_languages()]


@app.get("/languages/{language}", response_model=LanguageInfo)
async def get_language(language: str) -> LanguageInfo:
    """Describe how ``language`` would be run.

    Unknown identifiers are reported as ``unsupported`` rather than 404.
    """
    return LanguageInfo.from_strategy(language, resolve(language))


@app.post("/run", response_model=RunResponse)
def run_hello_world(req: RunRequest) -> RunResponse:
    """Run the hello-world program for the requested language.

    Declared without ``async`` so the blocking child process runs in
    the worker threadpool.
    """
    try:
        result = dispatcher.run(req.language, config.resource_dir)
    except UnsupportedLanguageError as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    except SpawnError as exc:
        raise HTTPException(status_code=500, detail=str(exc))
    return RunResponse.from_result(result)
