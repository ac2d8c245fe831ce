from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from src.adapters.api.controllers.buses import router as buses_router
from src.domain.exceptions import ConfigurationError, UpstreamFetchError

app = FastAPI(title="Approaching Buses")
app.include_router(buses_router)


@app.exception_handler(ConfigurationError)
async def configuration_error_handler(
    request: Request, exc: ConfigurationError
) -> JSONResponse:
    logging.getLogger("uvicorn.error").error("Configuration error: %s", exc)
    return JSONResponse(status_code=500, content={"message": str(exc)})


@app.exception_handler(UpstreamFetchError)
async def upstream_error_handler(
    request: Request, exc: UpstreamFetchError
) -> JSONResponse:
    logging.getLogger("uvicorn.error").error("Upstream feed error: %s", exc)
    return JSONResponse(status_code=502, content={"message": str(exc)})


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Keep error bodies JSON and free of internals (notably the feed key)."""

    logging.getLogger("uvicorn.error").exception(
        "Unhandled exception", extra={"path": str(request.url.path)}
    )
    return JSONResponse(status_code=500, content={"message": "Internal Server Error"})


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}
