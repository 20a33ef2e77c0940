"""FastAPI application entrypoint for repolint service mode."""

from __future__ import annotations

import asyncio
from typing import Any, Callable, List, Optional

from fastapi import Depends, FastAPI
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from ..config import ConfigError
from ..linter import Linter, LintReport


class LintRequest(BaseModel):
    path: str
    checkers: Optional[List[str]] = None


class LintResponse(BaseModel):
    warnings: List[str]
    errors: List[str]


class HealthResponse(BaseModel):
    status: str


def _default_linter(checkers: Optional[List[str]]) -> Linter:
    return Linter(enabled=checkers)


def create_app(
    linter_factory: Callable[[Optional[List[str]]], Linter] = _default_linter,
) -> FastAPI:
    """Create the FastAPI application exposing repolint runs."""

    app = FastAPI(title="repolint service", version="0.1.0")

    def get_linter_factory() -> Callable[[Optional[List[str]]], Linter]:
        return linter_factory

    @app.get("/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        return HealthResponse(status="ok")

    @app.post("/lint", response_model=LintResponse)
    async def lint_repo(
        payload: LintRequest,
        factory: Callable[[Optional[List[str]]], Linter] = Depends(get_linter_factory),
    ) -> LintResponse:
        def _run_lint() -> LintReport:
            # A fresh linter per request keeps checker state private.
            return factory(payload.checkers).run(payload.path)

        loop = asyncio.get_running_loop()
        report = await loop.run_in_executor(None, _run_lint)
        return LintResponse(warnings=report.warnings, errors=report.errors)

    @app.exception_handler(FileNotFoundError)
    async def file_not_found_handler(_: Any, exc: FileNotFoundError) -> JSONResponse:
        return JSONResponse(status_code=404, content={"detail": str(exc)})

    @app.exception_handler(NotADirectoryError)
    async def not_a_directory_handler(_: Any, exc: NotADirectoryError) -> JSONResponse:
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    @app.exception_handler(ConfigError)
    async def config_error_handler(_: Any, exc: ConfigError) -> JSONResponse:
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    @app.exception_handler(ValueError)
    async def value_error_handler(_: Any, exc: ValueError) -> JSONResponse:
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    return app


def run_service(host: str = "127.0.0.1", port: int = 8000) -> None:  # pragma: no cover - integration path
    import uvicorn

    uvicorn.run(create_app(), host=host, port=port)
