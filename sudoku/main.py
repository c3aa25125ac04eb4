"""Main FastAPI application for Sudoku Solver."""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.routes import _config_error, router


@asynccontextmanager
async def _app_lifespan(_: FastAPI):
    """Validate configuration so a bad setting fails at startup."""
    error = _config_error()
    if error:
        raise RuntimeError(f"Invalid configuration at startup: {error}")
    yield


app = FastAPI(
    title="Sudoku Solver API",
    description="API for solving N x N Sudoku puzzles by backtracking",
    version="1.0.0",
    lifespan=_app_lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(router)


@app.get("/")
async def root():
    """Root endpoint."""
    return {"message": "Sudoku Solver API", "docs": "/docs"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("sudoku.main:app", host="0.0.0.0", port=8000, reload=True)
