"""FastAPI application wiring for Kill Awards."""

from __future__ import annotations

from collections.abc import Callable
from contextlib import asynccontextmanager

from fastapi import FastAPI

from killawards import __version__
from killawards.api import routes
from killawards.api.runtime import ApiState, build_state


def create_app(*, state_factory: Callable[[], ApiState] = build_state) -> FastAPI:
    """Instantiate the FastAPI application with routing and lifecycle hooks."""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        state = state_factory()
        app.state.api_state = state
        try:
            yield
        finally:
            await state.shutdown()

    app = FastAPI(title="Kill Awards API", version=__version__, lifespan=lifespan)
    app.include_router(routes.router)
    return app


app = create_app()
