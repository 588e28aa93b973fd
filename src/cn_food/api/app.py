"""FastAPI application factory."""

import logging
from typing import Any

from fastapi import Body, FastAPI, HTTPException, Request

from cn_food.app_logging import configure_logging
from cn_food.containers import AppContainer
from cn_food.errors import InvalidArgumentsError, UnknownOperationError


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app exposing the food operations."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)
    logger.info(
        "Serving %s foods via %s operations",
        len(container.dataset),
        len(container.tool_registry.list_tools()),
    )

    app = FastAPI(
        title=container.settings.server_name,
        version=container.settings.server_version,
    )
    app.state.container = container

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/tools")
    async def list_tools(request: Request) -> dict[str, object]:
        """Return every operation with its description and input schema."""
        state_container: AppContainer = request.app.state.container
        specs = state_container.tool_registry.list_tools()
        return {"tools": [spec.to_dict() for spec in specs]}

    @app.post("/tools/{name}")
    async def call_tool(
        name: str,
        request: Request,
        arguments: dict[str, Any] | None = Body(default=None),
    ) -> dict[str, object]:
        """Validate arguments and run one operation."""
        state_container: AppContainer = request.app.state.container
        try:
            result = state_container.tool_registry.invoke(name, arguments)
        except UnknownOperationError as exc:
            raise HTTPException(status_code=404, detail=str(exc)) from exc
        except InvalidArgumentsError as exc:
            raise HTTPException(status_code=422, detail=exc.errors) from exc
        return result.to_dict()

    return app
