"""
Room HTTP routes

Builds use case requests from query strings and maps responses to JSON
payloads and status codes.
"""

from typing import Any, Dict, Optional

from fastapi import APIRouter, FastAPI, Request
from fastapi.responses import JSONResponse

from rentomatic import __version__
from rentomatic.application.responses import Response, ResponseType
from rentomatic.domain.entities.room_entity import Room
from rentomatic.infrastructure.container.dependency_injection import (
    DependencyContainer,
    get_container,
)
from rentomatic.infrastructure.logging.logging_config import get_structured_logger

logger = get_structured_logger(__name__)

FILTER_PREFIX = "filter_"

STATUS_CODES: Dict[ResponseType, int] = {
    ResponseType.SUCCESS: 200,
    ResponseType.PARAMETERS_ERROR: 400,
    ResponseType.RESOURCE_ERROR: 404,
    ResponseType.SYSTEM_ERROR: 500,
}


def extract_filters(query_params: Any) -> Optional[Dict[str, str]]:
    """Collect ``filter_<key>`` query parameters; None when there are none"""
    filters = {
        key[len(FILTER_PREFIX):]: value
        for key, value in query_params.items()
        if key.startswith(FILTER_PREFIX)
    }
    return filters or None


def serialize(value: Any) -> Any:
    """Convert use case payloads into JSON-compatible values"""
    if isinstance(value, Room):
        return value.to_dict()
    if isinstance(value, (list, tuple)):
        return [serialize(item) for item in value]
    return value


def to_http_response(response: Response) -> JSONResponse:
    """Map a use case response to an HTTP response"""
    content = serialize(response.value)
    return JSONResponse(content=content, status_code=STATUS_CODES[response.type])


def build_router(container: DependencyContainer) -> APIRouter:
    """Create the room routes bound to a container"""
    router = APIRouter()

    @router.get("/rooms")
    def room_list(request: Request):
        """List rooms, optionally filtered"""
        filters = extract_filters(request.query_params)
        room_request = container.get_room_list_request_builder()(filters)
        response = container.get_room_list_use_case().execute(room_request)
        logger.info(
            "room_list",
            filters=filters,
            response_type=response.type.value,
        )
        return to_http_response(response)

    @router.get("/rooms/{code}")
    def room_detail(code: str):
        """Get one room by code"""
        room_request = container.get_room_detail_request_builder()(code)
        response = container.get_room_detail_use_case().execute(room_request)
        logger.info("room_detail", code=code, response_type=response.type.value)
        return to_http_response(response)

    @router.get("/health")
    def health():
        """Liveness probe"""
        return {"status": "ok", "version": __version__}

    return router


def create_app(container: Optional[DependencyContainer] = None) -> FastAPI:
    """Create the FastAPI application"""
    app = FastAPI(title="Rentomatic", version=__version__)
    app.include_router(build_router(container or get_container()))
    return app
