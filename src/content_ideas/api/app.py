import logging

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.openapi.utils import get_openapi
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from content_ideas.api.schemas import ErrorResponse, IdeaRequest, IdeaResponse
from content_ideas.errors import IdeaServiceError, InputError, MethodNotAllowedError
from content_ideas.service.generator import IdeaService

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="content-ideas", version="0.1.0")
service = IdeaService()

ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    405: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
    502: {"model": ErrorResponse},
}


def _error_response(exc: IdeaServiceError, headers: dict[str, str] | None = None) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.as_payload(), headers=headers)


def _field_path(loc) -> str:
    return ".".join(str(part) for part in loc if part != "body") or "body"


@app.exception_handler(IdeaServiceError)
async def handle_service_error(request: Request, exc: IdeaServiceError) -> JSONResponse:
    logger.warning("ideas.failed code=%s status=%d path=%s", exc.code, exc.status_code, request.url.path)
    return _error_response(exc)


@app.exception_handler(RequestValidationError)
async def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    problems = [f"{_field_path(error.get('loc', ()))}: {error.get('msg', '')}" for error in exc.errors()]
    return await handle_service_error(request, InputError("Ugyldig forespørsel: " + "; ".join(problems)))


@app.exception_handler(StarletteHTTPException)
async def handle_http_error(request: Request, exc: StarletteHTTPException):
    if exc.status_code == 405:
        logger.warning("ideas.failed code=method_not_allowed method=%s path=%s", request.method, request.url.path)
        return _error_response(MethodNotAllowedError("Use POST"), headers=getattr(exc, "headers", None))
    return await http_exception_handler(request, exc)


@app.get("/healthz")
async def healthz() -> dict:
    return {"status": "ok"}


@app.post("/ideas", response_model=IdeaResponse, responses=ERROR_RESPONSES)
async def generate_ideas(req: IdeaRequest) -> IdeaResponse:
    ideas = await service.generate(req)
    return IdeaResponse(ideas=ideas)


def custom_openapi() -> dict:
    # Request validation failures are answered with 400, not FastAPI's default 422.
    if app.openapi_schema:
        return app.openapi_schema
    schema = get_openapi(title=app.title, version=app.version, routes=app.routes)
    for path_item in schema.get("paths", {}).values():
        for operation in path_item.values():
            if isinstance(operation, dict):
                operation.get("responses", {}).pop("422", None)
    app.openapi_schema = schema
    return schema


app.openapi = custom_openapi  # type: ignore[method-assign]
