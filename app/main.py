import uuid
from contextlib import asynccontextmanager
from typing import Any

import structlog
from fastapi import Body, FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from slowapi.util import get_remote_address

from app.core.config import settings
from app.core.errors import MenuItemNotFoundError, MenuValidationError
from app.core.logging import body_for_log, configure_logging, request_context
from app.core.sentry import init_sentry
from app.menu import DeletedMenuItem, MenuItem, MenuStore, validate_menu_item

configure_logging(settings.log_level, service=settings.app_name)
init_sentry()
logger = structlog.get_logger(__name__)

BODY_METHODS = {"POST", "PUT"}


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("service_started", app_name=settings.app_name, port=settings.port)
    yield


app = FastAPI(title=settings.app_name, lifespan=lifespan)
limiter = Limiter(key_func=get_remote_address, enabled=settings.rate_limit_enabled)
app.state.limiter = limiter
app.add_middleware(SlowAPIMiddleware)
store = MenuStore.seeded()


@app.middleware("http")
async def log_request(request: Request, call_next):
    fields: dict[str, Any] = {}
    if request.url.query:
        fields["query"] = request.url.query

    if request.method in BODY_METHODS and settings.log_request_bodies:
        body = await request.body()
        fields["body"] = body_for_log(body)

        async def receive() -> dict[str, object]:
            return {"type": "http.request", "body": body, "more_body": False}

        request._receive = receive  # type: ignore[attr-defined]

    logger.info("request_received", **fields)
    return await call_next(request)


@app.middleware("http")
async def add_request_context(request: Request, call_next):
    request_id = request.headers.get("x-request-id") or str(uuid.uuid4())
    with request_context(request_id, request.method, request.url.path):
        response = await call_next(request)

    response.headers["x-request-id"] = request_id
    return response


@app.exception_handler(MenuValidationError)
async def menu_validation_handler(request: Request, exc: MenuValidationError):
    logger.warning(
        "menu_validation_failed",
        fields=[error["field"] for error in exc.errors],
    )
    return JSONResponse(
        status_code=400,
        content={"message": "Validation failed", "errors": jsonable_encoder(exc.errors)},
    )


@app.exception_handler(MenuItemNotFoundError)
async def menu_item_not_found_handler(request: Request, exc: MenuItemNotFoundError):
    logger.info("menu_item_not_found", item_id=str(exc.item_id))
    return JSONResponse(status_code=404, content={"message": "Menu item not found"})


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    logger.warning("request_validation_failed", error=str(exc))
    return JSONResponse(
        status_code=400,
        content={
            "message": "Invalid request body",
            "errors": jsonable_encoder(exc.errors()),
        },
    )


@app.exception_handler(RateLimitExceeded)
async def rate_limit_handler(request: Request, exc: RateLimitExceeded):
    logger.warning("rate_limit_exceeded")
    return JSONResponse(
        status_code=429,
        content={"message": "Rate limit exceeded. Please slow down."},
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("unhandled_exception", path=request.url.path)
    return JSONResponse(status_code=500, content={"message": "Internal Server Error"})


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/menu", response_model=list[MenuItem])
async def list_menu_items() -> list[MenuItem]:
    return store.list_items()


@app.get("/menu/{item_id}", response_model=MenuItem)
async def get_menu_item(item_id: str) -> MenuItem:
    """
    Fetch one item. Ids that are not integers are reported as not found.
    """
    return store.get_item(item_id)


@app.post("/menu", response_model=MenuItem, status_code=201)
@limiter.limit(settings.write_rate_limit)
async def create_menu_item(
    request: Request,
    payload: dict[str, Any] = Body(...),
) -> MenuItem:
    return store.create_item(validate_menu_item(payload))


@app.put("/menu/{item_id}", response_model=MenuItem)
@limiter.limit(settings.write_rate_limit)
async def replace_menu_item(
    request: Request,
    item_id: str,
    payload: dict[str, Any] = Body(...),
) -> MenuItem:
    """
    Overwrite every field of an item. The body is validated before the id is
    resolved, so a bad body is a 400 even for an unknown id.
    """
    return store.replace_item(item_id, validate_menu_item(payload))


@app.delete("/menu/{item_id}", response_model=DeletedMenuItem)
@limiter.limit(settings.write_rate_limit)
async def delete_menu_item(request: Request, item_id: str) -> DeletedMenuItem:
    return DeletedMenuItem(deleted=store.delete_item(item_id))
