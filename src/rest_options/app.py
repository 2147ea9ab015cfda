"""HTTP application — explicit route table over the options service."""

from __future__ import annotations

import hmac
import json
import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

from fastapi import APIRouter, Depends, FastAPI, Form, Header, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from rest_options.admin import (
    AdminRouter,
    RegenerateApiKey,
    SaveRestrictionPolicy,
    settings_snapshot,
)
from rest_options.config import ServiceConfig, create_store
from rest_options.context import RequestContext
from rest_options.exceptions import InvalidParamError, UnauthorizedError
from rest_options.schema import ErrorResponse, StatusData
from rest_options.service import OptionsService
from rest_options.stores.base import Store

logger = logging.getLogger(__name__)

API_KEY_HEADER = "x-api-key"


def _decode_json(raw: bytes) -> Any:
    if not raw:
        return None
    try:
        return json.loads(raw)
    except (UnicodeDecodeError, json.JSONDecodeError):
        return None


def _error(error: InvalidParamError | UnauthorizedError) -> JSONResponse:
    payload = ErrorResponse(
        code=error.code,
        message=error.message,
        data=StatusData(status=error.status),
    )
    return JSONResponse(status_code=payload.status, content=payload.model_dump())


def build_options_router(service: OptionsService, namespace: str) -> APIRouter:
    """Return a router carrying ``POST /{namespace}/get-options``."""

    async def get_options(request: Request) -> JSONResponse:
        body = _decode_json(await request.body())
        context = RequestContext.from_body(request.headers.get(API_KEY_HEADER), body)
        response = await service.get_options(context)
        return JSONResponse(status_code=response.status, content=response.model_dump())

    router = APIRouter()
    router.add_api_route(
        f"/{namespace.strip('/')}/get-options",
        get_options,
        methods=["POST"],
        name="get_options",
    )
    return router


def build_admin_router(store: Store, admin_token: str, endpoint: str) -> APIRouter:
    """Return a router for the settings-page actions, guarded by *admin_token*."""
    commands = AdminRouter(store)

    async def require_admin(x_admin_token: str | None = Header(default=None)) -> None:
        if not x_admin_token or not hmac.compare_digest(
            x_admin_token.encode("utf-8"), admin_token.encode("utf-8")
        ):
            logger.warning("Rejected admin request: invalid admin token")
            raise UnauthorizedError("Invalid admin token")

    async def read_settings() -> JSONResponse:
        snapshot = await settings_snapshot(store, endpoint)
        return JSONResponse(content=snapshot.model_dump(mode="json"))

    async def regenerate_api_key() -> JSONResponse:
        result = await commands.dispatch(RegenerateApiKey())
        return JSONResponse(content=result.model_dump())

    async def save_restrictions(
        restriction_type: str | None = Form(default=None),
        restriction_list: str = Form(default=""),
    ) -> JSONResponse:
        try:
            command = SaveRestrictionPolicy(
                restriction_type=restriction_type,
                restriction_list=restriction_list,
            )
        except ValidationError as e:
            if restriction_type is None:
                raise InvalidParamError("Missing restriction type") from e
            raise InvalidParamError(f"Invalid restriction type: {restriction_type!r}") from e
        await commands.dispatch(command)
        snapshot = await settings_snapshot(store, endpoint)
        return JSONResponse(content=snapshot.model_dump(mode="json"))

    router = APIRouter(prefix="/admin", dependencies=[Depends(require_admin)])
    router.add_api_route("/settings", read_settings, methods=["GET"], name="admin_settings")
    router.add_api_route("/api-key", regenerate_api_key, methods=["POST"], name="admin_api_key")
    router.add_api_route(
        "/restrictions", save_restrictions, methods=["POST"], name="admin_restrictions"
    )
    return router


def create_app(config: ServiceConfig | None = None, store: Store | None = None) -> FastAPI:
    """Build the FastAPI application.

    Args:
        config: Service configuration.  Read from the environment when omitted.
        store: Optional store to use instead of creating one from config.
               The app closes the store on shutdown only if it created it.
    """
    config = config or ServiceConfig.from_env()
    owns_store = store is None
    store = store or create_store(config.store)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        if owns_store:
            await store.close()

    app = FastAPI(title="rest-options", lifespan=lifespan)

    async def handle_request_error(
        request: Request, exc: InvalidParamError | UnauthorizedError
    ) -> JSONResponse:
        return _error(exc)

    app.add_exception_handler(InvalidParamError, handle_request_error)
    app.add_exception_handler(UnauthorizedError, handle_request_error)

    app.include_router(build_options_router(OptionsService(store), config.namespace))
    if config.admin_token:
        app.include_router(build_admin_router(store, config.admin_token, config.endpoint))
    else:
        logger.info("REST_OPTIONS_ADMIN_TOKEN not set; admin routes disabled")

    logger.info(f"Lookup endpoint: POST {config.endpoint}")
    return app
