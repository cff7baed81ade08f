"""Storefront REST API.

Every response is ``{"success": true, "data": ...}`` or
``{"success": false, "message": ...}``. Domain errors map to 400/404;
failed commits and anything unexpected map to 500.
"""

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import Any, Optional

from fastapi import APIRouter, Body, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from storefront.domain.exceptions import (
    DomainException,
    EntityNotFoundError,
    TransactionAbortedError,
)
from storefront.infrastructure.bootstrap import Handlers
from storefront.infrastructure.notifications.whatsapp import WhatsAppNotifier

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api")


def _handlers(request: Request) -> Handlers:
    return request.app.state.handlers


def _ok(data: Any, status_code: int = 200, **extra: Any) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"success": True, "data": data, **extra})


def _fail(message: str, status_code: int) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"success": False, "message": message})


# =============================================================================
# Inquiries
# =============================================================================

@router.post("/inquiries")
async def create_inquiry(request: Request, payload: Any = Body(None)):
    dto = await _handlers(request).create_inquiry.handle(payload)
    return _ok(dto.to_json(), status_code=201)


@router.get("/inquiries")
async def list_inquiries(
    request: Request,
    page: int = 1,
    limit: int = 10,
    status: Optional[str] = None,
    product: Optional[str] = None,
    sort: str = "-createdAt",
):
    result = await _handlers(request).list_inquiries.handle(
        status=status, product_id=product, page=page, limit=limit, sort=sort
    )
    return _ok(
        [item.to_json() for item in result.items],
        pagination=result.pagination.to_json(),
    )


@router.get("/inquiries/{inquiry_id}")
async def show_inquiry(request: Request, inquiry_id: str):
    dto = await _handlers(request).show_inquiry.handle(inquiry_id)
    return _ok(dto.to_json())


@router.put("/inquiries/{inquiry_id}")
async def update_inquiry(request: Request, inquiry_id: str, payload: Any = Body(None)):
    dto = await _handlers(request).update_inquiry.handle(inquiry_id, payload)
    return _ok(dto.to_json())


@router.delete("/inquiries/{inquiry_id}")
async def delete_inquiry(request: Request, inquiry_id: str):
    dto = await _handlers(request).delete_inquiry.handle(inquiry_id)
    return _ok(dto.to_json())


# =============================================================================
# Products
# =============================================================================

@router.post("/products")
async def add_product(request: Request, payload: Any = Body(None)):
    dto = await _handlers(request).add_product.handle(payload)
    return _ok(dto.to_json(), status_code=201)


@router.get("/products/{product_id}")
async def show_product(request: Request, product_id: str):
    dto = await _handlers(request).show_product.handle(product_id)
    return _ok(dto.to_json())


@router.put("/products/{product_id}/stock")
async def set_stock(request: Request, product_id: str, payload: Any = Body(None)):
    dto = await _handlers(request).set_stock.handle(product_id, payload)
    return _ok(dto.to_json())


# =============================================================================
# Error mapping
# =============================================================================

async def _domain_error(request: Request, exc: DomainException) -> JSONResponse:
    if isinstance(exc, TransactionAbortedError):
        logger.error(f"{request.method} {request.url.path} aborted: {exc}")
        return _fail("Internal server error", 500)
    logger.warning(f"{request.method} {request.url.path} rejected: {exc}")
    if isinstance(exc, EntityNotFoundError):
        return _fail(str(exc), 404)
    # ValidationError and its InvalidVariant / InsufficientStock subclasses
    return _fail(str(exc), 400)


async def _request_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    first = exc.errors()[0] if exc.errors() else {}
    field = ".".join(str(part) for part in first.get("loc", ()) if part not in ("query", "path", "body"))
    message = f"{field}: {first.get('msg', 'Invalid request')}" if field else first.get("msg", "Invalid request")
    return _fail(message, 400)


async def _unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return _fail("Internal server error", 500)


# =============================================================================
# Application factory
# =============================================================================

def create_app(handlers: Handlers) -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Storefront service started")
        yield
        pending = list(handlers.create_inquiry.notification_tasks)
        if pending:
            await asyncio.gather(*pending, return_exceptions=True)
        if isinstance(handlers.notifier, WhatsAppNotifier):
            await handlers.notifier.close()
        logger.info("Storefront service shutting down...")

    app = FastAPI(title="storefront", version="0.1.0", lifespan=lifespan)
    app.state.handlers = handlers
    app.include_router(router)
    app.add_exception_handler(DomainException, _domain_error)
    app.add_exception_handler(RequestValidationError, _request_validation_error)
    app.add_exception_handler(Exception, _unexpected_error)

    @app.get("/health")
    async def health():
        return {"status": "ok", "service": "storefront"}

    return app
