# catalog/main.py
import logging
import time
from typing import Optional

from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.responses import Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from .config import HEALTH_PATH, PRODUCTS_PATH
from .core import (
    MSG_DELETED, MSG_ENDPOINT_NOT_FOUND, MSG_NOT_FOUND,
    apply_cors, error_response, product_body, require_id, validate_create
)
from .database import ProductStore
from .models import ProductIn

logger = logging.getLogger(__name__)

ANY_METHOD = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "TRACE", "CONNECT"]


def create_app(store: Optional[ProductStore] = None) -> FastAPI:
    """Build the catalog API around ``store`` (a seeded store by default)."""
    if store is None:
        store = ProductStore.with_seed_data()

    app = FastAPI(
        title="product-catalog (in-memory)",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.store = store

    # ---------------------------
    # CORS: preflight short-circuit, headers on everything else
    # ---------------------------
    @app.middleware("http")
    async def cors(request: Request, call_next):
        if request.method == "OPTIONS":
            return apply_cors(Response(status_code=200))
        response = await call_next(request)
        return apply_cors(response)

    # ---------------------------
    # Error bodies are always {"error": message}
    # ---------------------------
    @app.exception_handler(StarletteHTTPException)
    async def http_error(request: Request, exc: StarletteHTTPException):
        if exc.status_code == 405:
            return error_response(404, MSG_ENDPOINT_NOT_FOUND)
        return error_response(exc.status_code, str(exc.detail))

    # ---------------------------
    # Health
    # ---------------------------
    @app.get(HEALTH_PATH)
    async def health():
        return {"status": "healthy", "timestamp": int(time.time())}

    # ---------------------------
    # Product endpoints
    # ---------------------------
    @app.get(PRODUCTS_PATH)
    async def list_products():
        return [p.to_json() for p in store.list()]

    @app.post(PRODUCTS_PATH, status_code=201)
    async def create_product(payload: ProductIn = Depends(product_body)):
        problem = validate_create(payload)
        if problem:
            logger.info("rejected create: %s", problem)
            raise HTTPException(status_code=400, detail=problem)
        return store.create(payload).to_json()

    # The id is everything after "/api/products/", so an empty id still
    # lands here and is answered with 400 instead of a 404.
    @app.get(PRODUCTS_PATH + "/{product_id:path}")
    async def get_product(product_id: str):
        product, found = store.get(require_id(product_id))
        if not found:
            raise HTTPException(status_code=404, detail=MSG_NOT_FOUND)
        return product.to_json()

    @app.put(PRODUCTS_PATH + "/{product_id:path}")
    async def update_product(product_id: str, payload: ProductIn = Depends(product_body)):
        product, found = store.update(require_id(product_id), payload)
        if not found:
            raise HTTPException(status_code=404, detail=MSG_NOT_FOUND)
        return product.to_json()

    @app.delete(PRODUCTS_PATH + "/{product_id:path}")
    async def delete_product(product_id: str):
        if not store.delete(require_id(product_id)):
            raise HTTPException(status_code=404, detail=MSG_NOT_FOUND)
        return {"message": MSG_DELETED}

    # Registered last: catches every unmatched path and method.
    @app.api_route("/{rest:path}", methods=ANY_METHOD, include_in_schema=False)
    async def endpoint_not_found(rest: str):
        raise HTTPException(status_code=404, detail=MSG_ENDPOINT_NOT_FOUND)

    return app
