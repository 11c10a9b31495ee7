# catalog/core.py
import json
import logging
from typing import Optional

from fastapi import HTTPException, Request
from pydantic import ValidationError
from fastapi.responses import JSONResponse, Response

from .config import CORS_HEADERS
from .models import ProductIn

logger = logging.getLogger(__name__)

MSG_ID_REQUIRED = "Product ID is required"
MSG_NOT_FOUND = "Product not found"
MSG_INVALID_BODY = "Invalid request body"
MSG_FIELDS_REQUIRED = "Name, price, and category are required"
MSG_ENDPOINT_NOT_FOUND = "Endpoint not found"
MSG_DELETED = "Product deleted successfully"


def validate_create(payload: ProductIn) -> Optional[str]:
    """Return an error message if ``payload`` can't be used to create a product.

    Only create is checked; update stores whatever decoded.
    """
    if payload.name == "" or payload.price <= 0 or payload.category == "":
        return MSG_FIELDS_REQUIRED
    return None


def require_id(product_id: str) -> str:
    if not product_id:
        raise HTTPException(status_code=400, detail=MSG_ID_REQUIRED)
    return product_id


def apply_cors(response: Response) -> Response:
    response.headers.update(CORS_HEADERS)
    return response


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


async def product_body(request: Request) -> ProductIn:
    """Decode a create/update body.

    A JSON ``null`` body decodes to an all-zero product; an empty or
    undecodable body, a non-object, or a mistyped field is a 400.
    """
    raw = await request.body()
    try:
        data = json.loads(raw)
        if data is None:
            data = {}
        return ProductIn.model_validate(data)
    except (ValueError, ValidationError):
        logger.info("rejected %s %s: undecodable body", request.method, request.url.path)
        raise HTTPException(status_code=400, detail=MSG_INVALID_BODY)
