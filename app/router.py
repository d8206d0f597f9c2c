# app/router.py

import json
from dataclasses import dataclass
from typing import Any, Dict, Optional, Sequence

from fastapi import APIRouter, Depends, Request
from sqlmodel import Session

from app import handlers
from app.database import get_session
from app.exceptions import RequestValidationFailed
from app.logger import get_logger
from app.models import (ErrorResponse, MessageResponse, ProductListResponse, ProductResponse,
                        ValidationErrorResponse)
from app.repository import ProductRepository, SQLProductRepository
from app.validation import CREATE_RULES, ID_RULES, UPDATE_RULES, FieldRules, to_id, validate

log = get_logger(__name__)

router = APIRouter(prefix="/api/products", tags=["Products"])


@dataclass
class ValidatedRequest:
  params: Dict[str, Any]
  body: Dict[str, Any]

  @property
  def product_id(self) -> Optional[int]:
    """None when the id is outside the range storage can hold."""
    return to_id(self.params["id"])


async def _read_json_body(request: Request) -> Dict[str, Any]:
  """JSON object body, or {} when the body is absent, malformed or not an object."""
  raw = await request.body()
  if not raw:
    return {}
  try:
    data = json.loads(raw)
  except ValueError:
    log.debug(f"Malformed JSON body on {request.method} {request.url.path}")
    return {}
  return data if isinstance(data, dict) else {}


def validated(field_rules: Sequence[FieldRules]):
  """Route dependency: run the rules, short-circuit with 400 on any violation."""
  async def check(request: Request) -> ValidatedRequest:
    params = dict(request.path_params)
    body = await _read_json_body(request)
    errors = validate(params, body, field_rules)
    if errors:
      log.info(f"Validation failed on {request.method} {request.url.path}: {[e['msg'] for e in errors]}")
      raise RequestValidationFailed(errors)
    return ValidatedRequest(params=params, body=body)
  return check


def get_repository(session: Session = Depends(get_session)) -> ProductRepository:
  return SQLProductRepository(session)


# --- OpenAPI documentation fragments

ID_PARAMETER = {
  "parameters": [{
    "in": "path",
    "name": "id",
    "required": True,
    "description": "The ID of the product",
    "schema": {"type": "integer"},
  }]
}

CREATE_BODY = {
  "requestBody": {
    "required": True,
    "content": {"application/json": {"schema": {
      "type": "object",
      "properties": {
        "name": {"type": "string", "example": "Mazo"},
        "price": {"type": "number", "example": 1250},
      },
      "required": ["name", "price"],
    }}},
  }
}

UPDATE_BODY = {
  "requestBody": {
    "required": True,
    "content": {"application/json": {"schema": {
      "type": "object",
      "properties": {
        "name": {"type": "string", "example": "Monitor Curvo de 49 cm"},
        "price": {"type": "number", "example": 7500},
        "availability": {"type": "boolean", "example": True},
      },
      "required": ["name", "price", "availability"],
    }}},
  }
}

BAD_REQUEST = {400: {"model": ValidationErrorResponse, "description": "Bad Request - invalid ID or input data"}}
NOT_FOUND = {404: {"model": ErrorResponse, "description": "Product Not Found"}}
SERVER_ERROR = {500: {"model": ErrorResponse, "description": "Storage failure"}}


# --- Routes

@router.get("", response_model=ProductListResponse, responses={**SERVER_ERROR},
            summary="Get a list of products")
def list_products(repo: ProductRepository = Depends(get_repository)):
  """Return every product, most expensive first."""
  return handlers.list_products(repo)


@router.get("/{id}", response_model=ProductResponse, responses={**BAD_REQUEST, **NOT_FOUND, **SERVER_ERROR},
            openapi_extra=ID_PARAMETER, summary="Get a product by ID")
def get_product(req: ValidatedRequest = Depends(validated(ID_RULES)),
                repo: ProductRepository = Depends(get_repository)):
  """Return a product based on its unique ID."""
  return handlers.get_product(repo, req.product_id)


@router.post("", status_code=201, response_model=ProductResponse, responses={**BAD_REQUEST, **SERVER_ERROR},
             openapi_extra=CREATE_BODY, summary="Create a new product")
def create_product(req: ValidatedRequest = Depends(validated(CREATE_RULES)),
                   repo: ProductRepository = Depends(get_repository)):
  """Store a new product. It starts as available."""
  return handlers.create_product(repo, req.body)


@router.put("/{id}", response_model=ProductResponse, responses={**BAD_REQUEST, **NOT_FOUND, **SERVER_ERROR},
            openapi_extra={**ID_PARAMETER, **UPDATE_BODY}, summary="Update a product with user input")
def update_product(req: ValidatedRequest = Depends(validated(UPDATE_RULES)),
                   repo: ProductRepository = Depends(get_repository)):
  """Replace name, price and availability of a product."""
  return handlers.update_product(repo, req.product_id, req.body)


@router.patch("/{id}", response_model=ProductResponse, responses={**BAD_REQUEST, **NOT_FOUND, **SERVER_ERROR},
              openapi_extra=ID_PARAMETER, summary="Update product availability")
def toggle_availability(req: ValidatedRequest = Depends(validated(ID_RULES)),
                        repo: ProductRepository = Depends(get_repository)):
  """Flip the availability flag."""
  return handlers.toggle_availability(repo, req.product_id)


@router.delete("/{id}", response_model=MessageResponse, responses={**BAD_REQUEST, **NOT_FOUND, **SERVER_ERROR},
               openapi_extra=ID_PARAMETER, summary="Delete a product by ID")
def delete_product(req: ValidatedRequest = Depends(validated(ID_RULES)),
                   repo: ProductRepository = Depends(get_repository)):
  return handlers.delete_product(repo, req.product_id)
