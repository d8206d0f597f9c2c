# app/models.py

from pydantic import BaseModel, Field
from typing import Any, List, Optional


class ProductInput(BaseModel):
  """Fields a client may set on a product"""
  name: str = Field(..., examples=["Monitor Curvo de 49 Pulgadas"])
  price: float = Field(..., gt=0, examples=[500])
  availability: bool = Field(True, examples=[True])


class Product(ProductInput):
  id: int = Field(..., examples=[1])


# --- Response envelopes

class ProductResponse(BaseModel):
  data: Product


class ProductListResponse(BaseModel):
  data: List[Product]


class MessageResponse(BaseModel):
  data: str = Field(..., examples=["Producto Eliminado correctemente"])


class ErrorResponse(BaseModel):
  error: str = Field(..., examples=["Producto no encontrado intenta con otro."])


class ValidationErrorItem(BaseModel):
  type: str = "field"
  msg: str
  path: str
  location: str
  value: Optional[Any] = None


class ValidationErrorResponse(BaseModel):
  errors: List[ValidationErrorItem]
