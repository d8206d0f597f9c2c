# app/exceptions.py

from typing import Any, Dict, List

NOT_FOUND_MESSAGE = "Producto no encontrado intenta con otro."
INTERNAL_ERROR_MESSAGE = "Error interno del servidor"


class ProductException(Exception):
  """All product service errors"""
  pass


class ProductNotFoundError(ProductException):
  """No product row with the requested id"""
  def __init__(self, product_id: int):
    self.product_id = product_id
    self.message = NOT_FOUND_MESSAGE
    super().__init__(self.message)


class RequestValidationFailed(ProductException):
  """One or more validation rules failed for the incoming request"""
  def __init__(self, errors: List[Dict[str, Any]]):
    self.errors = errors
    super().__init__(f"{len(errors)} validation error(s)")


class RepositoryError(ProductException):
  """Storage layer failure (connection lost, constraint violation, ...)"""
  def __init__(self, operation: str, message: str = None):
    self.operation = operation
    self.message = message or f"Storage error during '{operation}'"
    super().__init__(self.message)
