# app/validation.py
"""
Declarative request validation.

A Rule is a named predicate paired with the message reported when it fails.
FieldRules binds an ordered list of rules to one request field (path
parameter or body key). validate() runs every rule of every field, without
stopping at the first failure, and returns the violations in order.
"""

import math
import re
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence

from app.db_models import MAX_ID, MIN_ID, NAME_MAX_LENGTH
from app.models import ProductInput

MISSING = object()

_INT_PATTERN = re.compile(r"[-+]?[0-9]+")
_NUMERIC_PATTERN = re.compile(r"[-+]?([0-9]*\.)?[0-9]+")
_BOOLEAN_STRINGS = {"true": True, "false": False, "1": True, "0": False}


# --- Predicates. Each receives MISSING when the field was not sent.

def is_int(value: Any) -> bool:
  if isinstance(value, bool):
    return False
  if isinstance(value, int):
    return True
  return isinstance(value, str) and bool(_INT_PATTERN.fullmatch(value))


def to_id(value: Any) -> Optional[int]:
  """Integer id of a value that passed is_int; None when no row can have it."""
  if isinstance(value, int):
    number = value
  else:
    if len(value.lstrip("+-").lstrip("0")) > 19:
      return None
    number = int(value)
  return number if MIN_ID <= number <= MAX_ID else None


def is_numeric(value: Any) -> bool:
  if isinstance(value, bool):
    return False
  if isinstance(value, int):
    return True
  if isinstance(value, float):
    return math.isfinite(value)
  return isinstance(value, str) and bool(_NUMERIC_PATTERN.fullmatch(value))


def not_empty(value: Any) -> bool:
  if value is MISSING or value is None:
    return False
  if isinstance(value, (str, list, dict)):
    return len(value) > 0
  return True


def max_length(limit: int) -> Callable[[Any], bool]:
  def check(value: Any) -> bool:
    if value is MISSING or value is None:
      return True
    return len(value if isinstance(value, str) else str(value)) <= limit
  return check


def to_number(value: Any) -> Optional[float]:
  """Numeric value of an int, float or numeric string; None otherwise."""
  if not is_numeric(value):
    return None
  try:
    number = float(value)
  except OverflowError:
    return None
  return number if math.isfinite(number) else None


def greater_than_zero(value: Any) -> bool:
  number = to_number(value)
  return number is not None and number > 0


def is_boolean(value: Any) -> bool:
  return to_bool(value) is not None


def to_bool(value: Any) -> Optional[bool]:
  if isinstance(value, bool):
    return value
  if isinstance(value, int) and value in (0, 1):
    return bool(value)
  if isinstance(value, str):
    return _BOOLEAN_STRINGS.get(value)
  return None


# --- Rules

@dataclass(frozen=True)
class Rule:
  name: str
  check: Callable[[Any], bool]
  message: str


@dataclass(frozen=True)
class FieldRules:
  field: str
  location: str  # "params" or "body"
  rules: Sequence[Rule]


def _violation(field_rules: FieldRules, rule: Rule, value: Any) -> Dict[str, Any]:
  error = {"type": "field", "msg": rule.message, "path": field_rules.field, "location": field_rules.location}
  if value is not MISSING:
    error["value"] = value
  return error


def validate(params: Mapping[str, Any], body: Mapping[str, Any], field_rules: Sequence[FieldRules]) -> List[Dict[str, Any]]:
  errors = []
  for field in field_rules:
    source = params if field.location == "params" else body
    value = source.get(field.field, MISSING)
    for rule in field.rules:
      if not rule.check(value):
        errors.append(_violation(field, rule, value))
  return errors


# --- Rule sets attached to routes

ID_MESSAGE = "Id no valido"
NAME_EMPTY_MESSAGE = "El nombre del Producto no puede ir vacio"
NAME_TOO_LONG_MESSAGE = f"El nombre del Producto no puede superar {NAME_MAX_LENGTH} caracteres"
PRICE_NOT_NUMERIC_MESSAGE = "Valor no valido"
PRICE_EMPTY_MESSAGE = "El precio del producto no puede ir vacio"
PRICE_INVALID_MESSAGE = "Precio no valido"
AVAILABILITY_MESSAGE = "Valor para Disponibilidad no valida"

ID_FIELD = FieldRules("id", "params", [Rule("is_int", is_int, ID_MESSAGE)])

NAME_FIELD = FieldRules("name", "body", [
  Rule("not_empty", not_empty, NAME_EMPTY_MESSAGE),
  Rule("max_length", max_length(NAME_MAX_LENGTH), NAME_TOO_LONG_MESSAGE),
])

PRICE_FIELD = FieldRules("price", "body", [
  Rule("is_numeric", is_numeric, PRICE_NOT_NUMERIC_MESSAGE),
  Rule("not_empty", not_empty, PRICE_EMPTY_MESSAGE),
  Rule("greater_than_zero", greater_than_zero, PRICE_INVALID_MESSAGE),
])

AVAILABILITY_FIELD = FieldRules("availability", "body", [Rule("is_boolean", is_boolean, AVAILABILITY_MESSAGE)])

ID_RULES = [ID_FIELD]
CREATE_RULES = [NAME_FIELD, PRICE_FIELD]
UPDATE_RULES = [ID_FIELD, NAME_FIELD, PRICE_FIELD, AVAILABILITY_FIELD]


# --- Coercion of already validated input

def to_product_input(body: Mapping[str, Any], availability: bool = True) -> ProductInput:
  """Build the DTO from a body that passed CREATE_RULES or UPDATE_RULES."""
  return ProductInput(
    name=str(body["name"]),
    price=to_number(body["price"]),
    availability=availability,
  )
