# tests/test_validation.py

import pytest

from app.validation import (CREATE_RULES, ID_RULES, MISSING, UPDATE_RULES, Rule, FieldRules,
                            greater_than_zero, is_boolean, is_int, is_numeric, max_length, not_empty,
                            to_bool, to_id, to_number, to_product_input, validate)


def messages(errors):
  return [error["msg"] for error in errors]


@pytest.mark.parametrize("value, expected", [
  ("1", True), ("-5", True), ("+12", True), ("007", True), (3, True),
  ("not-valid-url", False), ("1\n", False), ("1.5", False), ("", False), (True, False), (MISSING, False),
])
def test_is_int(value, expected):
  assert is_int(value) is expected


@pytest.mark.parametrize("value, expected", [
  (100, True), (0, True), (-3.5, True), ("7980", True), (".5", True), ("-1.25", True),
  ("hola", False), ("", False), ("10\n", False), ("1e3", False), (True, False), (None, False),
  (float("nan"), False), (float("inf"), False), (MISSING, False), ([1], False),
])
def test_is_numeric(value, expected):
  assert is_numeric(value) is expected


def test_not_empty():
  assert not_empty("x")
  assert not_empty(0)
  assert not_empty(False)
  assert not not_empty("")
  assert not not_empty(None)
  assert not not_empty([])
  assert not not_empty(MISSING)


def test_greater_than_zero():
  assert greater_than_zero(0.01)
  assert greater_than_zero("10")
  assert not greater_than_zero(0)
  assert not greater_than_zero(-1)
  assert not greater_than_zero("hola")
  assert not greater_than_zero(MISSING)


def test_boolean_parsing():
  assert to_bool(True) is True
  assert to_bool("false") is False
  assert to_bool(1) is True
  assert to_bool("0") is False
  assert to_bool("yes") is None
  assert to_bool(2) is None
  assert not is_boolean("hola")
  assert is_boolean(False)


def test_to_number():
  assert to_number("12.5") == 12.5
  assert to_number(7) == 7.0
  assert to_number("abc") is None


def test_validate_runs_every_rule_without_bailing():
  rules = [FieldRules("code", "body", [
    Rule("not_empty", not_empty, "empty"),
    Rule("is_int", is_int, "not int"),
  ])]
  errors = validate({}, {}, rules)
  assert messages(errors) == ["empty", "not int"]
  assert all(error["path"] == "code" and error["location"] == "body" for error in errors)
  assert all("value" not in error for error in errors)


def test_validate_reports_sent_value():
  errors = validate({"id": "abc"}, {}, ID_RULES)
  assert errors == [{"type": "field", "msg": "Id no valido", "path": "id", "location": "params", "value": "abc"}]


def test_create_rules_missing_name_and_price():
  errors = validate({}, {}, CREATE_RULES)
  assert len(errors) == 4
  assert messages(errors) == [
    "El nombre del Producto no puede ir vacio",
    "Valor no valido",
    "El precio del producto no puede ir vacio",
    "Precio no valido",
  ]


@pytest.mark.parametrize("price", [0, -1, "0", -0.5])
def test_non_positive_price(price):
  errors = validate({}, {"name": "Mazo", "price": price}, CREATE_RULES)
  assert messages(errors) == ["Precio no valido"]


def test_non_numeric_price():
  errors = validate({}, {"name": "Mazo", "price": "hola"}, CREATE_RULES)
  assert messages(errors) == ["Valor no valido", "Precio no valido"]


def test_update_rules_require_boolean_availability():
  params = {"id": "1"}
  assert validate(params, {"name": "Mazo", "price": 10, "availability": False}, UPDATE_RULES) == []

  errors = validate(params, {"name": "Mazo", "price": 10}, UPDATE_RULES)
  assert messages(errors) == ["Valor para Disponibilidad no valida"]

  errors = validate(params, {"name": "Mazo", "price": 10, "availability": "hola"}, UPDATE_RULES)
  assert messages(errors) == ["Valor para Disponibilidad no valida"]

  errors = validate(params, {"name": "Mazo", "price": 10, "availability": None}, UPDATE_RULES)
  assert messages(errors) == ["Valor para Disponibilidad no valida"]


def test_update_rules_empty_body():
  assert len(validate({"id": "1"}, {}, UPDATE_RULES)) == 5


def test_to_product_input_coerces_validated_body():
  data = to_product_input({"name": "Mazo", "price": "1250"}, availability=False)
  assert data.name == "Mazo"
  assert data.price == 1250.0
  assert data.availability is False


def test_to_id_within_storage_range():
  assert to_id("42") == 42
  assert to_id("+007") == 7
  assert to_id("-1") == -1
  assert to_id(str(2**63 - 1)) == 2**63 - 1


@pytest.mark.parametrize("value", [str(2**63), "99999999999999999999", "1" * 5000, "-" + "9" * 30])
def test_to_id_outside_storage_range(value):
  assert is_int(value)
  assert to_id(value) is None


def test_name_length_limit():
  check = max_length(100)
  assert check("x" * 100)
  assert not check("x" * 101)
  assert check(MISSING)

  errors = validate({}, {"name": "x" * 101, "price": 10}, CREATE_RULES)
  assert messages(errors) == ["El nombre del Producto no puede superar 100 caracteres"]
