# tests/core/test_field_schema.py

"""
필드 스키마 검증기(`freshwms.core.field_schema.validate`)에 대한 단위 테스트입니다.
저장소에 접근하지 않는 순수 함수이므로 데이터베이스 픽스처를 사용하지 않습니다.
"""

from datetime import date, datetime

import pytest

from freshwms.core.errors import (
    EmptyPayloadError,
    EmptyRequiredFieldError,
    FieldTooLongError,
    InvalidTypeError,
    UnknownFieldError,
)
from freshwms.core.field_schema import EntitySchema, FieldKind, date_field, float_field, int_field, str_field, validate
from freshwms.domains.prd.schemas import PRODUCT_BATCH_SCHEMA, PRODUCT_SCHEMA
from freshwms.domains.whs.schemas import WAREHOUSE_SCHEMA


def test_empty_payload_rejected():
    """(실패) 빈 맵은 어떤 모드에서도 EmptyPayloadError입니다."""
    with pytest.raises(EmptyPayloadError) as exc_info:
        validate(WAREHOUSE_SCHEMA, {})
    assert exc_info.value.message == "invalid request data - body needed"

    with pytest.raises(EmptyPayloadError):
        validate(WAREHOUSE_SCHEMA, {}, partial=False)


def test_unknown_field_rejected():
    """(실패) 스키마에 없는 키는 거부됩니다."""
    with pytest.raises(UnknownFieldError) as exc_info:
        validate(WAREHOUSE_SCHEMA, {"address": "Rua 2", "color": "blue"})
    assert exc_info.value.field == "color"


def test_first_failure_in_payload_order_wins():
    """(실패) 여러 필드가 잘못되었을 때 요청 순서상 첫 번째 오류만 보고됩니다."""
    with pytest.raises(InvalidTypeError) as exc_info:
        validate(WAREHOUSE_SCHEMA, {"minimum_capacity": "ten", "telephone": "x" * 30})
    assert exc_info.value.field == "minimum_capacity"


@pytest.mark.parametrize(
    "field, value",
    [
        ("warehouse_code", 123),
        ("minimum_capacity", "10"),
        ("minimum_capacity", True),
        ("minimum_capacity", 10.5),
        ("minimum_temperature", None),
    ],
)
def test_invalid_type_rejected(field, value):
    """(실패) 선언된 kind와 맞지 않는 값은 InvalidTypeError입니다."""
    with pytest.raises(InvalidTypeError) as exc_info:
        validate(WAREHOUSE_SCHEMA, {field: value})
    assert exc_info.value.field == field


def test_integral_float_accepted_for_int():
    """(성공) JSON에서 float로 디코딩된 정수 값은 int로 변환됩니다."""
    validated = validate(WAREHOUSE_SCHEMA, {"minimum_capacity": 12.0})
    assert validated == {"minimum_capacity": 12}
    assert isinstance(validated["minimum_capacity"], int)


def test_int_accepted_for_float():
    """(성공) float 필드는 정수 값도 받아 float로 변환합니다."""
    validated = validate(PRODUCT_SCHEMA, {"width": 3})
    assert validated == {"width": 3.0}
    assert isinstance(validated["width"], float)

    with pytest.raises(InvalidTypeError):
        validate(PRODUCT_SCHEMA, {"width": False})


def test_date_coercion():
    """(성공/실패) 날짜는 YYYY-MM-DD 문자열 또는 date 객체만 허용됩니다."""
    validated = validate(PRODUCT_BATCH_SCHEMA, {"due_date": "2027-01-31", "manufacturing_date": date(2026, 9, 1)})
    assert validated == {"due_date": date(2027, 1, 31), "manufacturing_date": date(2026, 9, 1)}

    with pytest.raises(InvalidTypeError):
        validate(PRODUCT_BATCH_SCHEMA, {"due_date": "31/01/2027"})
    with pytest.raises(InvalidTypeError):
        validate(PRODUCT_BATCH_SCHEMA, {"due_date": datetime(2027, 1, 31, 10, 0)})


def test_field_length_boundary():
    """(성공/실패) 정확히 max_length인 문자열은 통과하고, 한 글자 더 길면 거부됩니다."""
    assert validate(WAREHOUSE_SCHEMA, {"telephone": "1" * 20}) == {"telephone": "1" * 20}

    with pytest.raises(FieldTooLongError) as exc_info:
        validate(WAREHOUSE_SCHEMA, {"telephone": "1" * 21})
    assert exc_info.value.field == "telephone"
    assert exc_info.value.limit == 20
    assert exc_info.value.message == "telephone too long: max 20 characters"

    assert validate(WAREHOUSE_SCHEMA, {"address": "a" * 255}) == {"address": "a" * 255}
    with pytest.raises(FieldTooLongError) as exc_info:
        validate(WAREHOUSE_SCHEMA, {"address": "a" * 256})
    assert exc_info.value.limit == 255


@pytest.mark.parametrize("value", ["", "   "])
def test_empty_required_string_rejected(value):
    """(실패) 필수 문자열 필드의 빈 값/공백 문자열은 거부됩니다."""
    with pytest.raises(EmptyRequiredFieldError) as exc_info:
        validate(WAREHOUSE_SCHEMA, {"warehouse_code": value})
    assert exc_info.value.message == "empty warehouse_code not allowed"


def test_optional_string_may_be_empty():
    """(성공) 필수가 아닌 문자열 필드는 빈 값을 허용합니다."""
    schema = EntitySchema(entity="note", field_specs={"text": str_field(required=False)})
    assert validate(schema, {"text": ""}) == {"text": ""}


def test_create_mode_requires_all_required_fields():
    """(실패) 생성 모드에서는 누락된 필수 필드가 선언 순서상 첫 번째부터 보고됩니다."""
    with pytest.raises(EmptyRequiredFieldError) as exc_info:
        validate(WAREHOUSE_SCHEMA, {"warehouse_code": "WH-9", "minimum_capacity": 1}, partial=False)
    assert exc_info.value.field == "address"


def test_result_is_in_declaration_order():
    """(성공) 반환되는 맵은 요청 순서가 아닌 스키마 선언 순서를 따릅니다."""
    validated = validate(
        WAREHOUSE_SCHEMA,
        {"minimum_temperature": -3, "warehouse_code": "WH-9", "telephone": "123"},
    )
    assert list(validated) == ["warehouse_code", "telephone", "minimum_temperature"]


def test_validate_does_not_mutate_input():
    raw = {"minimum_capacity": 5.0}
    validate(WAREHOUSE_SCHEMA, raw)
    assert raw == {"minimum_capacity": 5.0}


def test_business_keys_and_field_helpers():
    assert WAREHOUSE_SCHEMA.business_keys == ["warehouse_code"]
    assert str_field().max_length == 255
    assert int_field().kind is FieldKind.INT
    assert float_field().kind is FieldKind.FLOAT
    assert date_field().kind is FieldKind.DATE


@pytest.mark.parametrize("value", [1e20, 2 ** 64, 2 ** 31, -(2 ** 31) - 1])
def test_int_out_of_column_range_rejected(value):
    """(실패) INTEGER 컬럼에 담을 수 없는 정수는 InvalidTypeError입니다."""
    with pytest.raises(InvalidTypeError) as exc_info:
        validate(WAREHOUSE_SCHEMA, {"minimum_capacity": value})
    assert exc_info.value.field == "minimum_capacity"


def test_int_column_range_boundaries_accepted():
    """(성공) 부호 있는 32비트 범위의 양 끝 값은 허용됩니다."""
    assert validate(WAREHOUSE_SCHEMA, {"minimum_capacity": 2 ** 31 - 1}) == {"minimum_capacity": 2 ** 31 - 1}
    assert validate(WAREHOUSE_SCHEMA, {"minimum_temperature": -(2 ** 31)}) == {"minimum_temperature": -(2 ** 31)}


@pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf"), 10 ** 400])
def test_non_finite_float_rejected(value):
    """(실패) NaN, 무한대, float로 표현할 수 없는 수는 거부됩니다."""
    with pytest.raises(InvalidTypeError) as exc_info:
        validate(PRODUCT_SCHEMA, {"width": value})
    assert exc_info.value.field == "width"
