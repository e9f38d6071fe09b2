# freshwms/core/field_schema.py

"""
엔티티별 필드 스키마를 정의하고, 타입이 없는 요청 속성 맵을
스키마에 맞게 검증/형 변환하는 모듈입니다.

경계 계층은 JSON을 디코딩한 `Dict[str, Any]`를 그대로 넘기고,
`validate()`가 알 수 없는 키와 잘못된 타입을 비즈니스 로직에 도달하기 전에 거부합니다.
"""

import math
from datetime import date, datetime
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict

from freshwms.core.errors import (
    EmptyPayloadError,
    EmptyRequiredFieldError,
    FieldTooLongError,
    InvalidTypeError,
    UnknownFieldError,
)

DATE_FORMAT = "%Y-%m-%d"

# SQLModel의 int 필드는 INTEGER 컬럼(부호 있는 32비트)으로 생성됩니다.
INT_MIN = -(2 ** 31)
INT_MAX = 2 ** 31 - 1


class FieldKind(str, Enum):
    STRING = "string"
    INT = "int"
    FLOAT = "float"
    DATE = "date"


class FieldSpec(BaseModel):
    """단일 필드의 제약 조건입니다."""
    model_config = ConfigDict(frozen=True)

    kind: FieldKind
    max_length: Optional[int] = None
    required: bool = True
    business_key: bool = False


class EntitySchema(BaseModel):
    """
    엔티티 타입별 필드 스키마입니다.
    `field_specs`의 선언 순서가 업데이트 구문의 필드 순서와 고유성 검사 순서가 됩니다.
    """
    model_config = ConfigDict(frozen=True)

    entity: str
    field_specs: Dict[str, FieldSpec]

    @property
    def business_keys(self) -> List[str]:
        return [name for name, spec in self.field_specs.items() if spec.business_key]

    def ordered(self, values: Dict[str, Any]) -> Dict[str, Any]:
        """값 맵을 스키마 선언 순서로 정렬하여 반환합니다."""
        return {name: values[name] for name in self.field_specs if name in values}


def str_field(max_length: int = 255, **kwargs) -> FieldSpec:
    return FieldSpec(kind=FieldKind.STRING, max_length=max_length, **kwargs)


def int_field(**kwargs) -> FieldSpec:
    return FieldSpec(kind=FieldKind.INT, **kwargs)


def float_field(**kwargs) -> FieldSpec:
    return FieldSpec(kind=FieldKind.FLOAT, **kwargs)


def date_field(**kwargs) -> FieldSpec:
    return FieldSpec(kind=FieldKind.DATE, **kwargs)


# =============================================================================
# 형 변환
# =============================================================================
def _coerce_string(name: str, spec: FieldSpec, value: Any) -> str:
    if not isinstance(value, str):
        raise InvalidTypeError(name, "string")
    if spec.max_length is not None and len(value) > spec.max_length:
        raise FieldTooLongError(name, spec.max_length)
    if (spec.required or spec.business_key) and not value.strip():
        raise EmptyRequiredFieldError(name)
    return value


def _coerce_int(name: str, value: Any) -> int:
    # bool은 int의 하위 클래스이므로 먼저 제외합니다.
    if isinstance(value, bool):
        raise InvalidTypeError(name, "integer")
    # JSON 숫자는 float로 디코딩되는 경우가 많으므로 소수부가 0일 때만 허용합니다.
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    if not isinstance(value, int):
        raise InvalidTypeError(name, "integer")
    if not INT_MIN <= value <= INT_MAX:
        raise InvalidTypeError(name, f"integer between {INT_MIN} and {INT_MAX}")
    return value


def _coerce_float(name: str, value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidTypeError(name, "number")
    try:
        number = float(value)
    except OverflowError:
        raise InvalidTypeError(name, "finite number") from None
    # NaN과 무한대는 저장하지 않습니다.
    if not math.isfinite(number):
        raise InvalidTypeError(name, "finite number")
    return number


def _coerce_date(name: str, value: Any) -> date:
    if isinstance(value, datetime):
        raise InvalidTypeError(name, "date (YYYY-MM-DD)")
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return datetime.strptime(value, DATE_FORMAT).date()
        except ValueError:
            pass
    raise InvalidTypeError(name, "date (YYYY-MM-DD)")


def coerce_value(name: str, spec: FieldSpec, value: Any) -> Any:
    """단일 값을 스키마의 kind로 변환합니다. None은 어떤 kind에서도 허용하지 않습니다."""
    if value is None:
        raise InvalidTypeError(name, spec.kind.value)
    if spec.kind is FieldKind.STRING:
        return _coerce_string(name, spec, value)
    if spec.kind is FieldKind.INT:
        return _coerce_int(name, value)
    if spec.kind is FieldKind.FLOAT:
        return _coerce_float(name, value)
    return _coerce_date(name, value)


def validate(schema: EntitySchema, raw_attributes: Dict[str, Any], *, partial: bool = True) -> Dict[str, Any]:
    """
    타입이 없는 속성 맵을 검증하고 형 변환된 새 맵을 반환합니다.

    - 빈 맵은 `EmptyPayloadError` (변경 없는 부분 업데이트 거부).
    - 키는 요청 순서대로 처리하며 첫 번째 실패에서 예외를 발생시킵니다.
    - `partial=False`(생성)일 때는 누락된 필수 필드도 `EmptyRequiredFieldError`로 거부합니다.

    부수 효과가 없는 순수 함수입니다.
    """
    if not raw_attributes:
        raise EmptyPayloadError()

    validated: Dict[str, Any] = {}
    for name, value in raw_attributes.items():
        spec = schema.field_specs.get(name)
        if spec is None:
            raise UnknownFieldError(name)
        validated[name] = coerce_value(name, spec, value)

    if not partial:
        for name, spec in schema.field_specs.items():
            if spec.required and name not in validated:
                raise EmptyRequiredFieldError(name)

    return schema.ordered(validated)
