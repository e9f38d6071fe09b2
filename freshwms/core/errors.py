# freshwms/core/errors.py

"""
핵심 구성 요소가 발생시키는 예외 계층을 정의하는 모듈입니다.

저수준 SQLAlchemy 오류는 저장소 경계(crud_base, partial_update 등)에서만 잡아
아래의 의미 있는 예외로 변환합니다. 모든 예외는 사람이 읽을 수 있는
단일 원인 문자열(`message`)을 가지며, `results.result_code_for()`가
각 예외를 정확히 하나의 결과 코드로 매핑합니다.

- ValidationFailure: 클라이언트가 수정 가능한 요청 검증 오류
- ConflictError: 비즈니스 키 충돌
- NotFoundError: 대상 또는 참조 엔티티 미존재
- StorageFailure: 클라이언트가 수정할 수 없는 저장소 오류
"""

from typing import Any, Optional


class CoreError(Exception):
    """모든 핵심 오류의 기본 클래스입니다."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


# =============================================================================
# 1. 검증 오류 (BAD_INPUT)
# =============================================================================
class ValidationFailure(CoreError):
    """요청 속성이 필드 스키마를 만족하지 않을 때의 기본 클래스입니다."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field


class UnknownFieldError(ValidationFailure):
    def __init__(self, field: str):
        super().__init__(f"unknown field: {field}", field)


class InvalidTypeError(ValidationFailure):
    def __init__(self, field: str, expected: str):
        super().__init__(f"invalid type for {field}: expected {expected}", field)
        self.expected = expected


class FieldTooLongError(ValidationFailure):
    def __init__(self, field: str, limit: int):
        super().__init__(f"{field} too long: max {limit} characters", field)
        self.limit = limit


class EmptyRequiredFieldError(ValidationFailure):
    def __init__(self, field: str):
        super().__init__(f"empty {field} not allowed", field)


class EmptyPayloadError(ValidationFailure):
    def __init__(self):
        super().__init__("invalid request data - body needed")


# =============================================================================
# 2. 충돌 / 미존재
# =============================================================================
class ConflictError(CoreError):
    """다른 엔티티가 이미 같은 비즈니스 키 값을 가지고 있습니다."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field


class NotFoundError(CoreError):
    """요청 대상 엔티티가 존재하지 않습니다."""

    def __init__(self, entity: str, id: Any, message: Optional[str] = None):
        super().__init__(message or f"{entity} with id {id} not found")
        self.entity = entity
        self.id = id


class ReferenceNotFoundError(NotFoundError):
    """종속 엔티티가 참조하는 엔티티가 존재하지 않습니다. 어느 필드가 실패했는지 보존합니다."""

    def __init__(self, field: str, entity: str, id: Any):
        super().__init__(entity, id, f"{entity} with id {id} not found ({field})")
        self.field = field


# =============================================================================
# 3. 저장소 오류 (INTERNAL_ERROR)
# =============================================================================
class StorageFailure(CoreError):
    """저장소 호출 자체가 실패했습니다. 자동 재시도는 하지 않습니다."""


class StorageWriteFailedError(StorageFailure):
    pass


class PostWriteReadFailedError(StorageFailure):
    """쓰기는 적용되었지만 재조회가 실패했거나 결과가 없습니다 (동시 삭제 가능성)."""


class LookupFailedError(StorageFailure):
    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field


__all__ = [
    "CoreError",
    "ValidationFailure",
    "UnknownFieldError",
    "InvalidTypeError",
    "FieldTooLongError",
    "EmptyRequiredFieldError",
    "EmptyPayloadError",
    "ConflictError",
    "NotFoundError",
    "ReferenceNotFoundError",
    "StorageFailure",
    "StorageWriteFailedError",
    "PostWriteReadFailedError",
    "LookupFailedError",
]
