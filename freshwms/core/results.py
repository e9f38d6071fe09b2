# freshwms/core/results.py

"""
핵심 구성 요소의 결과(성공 또는 예외)를 전송 계층과 무관한 결과 코드로 변환하는 모듈입니다.
HTTP 상태 코드로의 변환은 `freshwms.core.responses`가 담당합니다.
"""

import logging
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict

from freshwms.core.errors import (
    ConflictError,
    CoreError,
    NotFoundError,
    StorageFailure,
    ValidationFailure,
)

logger = logging.getLogger(__name__)


class ResultCode(str, Enum):
    OK = "ok"
    CREATED = "created"
    UPDATED = "updated"
    NO_CONTENT = "no_content"
    BAD_INPUT = "bad_input"
    CONFLICT = "conflict"
    NOT_FOUND = "not_found"
    INTERNAL_ERROR = "internal_error"


class ServiceResult(BaseModel):
    """
    하나의 요청에 대한 최종 결과입니다.
    성공이면 data가, 실패면 error(단일 원인 문자열)가 채워집니다.
    """
    model_config = ConfigDict(arbitrary_types_allowed=True)

    code: ResultCode
    data: Any = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def result_code_for(exc: BaseException) -> ResultCode:
    """예외를 정확히 하나의 결과 코드로 매핑합니다. 알 수 없는 예외는 INTERNAL_ERROR입니다."""
    if isinstance(exc, ValidationFailure):
        return ResultCode.BAD_INPUT
    if isinstance(exc, ConflictError):
        return ResultCode.CONFLICT
    if isinstance(exc, NotFoundError):
        return ResultCode.NOT_FOUND
    if isinstance(exc, StorageFailure):
        return ResultCode.INTERNAL_ERROR
    return ResultCode.INTERNAL_ERROR


def to_result(outcome: Any, data: Any = None) -> ServiceResult:
    """
    outcome이 예외면 실패 결과를, ResultCode면 성공 결과를 만듭니다.

    Examples:
        to_result(ResultCode.CREATED, warehouse)
        to_result(ConflictError("warehouse_code already exists"))
    """
    if isinstance(outcome, BaseException):
        code = result_code_for(outcome)
        if isinstance(outcome, CoreError):
            message = outcome.message
        else:
            # 내부 오류의 상세 내용은 클라이언트에 노출하지 않습니다.
            logger.error("Unexpected error mapped to internal error: %r", outcome)
            message = "internal server error"
        return ServiceResult(code=code, error=message)
    return ServiceResult(code=ResultCode(outcome), data=data)
