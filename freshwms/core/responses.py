# freshwms/core/responses.py

"""
결과 코드를 HTTP 상태 코드로 변환하는 경계 어댑터입니다.
FastAPI 라우터에서 서비스 결과를 그대로 반환하거나 HTTPException으로 변환할 때 사용합니다.
"""

from typing import Any, Dict

from fastapi import HTTPException, status

from freshwms.core.results import ResultCode, ServiceResult

HTTP_STATUS_BY_RESULT: Dict[ResultCode, int] = {
    ResultCode.OK: status.HTTP_200_OK,
    ResultCode.CREATED: status.HTTP_201_CREATED,
    ResultCode.UPDATED: status.HTTP_200_OK,
    ResultCode.NO_CONTENT: status.HTTP_204_NO_CONTENT,
    ResultCode.BAD_INPUT: status.HTTP_422_UNPROCESSABLE_ENTITY,
    ResultCode.CONFLICT: status.HTTP_409_CONFLICT,
    ResultCode.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ResultCode.INTERNAL_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def status_code_for(result: ServiceResult) -> int:
    return HTTP_STATUS_BY_RESULT[result.code]


def raise_for_result(result: ServiceResult) -> Any:
    """
    실패 결과면 HTTPException을 발생시키고, 성공 결과면 data를 반환합니다.

    Example:
        @router.patch("/warehouses/{id}")
        async def update_warehouse(id: int, body: dict, db: AsyncSession = Depends(get_session)):
            return raise_for_result(await warehouse_service.update(db, id, body))
    """
    if not result.ok:
        raise HTTPException(status_code=status_code_for(result), detail=result.error)
    return result.data
