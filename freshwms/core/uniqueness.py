# freshwms/core/uniqueness.py

"""
비즈니스 키 고유성 검사 모듈입니다.

생성 시에는 같은 값을 가진 레코드가 하나라도 있으면 충돌이고,
업데이트 시에는 같은 값을 가진 '다른' id의 레코드가 있을 때만 충돌입니다.

주의: 이 검사와 이후의 쓰기는 하나의 트랜잭션으로 묶이지 않습니다.
동시에 들어온 두 요청이 모두 검사를 통과할 수 있으며, 이 경우 DB의 unique 인덱스가
두 번째 쓰기를 IntegrityError로 거부하고 partial_update/service가 이를 ConflictError로 변환합니다.
"""

import logging
from typing import Any, Dict, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel.ext.asyncio.session import AsyncSession

from freshwms.core.crud_base import CRUDBase
from freshwms.core.errors import ConflictError, LookupFailedError
from freshwms.core.field_schema import EntitySchema

logger = logging.getLogger(__name__)


async def check_unique(
    db: AsyncSession,
    crud: CRUDBase,
    field: str,
    value: Any,
    self_id: Optional[int] = None,
) -> None:
    """
    다른 엔티티가 이미 value를 가지고 있으면 ConflictError를 발생시킵니다.
    self_id가 None이면 생성, 아니면 해당 id를 제외한 업데이트 검사입니다.
    """
    try:
        holder_id = await crud.exists_other(db, field=field, value=value, exclude_id=self_id)
    except SQLAlchemyError as exc:
        logger.exception("Uniqueness lookup failed for %s.%s", crud.entity_name, field)
        raise LookupFailedError(f"unexpected error to verify {field}", field) from exc

    if holder_id is not None:
        logger.warning(
            "%s.%s=%r already held by id %s (requested by id %s)",
            crud.entity_name, field, value, holder_id, self_id,
        )
        raise ConflictError(f"{field} already exists", field)


async def check_business_keys(
    db: AsyncSession,
    crud: CRUDBase,
    schema: EntitySchema,
    validated: Dict[str, Any],
    self_id: Optional[int] = None,
) -> None:
    """요청에 포함된 비즈니스 키 필드들을 스키마 선언 순서대로 검사합니다."""
    for field in schema.business_keys:
        if field in validated:
            await check_unique(db, crud, field, validated[field], self_id)
