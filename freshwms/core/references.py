# freshwms/core/references.py

"""
종속 엔티티 생성 전 참조 엔티티의 존재를 확인하는 모듈입니다.
(예: 입고 주문 -> 직원, 창고, 상품 배치)

선언 순서대로 검사하며 첫 번째 실패에서 멈춥니다. 여러 개의 누락을 모아서 보고하지 않으며,
어느 필드가 실패했는지를 예외에 보존합니다.
"""

import logging
from typing import Any, Dict, NamedTuple, Sequence

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel.ext.asyncio.session import AsyncSession

from freshwms.core.crud_base import CRUDBase
from freshwms.core.errors import LookupFailedError, ReferenceNotFoundError

logger = logging.getLogger(__name__)


class Dependency(NamedTuple):
    """종속 엔티티의 외래 키 필드와 참조 대상 저장소의 쌍입니다."""
    field_name: str
    crud: CRUDBase

    @property
    def entity(self) -> str:
        return self.crud.entity_label


async def check_references(
    db: AsyncSession,
    dependencies: Sequence[Dependency],
    provided_ids: Dict[str, Any],
) -> None:
    """
    선언된 참조를 순서대로 조회합니다.

    - 참조 id가 존재하지 않으면 ReferenceNotFoundError (클라이언트가 수정 가능한 오류)
    - 조회 자체가 실패하면 LookupFailedError (내부 오류)

    provided_ids에 없는 필드는 건너뜁니다 (부분 업데이트에서 변경하지 않는 참조).
    """
    for dependency in dependencies:
        if dependency.field_name not in provided_ids:
            continue
        ref_id = provided_ids[dependency.field_name]
        try:
            found = await dependency.crud.get(db, ref_id)
        except SQLAlchemyError as exc:
            logger.exception("Reference lookup failed: %s=%s", dependency.field_name, ref_id)
            raise LookupFailedError(
                f"unexpected error to verify {dependency.entity}", dependency.field_name
            ) from exc

        if found is None:
            logger.warning("Missing reference %s=%s", dependency.field_name, ref_id)
            raise ReferenceNotFoundError(dependency.field_name, dependency.entity, ref_id)
