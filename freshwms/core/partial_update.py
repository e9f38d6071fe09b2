# freshwms/core/partial_update.py

"""
검증된 부분 속성 맵을 매개변수화된 UPDATE 구문으로 컴파일하고 적용하는 모듈입니다.

- 필드 순서는 요청 순서가 아니라 엔티티 스키마의 선언 순서입니다.
- 값은 항상 바인드 매개변수로 전달되며, SQL 텍스트는 SQLAlchemy가 생성합니다.
- 쓰기 후에는 메모리 상태를 신뢰하지 않고 저장소에서 다시 읽은 레코드를 반환합니다.
"""

import logging
from typing import Any, Dict, List, NamedTuple, Type

from sqlalchemy import update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.sql.dml import Update
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from freshwms.core.crud_base import CRUDBase
from freshwms.core.errors import (
    ConflictError,
    PostWriteReadFailedError,
    StorageWriteFailedError,
)
from freshwms.core.field_schema import EntitySchema

logger = logging.getLogger(__name__)


class CompiledUpdate(NamedTuple):
    fields: List[str]
    values: List[Any]  # 필드 값들 뒤에 id가 붙습니다.
    statement: Update


def compile_partial_update(
    model: Type[SQLModel],
    schema: EntitySchema,
    id: int,
    validated: Dict[str, Any],
) -> CompiledUpdate:
    """
    UPDATE <table> SET f1 = ?, f2 = ? ... WHERE id = ? 구문을 만듭니다.
    validated는 field_schema.validate()를 통과한 맵이어야 합니다.
    """
    ordered = schema.ordered(validated)
    fields = list(ordered.keys())
    values = [ordered[name] for name in fields] + [id]

    statement = (
        update(model)
        .where(model.id == id)
        .ordered_values(*((getattr(model, name), value) for name, value in ordered.items()))
        .execution_options(synchronize_session=False)
    )
    return CompiledUpdate(fields=fields, values=values, statement=statement)


async def apply_partial_update(
    db: AsyncSession,
    crud: CRUDBase,
    schema: EntitySchema,
    id: int,
    validated: Dict[str, Any],
):
    """
    컴파일된 구문을 실행하고 커밋한 뒤, 갱신된 레코드를 다시 읽어 반환합니다.

    Raises:
        ConflictError: DB unique 인덱스가 쓰기를 거부한 경우 (고유성 검사 이후의 경쟁 상태)
        StorageWriteFailedError: 쓰기 실패 또는 영향받은 행이 없는 경우
        PostWriteReadFailedError: 쓰기는 성공했지만 재조회가 실패한 경우

    쓰기가 실패하면 세션을 롤백하므로, 호출자가 이미 읽어 둔 엔티티들은 모두 만료(expire)됩니다.
    이후에는 속성에 직접 접근하지 말고 id로 다시 조회해야 합니다.
    """
    compiled = compile_partial_update(crud.model, schema, id, validated)

    try:
        rowcount = await crud.raw_update(db, statement=compiled.statement)
    except IntegrityError as exc:
        await db.rollback()
        logger.warning("Update of %s id=%s rejected by unique constraint", crud.entity_name, id)
        raise ConflictError(_conflict_message(schema, compiled.fields)) from exc
    except SQLAlchemyError as exc:
        await db.rollback()
        logger.exception("Update of %s id=%s failed", crud.entity_name, id)
        raise StorageWriteFailedError(f"failed to update {crud.entity_label} with id {id}") from exc

    if rowcount == 0:
        logger.error("Update of %s id=%s affected no rows", crud.entity_name, id)
        raise StorageWriteFailedError(f"failed to update {crud.entity_label} with id {id}")

    try:
        refreshed = await crud.get_fresh(db, id)
    except SQLAlchemyError as exc:
        logger.exception("Re-read of %s id=%s failed after update", crud.entity_name, id)
        raise PostWriteReadFailedError(
            f"{crud.entity_label} with id {id} updated but could not be read back"
        ) from exc

    if refreshed is None:
        logger.error("%s id=%s disappeared after update", crud.entity_name, id)
        raise PostWriteReadFailedError(
            f"{crud.entity_label} with id {id} updated but could not be read back"
        )

    logger.info("Updated %s id=%s fields=%s", crud.entity_name, id, compiled.fields)
    return refreshed


def _conflict_message(schema: EntitySchema, fields: List[str]) -> str:
    for field in schema.business_keys:
        if field in fields:
            return f"{field} already exists"
    return "unique constraint violated"
