# freshwms/core/crud_base.py

"""
모든 엔티티가 공유하는 저장소 계층의 기본 클래스 모듈입니다.
모든 메서드는 비동기(async) 환경에서 동작합니다.

경계 계약상 저장소는 엔티티 타입별로 Create, GetOne(get), GetAll(get_multi),
Delete, RawUpdate(raw_update)를 제공합니다. 이 클래스는 SQLAlchemy 예외를 변환하지 않으며,
예외 변환은 호출하는 핵심 구성 요소(service, references, uniqueness, partial_update)가 담당합니다.
"""

import re
from typing import Any, Dict, Generic, List, Optional, Type, TypeVar

from sqlalchemy import select
from sqlalchemy.sql.dml import Update
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

ModelType = TypeVar("ModelType", bound=SQLModel)


class CRUDBase(Generic[ModelType]):
    """
    모든 CRUD 작업에 대한 기본 클래스를 정의합니다.
    """
    def __init__(self, model: Type[ModelType]):
        self.model = model

    @property
    def entity_name(self) -> str:
        return self.model.__tablename__

    @property
    def entity_label(self) -> str:
        """오류 메시지용 엔티티 이름입니다. (ProductBatch -> product_batch)"""
        return re.sub(r"(?<!^)(?=[A-Z])", "_", self.model.__name__).lower()

    async def get(self, db: AsyncSession, id: Any) -> Optional[ModelType]:
        """ID를 기준으로 단일 레코드를 조회합니다 (GetOne)."""
        return await db.get(self.model, id)

    async def get_fresh(self, db: AsyncSession, id: Any) -> Optional[ModelType]:
        """
        세션의 identity map을 무시하고 저장소에서 레코드를 다시 읽습니다.
        쓰기 직후의 권위 있는 상태를 얻을 때 사용합니다.
        """
        statement = (
            select(self.model)
            .where(self.model.id == id)
            .execution_options(populate_existing=True)
        )
        result = await db.execute(statement)
        return result.scalars().first()

    async def get_multi(
        self, db: AsyncSession, *, skip: int = 0, limit: Optional[int] = None
    ) -> List[ModelType]:
        """여러 레코드를 id 순서로 조회합니다 (GetAll). limit이 None이면 전체를 반환합니다."""
        query = select(self.model).order_by(self.model.id).offset(skip)
        if limit is not None:
            query = query.limit(limit)
        result = await db.execute(query)
        return result.scalars().all()

    async def exists_other(
        self, db: AsyncSession, *, field: str, value: Any, exclude_id: Optional[int] = None
    ) -> Optional[int]:
        """
        field == value 인 다른 레코드의 id를 하나 반환합니다. 없으면 None.
        (SELECT id ... WHERE field = ? AND id != ? LIMIT 1)
        """
        column = getattr(self.model, field)
        statement = select(self.model.id).where(column == value)
        if exclude_id is not None:
            statement = statement.where(self.model.id != exclude_id)
        result = await db.execute(statement.limit(1))
        return result.scalars().first()

    async def create(self, db: AsyncSession, *, obj_in: Dict[str, Any]) -> ModelType:
        """
        검증된 속성 맵으로 새로운 레코드를 생성합니다. id는 저장소가 할당합니다.
        """
        db_obj = self.model.model_validate(obj_in)
        db.add(db_obj)
        await db.commit()
        await db.refresh(db_obj)
        return db_obj

    async def raw_update(self, db: AsyncSession, *, statement: Update) -> int:
        """
        부분 업데이트 컴파일러가 만든 UPDATE 구문을 실행하고 영향받은 행 수를 반환합니다 (RawUpdate).
        """
        result = await db.execute(statement)
        await db.commit()
        return result.rowcount

    async def delete(self, db: AsyncSession, *, id: Any) -> Optional[ModelType]:
        """
        ID를 기준으로 레코드를 삭제합니다 (하드 삭제). 대상이 없으면 None을 반환합니다.
        """
        db_obj = await db.get(self.model, id)
        if db_obj:
            await db.delete(db_obj)
            await db.commit()
        return db_obj
