# freshwms/core/service.py

"""
엔티티 타입별 요청 처리 파이프라인을 조율하는 서비스 모듈입니다.

생성:  validate -> check_references -> check_business_keys -> create
수정:  validate -> 대상 존재 확인 -> check_references(요청에 포함된 참조만)
       -> check_business_keys(자기 자신 제외) -> apply_partial_update

모든 메서드는 ServiceResult를 반환하며, 예상된 실패에 대해 예외를 발생시키지 않습니다.
"""

import logging
from typing import Any, Awaitable, Callable, Dict, Optional, Sequence

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel.ext.asyncio.session import AsyncSession

from freshwms.core.crud_base import CRUDBase
from freshwms.core.errors import (
    ConflictError,
    CoreError,
    LookupFailedError,
    NotFoundError,
    StorageWriteFailedError,
)
from freshwms.core.field_schema import EntitySchema, validate
from freshwms.core.partial_update import apply_partial_update
from freshwms.core.references import Dependency, check_references
from freshwms.core.results import ResultCode, ServiceResult, to_result
from freshwms.core.uniqueness import check_business_keys

logger = logging.getLogger(__name__)

# (db, id) -> 집계 행 목록. id가 주어지면 해당 엔티티의 행만 반환합니다.
Report = Callable[..., Awaitable[Sequence[Any]]]


class EntityService:
    """
    하나의 엔티티 타입에 대한 생성/수정/삭제/조회/집계 서비스입니다.

    Args:
        crud: 엔티티의 저장소
        schema: 엔티티의 필드 스키마
        dependencies: 생성 전 존재를 확인할 참조 목록 (검사 순서대로)
        reports: 이름 -> 집계 함수
    """

    def __init__(
        self,
        crud: CRUDBase,
        schema: EntitySchema,
        dependencies: Sequence[Dependency] = (),
        reports: Optional[Dict[str, Report]] = None,
    ):
        self.crud = crud
        self.schema = schema
        self.dependencies = tuple(dependencies)
        self.reports = dict(reports or {})

    async def _execute(self, operation: str, action: Callable[[], Awaitable[Any]], success: ResultCode) -> ServiceResult:
        try:
            data = await action()
        except CoreError as exc:
            logger.info("%s %s failed: %s", operation, self.crud.entity_name, exc.message)
            return to_result(exc)
        except Exception as exc:
            logger.exception("Unexpected error during %s %s", operation, self.crud.entity_name)
            return to_result(exc)
        return to_result(success, data)

    async def _require(self, db: AsyncSession, id: int):
        try:
            db_obj = await self.crud.get(db, id)
        except SQLAlchemyError as exc:
            logger.exception("Lookup of %s id=%s failed", self.crud.entity_name, id)
            raise LookupFailedError(f"unexpected error to find {self.crud.entity_label}") from exc
        if db_obj is None:
            raise NotFoundError(self.crud.entity_label, id)
        return db_obj

    # =========================================================================
    # 쓰기
    # =========================================================================
    async def create(self, db: AsyncSession, raw_attributes: Dict[str, Any]) -> ServiceResult:
        async def action():
            validated = validate(self.schema, raw_attributes, partial=False)
            await check_references(db, self.dependencies, validated)
            await check_business_keys(db, self.crud, self.schema, validated)
            try:
                db_obj = await self.crud.create(db, obj_in=validated)
            except IntegrityError as exc:
                await db.rollback()
                logger.warning("Create of %s rejected by constraint", self.crud.entity_name)
                raise ConflictError(f"{self.crud.entity_label} violates a unique or reference constraint") from exc
            except SQLAlchemyError as exc:
                await db.rollback()
                logger.exception("Create of %s failed", self.crud.entity_name)
                raise StorageWriteFailedError(f"failed to create {self.crud.entity_label}") from exc
            logger.info("Created %s id=%s", self.crud.entity_name, db_obj.id)
            return db_obj

        return await self._execute("create", action, ResultCode.CREATED)

    async def update(self, db: AsyncSession, id: int, raw_attributes: Dict[str, Any]) -> ServiceResult:
        async def action():
            # 빈 요청은 저장소에 접근하기 전에 거부됩니다.
            validated = validate(self.schema, raw_attributes, partial=True)
            await self._require(db, id)
            await check_references(db, self.dependencies, validated)
            await check_business_keys(db, self.crud, self.schema, validated, self_id=id)
            return await apply_partial_update(db, self.crud, self.schema, id, validated)

        return await self._execute("update", action, ResultCode.UPDATED)

    async def delete(self, db: AsyncSession, id: int) -> ServiceResult:
        async def action():
            try:
                db_obj = await self.crud.delete(db, id=id)
            except IntegrityError as exc:
                await db.rollback()
                logger.warning("Delete of %s id=%s blocked by referencing rows", self.crud.entity_name, id)
                raise ConflictError(f"{self.crud.entity_label} with id {id} is still referenced") from exc
            except SQLAlchemyError as exc:
                await db.rollback()
                logger.exception("Delete of %s id=%s failed", self.crud.entity_name, id)
                raise StorageWriteFailedError(f"failed to delete {self.crud.entity_label} with id {id}") from exc
            if db_obj is None:
                raise NotFoundError(self.crud.entity_label, id)
            logger.info("Deleted %s id=%s", self.crud.entity_name, id)
            return None

        return await self._execute("delete", action, ResultCode.NO_CONTENT)

    # =========================================================================
    # 읽기
    # =========================================================================
    async def get(self, db: AsyncSession, id: int) -> ServiceResult:
        return await self._execute("get", lambda: self._require(db, id), ResultCode.OK)

    async def get_all(self, db: AsyncSession) -> ServiceResult:
        async def action():
            try:
                return await self.crud.get_multi(db)
            except SQLAlchemyError as exc:
                logger.exception("Listing %s failed", self.crud.entity_name)
                raise LookupFailedError(f"unexpected error to list {self.crud.entity_name}") from exc

        return await self._execute("get_all", action, ResultCode.OK)

    async def run_report(self, db: AsyncSession, report: str, id: Optional[int] = None) -> ServiceResult:
        """
        집계 리포트를 실행합니다.
        id가 없으면 전체 행 목록을, 있으면 해당 엔티티의 단일 행을 반환합니다.
        """
        async def action():
            if report not in self.reports:
                raise KeyError(f"unknown report: {report}")
            if id is not None:
                await self._require(db, id)
            try:
                rows = await self.reports[report](db, id=id)
            except SQLAlchemyError as exc:
                logger.exception("Report %s on %s failed", report, self.crud.entity_name)
                raise LookupFailedError(f"unexpected error to build {report}") from exc
            if id is not None:
                return rows[0] if rows else None
            return rows

        return await self._execute(report, action, ResultCode.OK)
