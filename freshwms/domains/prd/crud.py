# freshwms/domains/prd/crud.py

"""
'prd' 도메인 (상품 관리)과 관련된 CRUD 로직을 담당하는 모듈입니다.
"""

from typing import List, Optional

from sqlalchemy import func
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from freshwms.core.crud_base import CRUDBase
from . import models as prd_models
from . import schemas as prd_schemas


class CRUDProductType(CRUDBase[prd_models.ProductType]):
    def __init__(self):
        super().__init__(model=prd_models.ProductType)


class CRUDProduct(CRUDBase[prd_models.Product]):
    def __init__(self):
        super().__init__(model=prd_models.Product)

    async def get_records_report(
        self, db: AsyncSession, *, id: Optional[int] = None
    ) -> List[prd_schemas.ProductRecordsReport]:
        """상품별 가격 기록 수를 집계합니다."""
        record = prd_models.ProductRecord
        statement = (
            select(
                self.model.id.label("product_id"),
                self.model.description,
                func.count(record.id).label("records_count"),
            )
            .outerjoin(record, record.product_id == self.model.id)
            .group_by(self.model.id, self.model.description)
            .order_by(self.model.id)
        )
        if id is not None:
            statement = statement.where(self.model.id == id)
        result = await db.execute(statement)
        return [prd_schemas.ProductRecordsReport(**row._mapping) for row in result.all()]


class CRUDProductBatch(CRUDBase[prd_models.ProductBatch]):
    def __init__(self):
        super().__init__(model=prd_models.ProductBatch)


class CRUDProductRecord(CRUDBase[prd_models.ProductRecord]):
    def __init__(self):
        super().__init__(model=prd_models.ProductRecord)


product_type = CRUDProductType()
product = CRUDProduct()
product_batch = CRUDProductBatch()
product_record = CRUDProductRecord()
