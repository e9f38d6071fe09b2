# freshwms/domains/whs/crud.py

"""
'whs' 도메인 (창고 관리)과 관련된 CRUD 로직을 담당하는 모듈입니다.
"""

from typing import List, Optional
import logging

from sqlalchemy import func
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from freshwms.core.crud_base import CRUDBase
from freshwms.domains.prd.models import ProductBatch
from . import models as whs_models
from . import schemas as whs_schemas

logger = logging.getLogger(__name__)


# =============================================================================
# 1. 창고 (Warehouse) CRUD
# =============================================================================
class CRUDWarehouse(CRUDBase[whs_models.Warehouse]):
    def __init__(self):
        super().__init__(model=whs_models.Warehouse)


# =============================================================================
# 2. 섹션 (Section) CRUD
# =============================================================================
class CRUDSection(CRUDBase[whs_models.Section]):
    def __init__(self):
        super().__init__(model=whs_models.Section)

    async def get_products_report(
        self, db: AsyncSession, *, id: Optional[int] = None
    ) -> List[whs_schemas.SectionProductsReport]:
        """섹션별 상품 배치 수를 집계합니다."""
        statement = (
            select(
                self.model.id.label("section_id"),
                self.model.section_number,
                func.count(ProductBatch.id).label("products_count"),
            )
            .outerjoin(ProductBatch, ProductBatch.section_id == self.model.id)
            .group_by(self.model.id, self.model.section_number)
            .order_by(self.model.id)
        )
        if id is not None:
            statement = statement.where(self.model.id == id)
        result = await db.execute(statement)
        return [whs_schemas.SectionProductsReport(**row._mapping) for row in result.all()]


# =============================================================================
# 3. 직원 (Employee) CRUD
# =============================================================================
class CRUDEmployee(CRUDBase[whs_models.Employee]):
    def __init__(self):
        super().__init__(model=whs_models.Employee)

    async def get_inbound_orders_report(
        self, db: AsyncSession, *, id: Optional[int] = None
    ) -> List[whs_schemas.EmployeeInboundOrdersReport]:
        """직원별 입고 주문 수를 집계합니다. 입고 주문이 없는 직원은 0으로 포함됩니다."""
        inbound = whs_models.InboundOrder
        statement = (
            select(
                self.model.id,
                self.model.card_number_id,
                self.model.first_name,
                self.model.last_name,
                self.model.warehouse_id,
                func.count(inbound.id).label("inbound_orders_count"),
            )
            .outerjoin(inbound, inbound.employee_id == self.model.id)
            .group_by(
                self.model.id,
                self.model.card_number_id,
                self.model.first_name,
                self.model.last_name,
                self.model.warehouse_id,
            )
            .order_by(self.model.id)
        )
        if id is not None:
            statement = statement.where(self.model.id == id)
        result = await db.execute(statement)
        return [whs_schemas.EmployeeInboundOrdersReport(**row._mapping) for row in result.all()]


# =============================================================================
# 4. 입고 주문 (InboundOrder) CRUD
# =============================================================================
class CRUDInboundOrder(CRUDBase[whs_models.InboundOrder]):
    def __init__(self):
        super().__init__(model=whs_models.InboundOrder)


warehouse = CRUDWarehouse()
section = CRUDSection()
employee = CRUDEmployee()
inbound_order = CRUDInboundOrder()
