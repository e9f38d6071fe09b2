# freshwms/domains/ord/crud.py

"""
'ord' 도메인 (구매 주문)과 관련된 CRUD 로직을 담당하는 모듈입니다.
"""

from typing import List, Optional

from sqlalchemy import func
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from freshwms.core.crud_base import CRUDBase
from . import models as ord_models
from . import schemas as ord_schemas


# =============================================================================
# 1. 구매자 (Buyer) CRUD
# =============================================================================
class CRUDBuyer(CRUDBase[ord_models.Buyer]):
    def __init__(self):
        super().__init__(model=ord_models.Buyer)

    async def get_purchase_orders_report(
        self, db: AsyncSession, *, id: Optional[int] = None
    ) -> List[ord_schemas.BuyerPurchaseOrdersReport]:
        """
        구매자별 구매 주문 수를 집계합니다.
        주문이 없는 구매자도 0건으로 포함됩니다 (LEFT OUTER JOIN).
        """
        order = ord_models.PurchaseOrder
        statement = (
            select(
                self.model.id,
                self.model.card_number_id,
                self.model.first_name,
                self.model.last_name,
                func.count(order.id).label("purchase_orders_count"),
            )
            .outerjoin(order, order.buyer_id == self.model.id)
            .group_by(
                self.model.id,
                self.model.card_number_id,
                self.model.first_name,
                self.model.last_name,
            )
            .order_by(self.model.id)
        )
        if id is not None:
            statement = statement.where(self.model.id == id)
        result = await db.execute(statement)
        return [ord_schemas.BuyerPurchaseOrdersReport(**row._mapping) for row in result.all()]


# =============================================================================
# 2. 주문 상태 (OrderStatus) / 구매 주문 (PurchaseOrder) CRUD
# =============================================================================
class CRUDOrderStatus(CRUDBase[ord_models.OrderStatus]):
    def __init__(self):
        super().__init__(model=ord_models.OrderStatus)


class CRUDPurchaseOrder(CRUDBase[ord_models.PurchaseOrder]):
    def __init__(self):
        super().__init__(model=ord_models.PurchaseOrder)


buyer = CRUDBuyer()
order_status = CRUDOrderStatus()
purchase_order = CRUDPurchaseOrder()
