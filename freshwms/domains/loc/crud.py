# freshwms/domains/loc/crud.py

"""
'loc' 도메인 (지역 정보)과 관련된 CRUD 로직을 담당하는 모듈입니다.
"""

from typing import List, Optional
import logging

from sqlalchemy import func
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from freshwms.core.crud_base import CRUDBase
from freshwms.domains.ven.models import Seller
from . import models as loc_models
from . import schemas as loc_schemas

logger = logging.getLogger(__name__)


# =============================================================================
# 1. 지역 (Locality) CRUD
# =============================================================================
class CRUDLocality(CRUDBase[loc_models.Locality]):
    def __init__(self):
        super().__init__(model=loc_models.Locality)

    async def get_sellers_report(
        self, db: AsyncSession, *, id: Optional[int] = None
    ) -> List[loc_schemas.LocalitySellersReport]:
        """지역별 판매자 수를 집계합니다. 판매자가 없는 지역은 0으로 포함됩니다."""
        statement = (
            select(
                self.model.id.label("locality_id"),
                self.model.locality_name,
                func.count(Seller.id).label("sellers_count"),
            )
            .outerjoin(Seller, Seller.locality_id == self.model.id)
            .group_by(self.model.id, self.model.locality_name)
            .order_by(self.model.id)
        )
        if id is not None:
            statement = statement.where(self.model.id == id)
        result = await db.execute(statement)
        return [loc_schemas.LocalitySellersReport(**row._mapping) for row in result.all()]

    async def get_carriers_report(
        self, db: AsyncSession, *, id: Optional[int] = None
    ) -> List[loc_schemas.LocalityCarriersReport]:
        """지역별 운송사 수를 집계합니다. 운송사가 없는 지역은 0으로 포함됩니다."""
        carrier_model = loc_models.Carrier
        statement = (
            select(
                self.model.id.label("locality_id"),
                self.model.locality_name,
                func.count(carrier_model.id).label("carriers_count"),
            )
            .outerjoin(carrier_model, carrier_model.locality_id == self.model.id)
            .group_by(self.model.id, self.model.locality_name)
            .order_by(self.model.id)
        )
        if id is not None:
            statement = statement.where(self.model.id == id)
        result = await db.execute(statement)
        return [loc_schemas.LocalityCarriersReport(**row._mapping) for row in result.all()]


# =============================================================================
# 2. 운송사 (Carrier) CRUD
# =============================================================================
class CRUDCarrier(CRUDBase[loc_models.Carrier]):
    def __init__(self):
        super().__init__(model=loc_models.Carrier)


locality = CRUDLocality()
carrier = CRUDCarrier()
