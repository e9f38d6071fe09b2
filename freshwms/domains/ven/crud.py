# freshwms/domains/ven/crud.py

"""
'ven' 도메인 (판매자)과 관련된 CRUD 로직을 담당하는 모듈입니다.
"""

from freshwms.core.crud_base import CRUDBase
from . import models as ven_models


class CRUDSeller(CRUDBase[ven_models.Seller]):
    def __init__(self):
        super().__init__(model=ven_models.Seller)


seller = CRUDSeller()
