# freshwms/domains/models/__init__.py

"""
이 파일은 모든 도메인의 SQLModel 모델들을 한 곳에서 중앙 관리하여,
다른 모듈에서 쉽게 임포트할 수 있도록 하는 역할을 합니다.
SQLModel.metadata가 모든 테이블을 인식하도록 보장합니다.
"""

# loc (Locality, Carrier)
from freshwms.domains.loc.models import Locality, Carrier

# ven (Seller)
from freshwms.domains.ven.models import Seller

# whs (Warehouse, Section, Employee, InboundOrder)
from freshwms.domains.whs.models import Warehouse, Section, Employee, InboundOrder

# prd (ProductType, Product, ProductBatch, ProductRecord)
from freshwms.domains.prd.models import ProductType, Product, ProductBatch, ProductRecord

# ord (Buyer, OrderStatus, PurchaseOrder)
from freshwms.domains.ord.models import Buyer, OrderStatus, PurchaseOrder

__all__ = [
    "Locality", "Carrier",
    "Seller",
    "Warehouse", "Section", "Employee", "InboundOrder",
    "ProductType", "Product", "ProductBatch", "ProductRecord",
    "Buyer", "OrderStatus", "PurchaseOrder",
]
