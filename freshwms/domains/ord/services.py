# freshwms/domains/ord/services.py

"""
'ord' 도메인의 서비스 인스턴스를 정의하는 모듈입니다.
구매 주문의 참조 검사 순서: 구매자 -> 상품 가격 기록 -> 주문 상태
"""

from freshwms.core.references import Dependency
from freshwms.core.service import EntityService
from freshwms.domains.prd.crud import product_record

from . import crud as ord_crud
from . import schemas as ord_schemas

buyer_service = EntityService(
    crud=ord_crud.buyer,
    schema=ord_schemas.BUYER_SCHEMA,
    reports={"purchase_orders_count": ord_crud.buyer.get_purchase_orders_report},
)

order_status_service = EntityService(
    crud=ord_crud.order_status,
    schema=ord_schemas.ORDER_STATUS_SCHEMA,
)

purchase_order_service = EntityService(
    crud=ord_crud.purchase_order,
    schema=ord_schemas.PURCHASE_ORDER_SCHEMA,
    dependencies=[
        Dependency("buyer_id", ord_crud.buyer),
        Dependency("product_record_id", product_record),
        Dependency("order_status_id", ord_crud.order_status),
    ],
)
