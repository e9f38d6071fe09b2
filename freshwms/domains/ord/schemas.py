# freshwms/domains/ord/schemas.py

"""
'ord' 도메인의 필드 스키마와 리포트 행 모델을 정의하는 모듈입니다.
"""

from sqlmodel import SQLModel

from freshwms.core.field_schema import EntitySchema, date_field, int_field, str_field

BUYER_SCHEMA = EntitySchema(
    entity="buyer",
    field_specs={
        "card_number_id": str_field(business_key=True),
        "first_name": str_field(),
        "last_name": str_field(),
    },
)

ORDER_STATUS_SCHEMA = EntitySchema(
    entity="order_status",
    field_specs={
        "description": str_field(),
    },
)

PURCHASE_ORDER_SCHEMA = EntitySchema(
    entity="purchase_order",
    field_specs={
        "order_number": str_field(),
        "order_date": date_field(),
        "tracking_code": str_field(),
        "buyer_id": int_field(),
        "product_record_id": int_field(),
        "order_status_id": int_field(),
    },
)


class BuyerPurchaseOrdersReport(SQLModel):
    """구매자별 구매 주문 수"""
    id: int
    card_number_id: str
    first_name: str
    last_name: str
    purchase_orders_count: int
