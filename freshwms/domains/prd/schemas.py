# freshwms/domains/prd/schemas.py

"""
'prd' 도메인의 필드 스키마와 리포트 행 모델을 정의하는 모듈입니다.
"""

from sqlmodel import SQLModel

from freshwms.core.field_schema import EntitySchema, date_field, float_field, int_field, str_field

PRODUCT_TYPE_SCHEMA = EntitySchema(
    entity="product_type",
    field_specs={
        "description": str_field(),
    },
)

PRODUCT_SCHEMA = EntitySchema(
    entity="product",
    field_specs={
        "product_code": str_field(business_key=True),
        "description": str_field(),
        "width": float_field(),
        "height": float_field(),
        "length": float_field(),
        "net_weight": float_field(),
        "expiration_rate": float_field(),
        "recommended_freezing_temperature": float_field(),
        "freezing_rate": float_field(),
        "product_type_id": int_field(),
        "seller_id": int_field(),
    },
)

PRODUCT_BATCH_SCHEMA = EntitySchema(
    entity="product_batch",
    field_specs={
        "batch_number": int_field(business_key=True),
        "current_quantity": int_field(),
        "current_temperature": int_field(),
        "due_date": date_field(),
        "initial_quantity": int_field(),
        "manufacturing_date": date_field(),
        "manufacturing_hour": int_field(),
        "minimum_temperature": int_field(),
        "product_id": int_field(),
        "section_id": int_field(),
    },
)

PRODUCT_RECORD_SCHEMA = EntitySchema(
    entity="product_record",
    field_specs={
        "last_update_date": date_field(),
        "purchase_price": float_field(),
        "sale_price": float_field(),
        "product_id": int_field(),
    },
)


class ProductRecordsReport(SQLModel):
    """상품별 가격 기록 수"""
    product_id: int
    description: str
    records_count: int
