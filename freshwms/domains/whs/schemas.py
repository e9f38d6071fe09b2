# freshwms/domains/whs/schemas.py

"""
'whs' 도메인의 필드 스키마와 리포트 행 모델을 정의하는 모듈입니다.
"""

from sqlmodel import SQLModel

from freshwms.core.field_schema import EntitySchema, date_field, int_field, str_field


# =============================================================================
# 1. 필드 스키마
# =============================================================================
WAREHOUSE_SCHEMA = EntitySchema(
    entity="warehouse",
    field_specs={
        "warehouse_code": str_field(business_key=True),
        "address": str_field(),
        "telephone": str_field(max_length=20),
        "minimum_capacity": int_field(),
        "minimum_temperature": int_field(),
    },
)

SECTION_SCHEMA = EntitySchema(
    entity="section",
    field_specs={
        "section_number": int_field(business_key=True),
        "current_temperature": int_field(),
        "minimum_temperature": int_field(),
        "current_capacity": int_field(),
        "minimum_capacity": int_field(),
        "maximum_capacity": int_field(),
        "warehouse_id": int_field(),
        "product_type_id": int_field(),
    },
)

EMPLOYEE_SCHEMA = EntitySchema(
    entity="employee",
    field_specs={
        "card_number_id": str_field(business_key=True),
        "first_name": str_field(),
        "last_name": str_field(),
        "warehouse_id": int_field(),
    },
)

# order_number는 중복 검사 대상이 아닙니다.
INBOUND_ORDER_SCHEMA = EntitySchema(
    entity="inbound_order",
    field_specs={
        "order_number": str_field(),
        "order_date": date_field(),
        "employee_id": int_field(),
        "product_batch_id": int_field(),
        "warehouse_id": int_field(),
    },
)


# =============================================================================
# 2. 리포트 행
# =============================================================================
class EmployeeInboundOrdersReport(SQLModel):
    id: int
    card_number_id: str
    first_name: str
    last_name: str
    warehouse_id: int
    inbound_orders_count: int


class SectionProductsReport(SQLModel):
    section_id: int
    section_number: int
    products_count: int
