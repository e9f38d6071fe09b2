# freshwms/domains/whs/services.py

"""
'whs' 도메인의 서비스 인스턴스를 정의하는 모듈입니다.
참조 검사 순서는 Dependency 목록의 순서를 따릅니다.
"""

from freshwms.core.references import Dependency
from freshwms.core.service import EntityService
from freshwms.domains.prd.crud import product_batch, product_type

from . import crud as whs_crud
from . import schemas as whs_schemas

warehouse_service = EntityService(
    crud=whs_crud.warehouse,
    schema=whs_schemas.WAREHOUSE_SCHEMA,
)

section_service = EntityService(
    crud=whs_crud.section,
    schema=whs_schemas.SECTION_SCHEMA,
    dependencies=[
        Dependency("warehouse_id", whs_crud.warehouse),
        Dependency("product_type_id", product_type),
    ],
    reports={"products_count": whs_crud.section.get_products_report},
)

employee_service = EntityService(
    crud=whs_crud.employee,
    schema=whs_schemas.EMPLOYEE_SCHEMA,
    dependencies=[Dependency("warehouse_id", whs_crud.warehouse)],
    reports={"inbound_orders_count": whs_crud.employee.get_inbound_orders_report},
)

inbound_order_service = EntityService(
    crud=whs_crud.inbound_order,
    schema=whs_schemas.INBOUND_ORDER_SCHEMA,
    dependencies=[
        Dependency("employee_id", whs_crud.employee),
        Dependency("warehouse_id", whs_crud.warehouse),
        Dependency("product_batch_id", product_batch),
    ],
)
