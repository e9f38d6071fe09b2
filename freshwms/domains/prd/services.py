# freshwms/domains/prd/services.py

from freshwms.core.references import Dependency
from freshwms.core.service import EntityService
from freshwms.domains.ven.crud import seller
from freshwms.domains.whs.crud import section

from . import crud as prd_crud
from . import schemas as prd_schemas

product_type_service = EntityService(
    crud=prd_crud.product_type,
    schema=prd_schemas.PRODUCT_TYPE_SCHEMA,
)

product_service = EntityService(
    crud=prd_crud.product,
    schema=prd_schemas.PRODUCT_SCHEMA,
    dependencies=[
        Dependency("product_type_id", prd_crud.product_type),
        Dependency("seller_id", seller),
    ],
    reports={"records_count": prd_crud.product.get_records_report},
)

product_batch_service = EntityService(
    crud=prd_crud.product_batch,
    schema=prd_schemas.PRODUCT_BATCH_SCHEMA,
    dependencies=[
        Dependency("product_id", prd_crud.product),
        Dependency("section_id", section),
    ],
)

product_record_service = EntityService(
    crud=prd_crud.product_record,
    schema=prd_schemas.PRODUCT_RECORD_SCHEMA,
    dependencies=[Dependency("product_id", prd_crud.product)],
)
