# freshwms/domains/ven/services.py

from freshwms.core.references import Dependency
from freshwms.core.service import EntityService
from freshwms.domains.loc.crud import locality

from . import crud as ven_crud
from . import schemas as ven_schemas

seller_service = EntityService(
    crud=ven_crud.seller,
    schema=ven_schemas.SELLER_SCHEMA,
    dependencies=[Dependency("locality_id", locality)],
)
