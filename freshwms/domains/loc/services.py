# freshwms/domains/loc/services.py

"""
'loc' 도메인의 서비스 인스턴스를 정의하는 모듈입니다.
"""

from freshwms.core.references import Dependency
from freshwms.core.service import EntityService

from . import crud as loc_crud
from . import schemas as loc_schemas

locality_service = EntityService(
    crud=loc_crud.locality,
    schema=loc_schemas.LOCALITY_SCHEMA,
    reports={
        "sellers_count": loc_crud.locality.get_sellers_report,
        "carriers_count": loc_crud.locality.get_carriers_report,
    },
)

carrier_service = EntityService(
    crud=loc_crud.carrier,
    schema=loc_schemas.CARRIER_SCHEMA,
    dependencies=[Dependency("locality_id", loc_crud.locality)],
)
