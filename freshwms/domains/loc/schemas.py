# freshwms/domains/loc/schemas.py

"""
'loc' 도메인의 필드 스키마와 리포트 행 모델을 정의하는 모듈입니다.
필드 선언 순서가 업데이트 구문의 SET 순서가 됩니다.
"""

from sqlmodel import SQLModel

from freshwms.core.field_schema import EntitySchema, int_field, str_field

LOCALITY_SCHEMA = EntitySchema(
    entity="locality",
    field_specs={
        "locality_code": str_field(business_key=True),
        "locality_name": str_field(),
        "province_name": str_field(),
        "country_name": str_field(),
    },
)

CARRIER_SCHEMA = EntitySchema(
    entity="carrier",
    field_specs={
        "cid": str_field(business_key=True),
        "company_name": str_field(),
        "address": str_field(),
        "telephone": str_field(max_length=20),
        "locality_id": int_field(),
    },
)


class LocalitySellersReport(SQLModel):
    """지역별 판매자 수"""
    locality_id: int
    locality_name: str
    sellers_count: int


class LocalityCarriersReport(SQLModel):
    """지역별 운송사 수"""
    locality_id: int
    locality_name: str
    carriers_count: int
