# freshwms/domains/loc/models.py

"""
'loc' 도메인의 데이터베이스 ORM 모델을 정의하는 모듈입니다.
 - Locality: 지역 (locality_code가 비즈니스 키)
 - Carrier: 운송사, 하나의 지역에 소속
"""

from typing import Optional

from sqlmodel import Field, SQLModel


# =============================================================================
# 1. localities 테이블 모델
# =============================================================================
class LocalityBase(SQLModel):
    locality_code: str = Field(max_length=255, unique=True, index=True, description="지역 코드 (비즈니스 키)")
    locality_name: str = Field(max_length=255, description="지역 이름")
    province_name: str = Field(max_length=255, description="주/도 이름")
    country_name: str = Field(max_length=255, description="국가 이름")


class Locality(LocalityBase, table=True):
    __tablename__ = "localities"

    id: Optional[int] = Field(default=None, primary_key=True)


# =============================================================================
# 2. carriers 테이블 모델
# =============================================================================
class CarrierBase(SQLModel):
    cid: str = Field(max_length=255, unique=True, index=True, description="운송사 식별 코드 (비즈니스 키)")
    company_name: str = Field(max_length=255)
    address: str = Field(max_length=255)
    telephone: str = Field(max_length=20)
    locality_id: int = Field(foreign_key="localities.id", description="소속 지역 ID")


class Carrier(CarrierBase, table=True):
    __tablename__ = "carriers"

    id: Optional[int] = Field(default=None, primary_key=True)
