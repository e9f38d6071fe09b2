# freshwms/domains/ven/models.py

"""
'ven' 도메인의 데이터베이스 ORM 모델을 정의하는 모듈입니다.
"""

from typing import Optional

from sqlmodel import Field, SQLModel


class SellerBase(SQLModel):
    cid: int = Field(unique=True, index=True, description="판매자 식별 번호 (비즈니스 키)")
    company_name: str = Field(max_length=255)
    address: str = Field(max_length=255)
    telephone: str = Field(max_length=20)
    locality_id: int = Field(foreign_key="localities.id", description="소속 지역 ID")


class Seller(SellerBase, table=True):
    __tablename__ = "sellers"

    id: Optional[int] = Field(default=None, primary_key=True)
