# freshwms/domains/prd/models.py

"""
'prd' 도메인의 데이터베이스 ORM 모델을 정의하는 모듈입니다.
 - 상품 유형(ProductType) -> 상품(Product) -> 상품 배치(ProductBatch), 가격 기록(ProductRecord)
"""

from datetime import date
from typing import Optional

from sqlmodel import Field, SQLModel


# =============================================================================
# 1. product_types 테이블 모델 (조회용 코드 테이블)
# =============================================================================
class ProductTypeBase(SQLModel):
    description: str = Field(max_length=255)


class ProductType(ProductTypeBase, table=True):
    __tablename__ = "product_types"

    id: Optional[int] = Field(default=None, primary_key=True)


# =============================================================================
# 2. products 테이블 모델
# =============================================================================
class ProductBase(SQLModel):
    product_code: str = Field(max_length=255, unique=True, index=True, description="상품 코드 (비즈니스 키)")
    description: str = Field(max_length=255)
    width: float
    height: float
    length: float
    net_weight: float
    expiration_rate: float
    recommended_freezing_temperature: float
    freezing_rate: float
    product_type_id: int = Field(foreign_key="product_types.id")
    seller_id: int = Field(foreign_key="sellers.id")


class Product(ProductBase, table=True):
    __tablename__ = "products"

    id: Optional[int] = Field(default=None, primary_key=True)


# =============================================================================
# 3. product_batches 테이블 모델
# =============================================================================
class ProductBatchBase(SQLModel):
    batch_number: int = Field(unique=True, index=True, description="배치 번호 (비즈니스 키)")
    current_quantity: int
    current_temperature: int
    due_date: date
    initial_quantity: int
    manufacturing_date: date
    manufacturing_hour: int
    minimum_temperature: int
    product_id: int = Field(foreign_key="products.id")
    section_id: int = Field(foreign_key="sections.id")


class ProductBatch(ProductBatchBase, table=True):
    __tablename__ = "product_batches"

    id: Optional[int] = Field(default=None, primary_key=True)


# =============================================================================
# 4. product_records 테이블 모델
# =============================================================================
class ProductRecordBase(SQLModel):
    last_update_date: date
    purchase_price: float
    sale_price: float
    product_id: int = Field(foreign_key="products.id")


class ProductRecord(ProductRecordBase, table=True):
    __tablename__ = "product_records"

    id: Optional[int] = Field(default=None, primary_key=True)
