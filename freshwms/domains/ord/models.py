# freshwms/domains/ord/models.py

"""
'ord' 도메인의 데이터베이스 ORM 모델을 정의하는 모듈입니다.
"""

from datetime import date
from typing import Optional

from sqlmodel import Field, SQLModel


# =============================================================================
# 1. buyers 테이블 모델
# =============================================================================
class BuyerBase(SQLModel):
    card_number_id: str = Field(max_length=255, unique=True, index=True, description="카드 번호 (비즈니스 키)")
    first_name: str = Field(max_length=255)
    last_name: str = Field(max_length=255)


class Buyer(BuyerBase, table=True):
    __tablename__ = "buyers"

    id: Optional[int] = Field(default=None, primary_key=True)


# =============================================================================
# 2. order_status 테이블 모델 (조회용 코드 테이블)
# =============================================================================
class OrderStatusBase(SQLModel):
    description: str = Field(max_length=255)


class OrderStatus(OrderStatusBase, table=True):
    __tablename__ = "order_status"

    id: Optional[int] = Field(default=None, primary_key=True)


# =============================================================================
# 3. purchase_orders 테이블 모델
# =============================================================================
class PurchaseOrderBase(SQLModel):
    order_number: str = Field(max_length=255, description="주문 번호")
    order_date: date
    tracking_code: str = Field(max_length=255)
    buyer_id: int = Field(foreign_key="buyers.id")
    product_record_id: int = Field(foreign_key="product_records.id")
    order_status_id: int = Field(foreign_key="order_status.id")


class PurchaseOrder(PurchaseOrderBase, table=True):
    __tablename__ = "purchase_orders"

    id: Optional[int] = Field(default=None, primary_key=True)
