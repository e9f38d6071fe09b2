# freshwms/domains/whs/models.py

"""
'whs' 도메인의 데이터베이스 ORM 모델을 정의하는 모듈입니다.
 - 창고(Warehouse) -> 섹션(Section), 직원(Employee) 계층 구조
 - 입고 주문(InboundOrder)은 직원, 창고, 상품 배치를 참조
"""

from datetime import date
from typing import Optional

from sqlmodel import Field, SQLModel


# =============================================================================
# 1. warehouses 테이블 모델
# =============================================================================
class WarehouseBase(SQLModel):
    warehouse_code: str = Field(max_length=255, unique=True, index=True, description="창고 코드 (비즈니스 키)")
    address: str = Field(max_length=255)
    telephone: str = Field(max_length=20)
    minimum_capacity: int = Field(description="최소 보관 용량")
    minimum_temperature: int = Field(description="최저 온도")


class Warehouse(WarehouseBase, table=True):
    __tablename__ = "warehouses"

    id: Optional[int] = Field(default=None, primary_key=True)


# =============================================================================
# 2. sections 테이블 모델
# =============================================================================
class SectionBase(SQLModel):
    section_number: int = Field(unique=True, index=True, description="섹션 번호 (비즈니스 키)")
    current_temperature: int
    minimum_temperature: int
    current_capacity: int
    minimum_capacity: int
    maximum_capacity: int
    warehouse_id: int = Field(foreign_key="warehouses.id")
    product_type_id: int = Field(foreign_key="product_types.id")


class Section(SectionBase, table=True):
    __tablename__ = "sections"

    id: Optional[int] = Field(default=None, primary_key=True)


# =============================================================================
# 3. employees 테이블 모델
# =============================================================================
class EmployeeBase(SQLModel):
    card_number_id: str = Field(max_length=255, unique=True, index=True, description="사원증 번호 (비즈니스 키)")
    first_name: str = Field(max_length=255)
    last_name: str = Field(max_length=255)
    warehouse_id: int = Field(foreign_key="warehouses.id")


class Employee(EmployeeBase, table=True):
    __tablename__ = "employees"

    id: Optional[int] = Field(default=None, primary_key=True)


# =============================================================================
# 4. inbound_orders 테이블 모델
# =============================================================================
class InboundOrderBase(SQLModel):
    order_number: str = Field(max_length=255, description="입고 주문 번호")
    order_date: date
    employee_id: int = Field(foreign_key="employees.id")
    product_batch_id: int = Field(foreign_key="product_batches.id")
    warehouse_id: int = Field(foreign_key="warehouses.id")


class InboundOrder(InboundOrderBase, table=True):
    __tablename__ = "inbound_orders"

    id: Optional[int] = Field(default=None, primary_key=True)
