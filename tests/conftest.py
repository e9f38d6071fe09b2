# tests/conftest.py

import os
from datetime import date
from typing import AsyncGenerator

import pytest_asyncio
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

# --- 모든 모델 임포트 ---
#  설명: SQLModel.metadata.create_all()이 모든 테이블을 인식하려면,
#  아래처럼 모든 모델 클래스가 한 번 이상 임포트되어야 합니다.
from freshwms.domains.models import *    # noqa: F401, F403

from freshwms.domains.loc import models as loc_models
from freshwms.domains.ven import models as ven_models
from freshwms.domains.whs import models as whs_models
from freshwms.domains.prd import models as prd_models
from freshwms.domains.ord import models as ord_models


# --- 테스트용 데이터베이스 설정 ---
# 기본값은 메모리 SQLite입니다. PostgreSQL로 테스트하려면 TEST_DATABASE_URL을 지정합니다.
TEST_DATABASE_URL = os.getenv("TEST_DATABASE_URL", "sqlite+aiosqlite://")


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


# --- 데이터베이스 픽스처 ---
@pytest_asyncio.fixture(scope="function")
async def test_engine() -> AsyncGenerator[AsyncEngine, None]:
    """
    테스트 함수마다 새로운 엔진을 만들고 모든 테이블을 생성합니다.
    테스트 종료 시 테이블을 삭제하고 엔진을 정리합니다.
    """
    if TEST_DATABASE_URL.startswith("sqlite"):
        engine = create_async_engine(
            TEST_DATABASE_URL,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,  # 메모리 DB를 모든 세션이 공유하도록 단일 연결 사용
        )
        event.listen(engine.sync_engine, "connect", _enable_sqlite_foreign_keys)
    else:
        engine = create_async_engine(TEST_DATABASE_URL)

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
        await conn.run_sync(SQLModel.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture(scope="function")
async def db_session(test_engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """각 테스트 함수에 독립적인 비동기 데이터베이스 세션을 제공합니다."""
    TestingSessionLocal = sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )
    async with TestingSessionLocal() as session:
        yield session


async def _persist(db_session: AsyncSession, obj):
    db_session.add(obj)
    await db_session.commit()
    await db_session.refresh(obj)
    return obj


# --- 엔티티 픽스처 (참조 순서대로) ---
@pytest_asyncio.fixture(scope="function")
async def test_locality(db_session: AsyncSession) -> loc_models.Locality:
    return await _persist(db_session, loc_models.Locality(
        locality_code="6700", locality_name="Blumenau", province_name="Santa Catarina", country_name="Brazil",
    ))


@pytest_asyncio.fixture(scope="function")
async def test_seller(db_session: AsyncSession, test_locality: loc_models.Locality) -> ven_models.Seller:
    return await _persist(db_session, ven_models.Seller(
        cid=100, company_name="Fresh Farms", address="Rua 1, 100", telephone="4733334444",
        locality_id=test_locality.id,
    ))


@pytest_asyncio.fixture(scope="function")
async def test_warehouse(db_session: AsyncSession) -> whs_models.Warehouse:
    return await _persist(db_session, whs_models.Warehouse(
        warehouse_code="WH-001", address="Av. Central 10", telephone="4799990000",
        minimum_capacity=10, minimum_temperature=-5,
    ))


@pytest_asyncio.fixture(scope="function")
async def test_warehouse_b(db_session: AsyncSession) -> whs_models.Warehouse:
    return await _persist(db_session, whs_models.Warehouse(
        warehouse_code="WH-002", address="Av. Norte 20", telephone="4799991111",
        minimum_capacity=20, minimum_temperature=-10,
    ))


@pytest_asyncio.fixture(scope="function")
async def test_product_type(db_session: AsyncSession) -> prd_models.ProductType:
    return await _persist(db_session, prd_models.ProductType(description="Frozen"))


@pytest_asyncio.fixture(scope="function")
async def test_section(
    db_session: AsyncSession,
    test_warehouse: whs_models.Warehouse,
    test_product_type: prd_models.ProductType,
) -> whs_models.Section:
    return await _persist(db_session, whs_models.Section(
        section_number=1, current_temperature=-2, minimum_temperature=-8,
        current_capacity=50, minimum_capacity=10, maximum_capacity=100,
        warehouse_id=test_warehouse.id, product_type_id=test_product_type.id,
    ))


@pytest_asyncio.fixture(scope="function")
async def test_employee(db_session: AsyncSession, test_warehouse: whs_models.Warehouse) -> whs_models.Employee:
    return await _persist(db_session, whs_models.Employee(
        card_number_id="EMP-001", first_name="Ana", last_name="Souza", warehouse_id=test_warehouse.id,
    ))


@pytest_asyncio.fixture(scope="function")
async def test_product(
    db_session: AsyncSession,
    test_product_type: prd_models.ProductType,
    test_seller: ven_models.Seller,
) -> prd_models.Product:
    return await _persist(db_session, prd_models.Product(
        product_code="PRD-001", description="Frozen peas", width=10.0, height=5.0, length=20.0,
        net_weight=1.5, expiration_rate=0.7, recommended_freezing_temperature=-18.0, freezing_rate=0.5,
        product_type_id=test_product_type.id, seller_id=test_seller.id,
    ))


@pytest_asyncio.fixture(scope="function")
async def test_product_batch(
    db_session: AsyncSession,
    test_product: prd_models.Product,
    test_section: whs_models.Section,
) -> prd_models.ProductBatch:
    return await _persist(db_session, prd_models.ProductBatch(
        batch_number=500, current_quantity=30, current_temperature=-15, due_date=date(2027, 1, 31),
        initial_quantity=40, manufacturing_date=date(2026, 9, 1), manufacturing_hour=8,
        minimum_temperature=-20, product_id=test_product.id, section_id=test_section.id,
    ))


@pytest_asyncio.fixture(scope="function")
async def test_product_record(db_session: AsyncSession, test_product: prd_models.Product) -> prd_models.ProductRecord:
    return await _persist(db_session, prd_models.ProductRecord(
        last_update_date=date(2026, 10, 1), purchase_price=9.5, sale_price=14.9, product_id=test_product.id,
    ))


@pytest_asyncio.fixture(scope="function")
async def test_buyer(db_session: AsyncSession) -> ord_models.Buyer:
    return await _persist(db_session, ord_models.Buyer(
        card_number_id="BUY-001", first_name="Carlos", last_name="Lima",
    ))


@pytest_asyncio.fixture(scope="function")
async def test_order_status(db_session: AsyncSession) -> ord_models.OrderStatus:
    return await _persist(db_session, ord_models.OrderStatus(description="Pending"))
