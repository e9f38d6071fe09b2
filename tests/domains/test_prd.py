# tests/domains/test_prd.py

"""
'prd' 도메인 (상품 유형, 상품, 상품 배치, 가격 기록) 서비스에 대한 통합 테스트입니다.
"""

from datetime import date

import pytest
from sqlmodel.ext.asyncio.session import AsyncSession

from freshwms.core.results import ResultCode
from freshwms.domains.prd import models as prd_models
from freshwms.domains.prd.services import (
    product_batch_service,
    product_record_service,
    product_service,
    product_type_service,
)
from freshwms.domains.ven import models as ven_models
from freshwms.domains.whs import models as whs_models


def _product_payload(product_type_id: int, seller_id: int, **overrides):
    payload = {
        "product_code": "PRD-200",
        "description": "Frozen corn",
        "width": 12.5,
        "height": 4,
        "length": 22.0,
        "net_weight": 2.0,
        "expiration_rate": 0.6,
        "recommended_freezing_temperature": -18,
        "freezing_rate": 0.4,
        "product_type_id": product_type_id,
        "seller_id": seller_id,
    }
    payload.update(overrides)
    return payload


@pytest.mark.asyncio
async def test_create_product_type(db_session: AsyncSession):
    result = await product_type_service.create(db_session, {"description": "Chilled"})
    assert result.code is ResultCode.CREATED


@pytest.mark.asyncio
async def test_create_product_success(
    db_session: AsyncSession,
    test_product_type: prd_models.ProductType,
    test_seller: ven_models.Seller,
):
    """(성공) 정수로 들어온 float 필드도 float로 저장됩니다."""
    result = await product_service.create(db_session, _product_payload(test_product_type.id, test_seller.id))
    assert result.code is ResultCode.CREATED
    assert result.data.height == 4.0
    assert result.data.recommended_freezing_temperature == -18.0


@pytest.mark.asyncio
async def test_create_product_duplicate_code(
    db_session: AsyncSession,
    test_product: prd_models.Product,
):
    """(실패) 중복된 상품 코드는 CONFLICT입니다."""
    result = await product_service.create(
        db_session,
        _product_payload(test_product.product_type_id, test_product.seller_id, product_code=test_product.product_code),
    )
    assert result.code is ResultCode.CONFLICT
    assert result.error == "product_code already exists"


@pytest.mark.asyncio
async def test_create_product_missing_seller(db_session: AsyncSession, test_product_type: prd_models.ProductType):
    """(실패) 존재하지 않는 판매자를 참조하면 NOT_FOUND입니다."""
    result = await product_service.create(db_session, _product_payload(test_product_type.id, 600))
    assert result.code is ResultCode.NOT_FOUND
    assert result.error == "seller with id 600 not found (seller_id)"


@pytest.mark.asyncio
async def test_update_product_unknown_field(db_session: AsyncSession, test_product: prd_models.Product):
    """(실패) 스키마에 없는 필드는 BAD_INPUT입니다."""
    result = await product_service.update(db_session, test_product.id, {"colour": "green"})
    assert result.code is ResultCode.BAD_INPUT
    assert result.error == "unknown field: colour"


@pytest.mark.asyncio
async def test_create_product_batch_success(
    db_session: AsyncSession,
    test_product: prd_models.Product,
    test_section: whs_models.Section,
):
    result = await product_batch_service.create(
        db_session,
        {
            "batch_number": 777,
            "current_quantity": 10,
            "current_temperature": -16,
            "due_date": "2027-03-01",
            "initial_quantity": 12,
            "manufacturing_date": "2026-10-10",
            "manufacturing_hour": 14,
            "minimum_temperature": -20,
            "product_id": test_product.id,
            "section_id": test_section.id,
        },
    )
    assert result.code is ResultCode.CREATED
    assert result.data.due_date == date(2027, 3, 1)


@pytest.mark.asyncio
async def test_update_product_batch_invalid_date(
    db_session: AsyncSession, test_product_batch: prd_models.ProductBatch
):
    """(실패) 날짜 형식이 아니면 BAD_INPUT입니다."""
    result = await product_batch_service.update(db_session, test_product_batch.id, {"due_date": "tomorrow"})
    assert result.code is ResultCode.BAD_INPUT


@pytest.mark.asyncio
async def test_update_product_batch_date_round_trip(
    db_session: AsyncSession, test_product_batch: prd_models.ProductBatch
):
    result = await product_batch_service.update(
        db_session, test_product_batch.id, {"due_date": "2027-02-15", "current_quantity": 25}
    )
    assert result.code is ResultCode.UPDATED
    assert result.data.due_date == date(2027, 2, 15)
    assert result.data.current_quantity == 25
    assert result.data.batch_number == 500


@pytest.mark.asyncio
async def test_product_records_report(
    db_session: AsyncSession,
    test_product: prd_models.Product,
):
    """(성공) 상품별 가격 기록 수를 집계합니다."""
    for price in (10.0, 11.5, 12.25):
        created = await product_record_service.create(
            db_session,
            {"last_update_date": "2026-10-05", "purchase_price": price, "sale_price": price * 1.5, "product_id": test_product.id},
        )
        assert created.code is ResultCode.CREATED

    result = await product_service.run_report(db_session, "records_count", id=test_product.id)
    assert result.code is ResultCode.OK
    assert result.data.product_id == test_product.id
    assert result.data.description == "Frozen peas"
    assert result.data.records_count == 3

    result = await product_service.run_report(db_session, "records_count")
    assert [row.records_count for row in result.data] == [3]
