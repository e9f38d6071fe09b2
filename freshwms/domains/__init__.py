# freshwms/domains/__init__.py

"""
FreshWMS의 도메인 패키지입니다.

각 하위 패키지는 하나의 업무 영역에 해당합니다.
- `loc`: 지역(Locality)과 운송사(Carrier)
- `ven`: 판매자(Seller)
- `whs`: 창고(Warehouse), 섹션(Section), 직원(Employee), 입고 주문(InboundOrder)
- `prd`: 상품 유형, 상품, 상품 배치, 상품 가격 기록
- `ord`: 구매자(Buyer), 주문 상태, 구매 주문(PurchaseOrder)

각 도메인은 `models.py`(테이블), `schemas.py`(필드 스키마와 리포트 행), `crud.py`(저장소),
`services.py`(EntityService 인스턴스)로 구성됩니다.
"""

__all__ = []
