# freshwms/domains/whs/__init__.py

"""
'whs' 도메인 패키지입니다.

창고(Warehouse)와 창고 내의 섹션(Section), 창고에 소속된 직원(Employee),
그리고 직원이 처리하는 입고 주문(InboundOrder)을 관리합니다.

주요 서브모듈:
- `models.py`: 테이블에 매핑되는 SQLModel 정의.
- `schemas.py`: 필드 스키마와 리포트 행 모델.
- `crud.py`: 비동기 저장소 및 직원별 입고 주문 수, 섹션별 상품 배치 수 집계.
- `services.py`: EntityService 인스턴스.
"""

__title__ = "FreshWMS Warehouse Domain"
__description__ = "Manages warehouses, sections, employees and inbound orders."
__version__ = "0.1.0"
__all__ = []
