# freshwms/__init__.py

"""
창고/재고 관리 백엔드(freshwms)의 메인 패키지입니다.

이 패키지는 구매자, 판매자, 상품, 창고, 섹션, 직원, 지역, 운송사, 구매 주문,
입고 주문, 상품 배치, 상품 기록 등 서로 연관된 엔티티들의 핵심 로직을 포함합니다.
HTTP 라우팅과 프로세스 부트스트래핑은 이 패키지의 범위가 아니며,
외부 경계 계층이 `core.service.EntityService`를 호출하는 방식으로 사용합니다.

- `core`: 설정, 데이터베이스 연결, 필드 검증, 부분 업데이트, 고유성 검사,
  참조 존재 검사, 결과 코드 매핑 등 공통 핵심 구성 요소.
- `domains`: 엔티티 그룹별(loc, ven, whs, prd, ord) 모델, 스키마, CRUD, 서비스.
"""

APP_NAME = "FreshWMS Core"
APP_VERSION = "0.1.0"

__version__ = APP_VERSION
__title__ = APP_NAME
__description__ = "Warehouse / inventory management core (validation, partial update, referential gate)."
__all__ = []
