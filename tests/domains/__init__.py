# tests/domains/__init__.py

"""
도메인별 테스트 스위트 패키지입니다.

- `test_loc.py`: 지역, 운송사
- `test_ven.py`: 판매자
- `test_whs.py`: 창고, 섹션, 직원, 입고 주문
- `test_prd.py`: 상품 유형, 상품, 상품 배치, 가격 기록
- `test_ord.py`: 구매자, 주문 상태, 구매 주문
"""

__all__ = []
