# freshwms/domains/ord/__init__.py

"""
'ord' 도메인 패키지입니다.

구매자(Buyer)와 구매 주문(PurchaseOrder), 주문 상태 코드(OrderStatus)를 관리합니다.
구매 주문은 생성 시 구매자, 상품 가격 기록, 주문 상태의 존재를 순서대로 확인받습니다.
"""

__title__ = "FreshWMS Order Domain"
__description__ = "Manages buyers and their purchase orders."
__version__ = "0.1.0"
__all__ = []
