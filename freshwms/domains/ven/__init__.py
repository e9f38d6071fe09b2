# freshwms/domains/ven/__init__.py

"""
'ven' 도메인 패키지입니다.

상품을 공급하는 판매자(Seller)를 관리합니다. 판매자는 하나의 지역(Locality)에 소속되며,
상품(Product)은 생성 시 판매자의 존재를 확인받습니다.
"""

__title__ = "FreshWMS Seller Domain"
__description__ = "Manages sellers that supply products."
__version__ = "0.1.0"
__all__ = []
