# freshwms/domains/prd/__init__.py

"""
'prd' 도메인 패키지입니다.

상품 유형(ProductType), 상품(Product), 섹션에 보관되는 상품 배치(ProductBatch),
그리고 상품의 가격 이력(ProductRecord)을 관리합니다.
"""

__title__ = "FreshWMS Product Domain"
__description__ = "Manages product types, products, product batches and price records."
__version__ = "0.1.0"
__all__ = []
