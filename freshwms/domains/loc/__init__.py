# freshwms/domains/loc/__init__.py

"""
'loc' 도메인 패키지입니다.

지역(Locality)과 지역에 소속된 운송사(Carrier)를 관리합니다.
판매자(Seller)와 운송사는 생성 시 지역의 존재를 확인받습니다.

주요 서브모듈:
- `models.py`: 테이블에 매핑되는 SQLModel 정의.
- `schemas.py`: 필드 스키마와 리포트 행 모델.
- `crud.py`: 비동기 저장소 및 지역별 판매자 수 집계.
- `services.py`: EntityService 인스턴스.
"""

__title__ = "FreshWMS Locality Domain"
__description__ = "Manages localities and the carriers that operate in them."
__version__ = "0.1.0"
__all__ = []
