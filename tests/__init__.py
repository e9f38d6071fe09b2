# tests/__init__.py

"""
FreshWMS의 테스트 스위트 패키지입니다.

테스트 코드는 `pytest`와 `pytest-asyncio`를 기반으로 작성되며, 다음과 같이 구조화됩니다.

- `core/`: 필드 검증, 고유성 검사, 참조 검사, 부분 업데이트, 결과 매핑 등 핵심 구성 요소의 테스트.
- `domains/`: 각 비즈니스 도메인(loc, ven, whs, prd, ord)의 서비스와 집계 리포트 테스트.
- `conftest.py`: 데이터베이스 엔진/세션과 엔티티 픽스처를 정의하는 파일입니다.
"""

__title__ = "FreshWMS Tests"
__description__ = "Test suite for the FreshWMS core."
__version__ = "0.1.0"
__all__ = []
