# freshwms/core/__init__.py

"""
애플리케이션 전반에 걸쳐 사용되는 핵심 구성 요소 패키지입니다.

주요 서브모듈은 다음과 같습니다:

- `config.py`: 애플리케이션 설정 및 환경 변수 관리 (Pydantic Settings).
- `database.py`: 비동기 엔진, 세션 관리 (SQLModel 및 AsyncSQLAlchemy).
- `errors.py`: 검증/충돌/미존재/저장소 오류 예외 계층.
- `field_schema.py`: 엔티티별 필드 스키마 정의와 요청 속성 검증/형 변환.
- `crud_base.py`: 모든 엔티티가 공유하는 저장소 계층 (Create, GetOne, GetAll, Delete, RawUpdate).
- `uniqueness.py`: 비즈니스 키 고유성 검사.
- `references.py`: 종속 엔티티 생성 전 참조 엔티티 존재 검사.
- `partial_update.py`: 부분 업데이트(PATCH) 구문 생성 및 적용 후 재조회.
- `results.py`: 처리 결과를 추상 결과 코드로 변환.
- `responses.py`: 결과 코드를 HTTP 상태 코드로 변환하는 경계 어댑터.
- `service.py`: 위 구성 요소를 순서대로 엮는 엔티티 공용 서비스.
"""

__title__ = "FreshWMS Core"
__description__ = "Core components shared by every FreshWMS entity."
__version__ = "0.1.0"
__all__ = []
