# tests/core/__init__.py

"""핵심 구성 요소(freshwms.core)에 대한 테스트 패키지입니다."""

__all__ = []
