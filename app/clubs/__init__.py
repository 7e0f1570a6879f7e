"""
Club Registry Module

헌혈 행사 참가 클럽 관리
- 클럽 등록, 참석 인원 증감, 삭제
- Supabase clubs 테이블과 메모리 목록 동기화
"""

from .router import router as clubs_router
from .registry import ClubRegistry
from .store import ClubStore, SupabaseClubStore, RemoteStoreError, ClubNotFoundError
from .models import Club, ClubResult, ClubSummary

__all__ = [
    "clubs_router",
    "ClubRegistry",
    "ClubStore",
    "SupabaseClubStore",
    "RemoteStoreError",
    "ClubNotFoundError",
    "Club",
    "ClubResult",
    "ClubSummary",
]
