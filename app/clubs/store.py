"""
Club Store

clubs 테이블 접근 계층
- ClubStore: 레지스트리가 의존하는 인터페이스 (테스트에서 가짜 저장소로 교체)
- SupabaseClubStore: Supabase 구현
"""

from typing import Any, Dict, List, Protocol

import httpx
from loguru import logger
from postgrest.exceptions import APIError
from supabase import AsyncClient


class RemoteStoreError(Exception):
    """원격 저장소 작업 실패 (네트워크, 제약 조건 위반, 미존재 등)"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ClubNotFoundError(RemoteStoreError):
    """갱신 대상 행이 없음"""

    def __init__(self, club_id: str):
        super().__init__(f"Club introuvable: {club_id}")
        self.club_id = club_id


class ClubStore(Protocol):
    """clubs 테이블 접근 인터페이스"""

    async def select_all(self) -> List[Dict[str, Any]]:
        """전체 행, created_at 내림차순"""
        ...

    async def insert(self, row: Dict[str, Any]) -> Dict[str, Any]:
        """한 행 삽입 후 서버가 채운 행 반환"""
        ...

    async def update(self, club_id: str, fields: Dict[str, Any]) -> Dict[str, Any]:
        """id 일치 행 갱신 후 갱신된 행 반환"""
        ...

    async def delete(self, club_id: str) -> None:
        """id 일치 행 삭제"""
        ...


class SupabaseClubStore:
    """Supabase clubs 테이블"""

    def __init__(self, client: AsyncClient, table: str = "clubs"):
        self.client = client
        self.table = table

    async def _execute(self, query, action: str):
        try:
            return await query.execute()
        except APIError as e:
            logger.debug(f"[{self.table}] {action} APIError code={e.code}: {e.message}")
            raise RemoteStoreError(e.message or f"{action} échoué") from e
        except httpx.HTTPError as e:
            logger.debug(f"[{self.table}] {action} 네트워크 오류: {e}")
            raise RemoteStoreError(str(e) or f"{action} échoué") from e

    async def select_all(self) -> List[Dict[str, Any]]:
        query = self.client.table(self.table).select("*").order(
            "created_at", desc=True
        )
        result = await self._execute(query, "select")
        return result.data or []

    async def insert(self, row: Dict[str, Any]) -> Dict[str, Any]:
        query = self.client.table(self.table).insert(row)
        result = await self._execute(query, "insert")

        if not result.data:
            raise RemoteStoreError("Aucune ligne retournée après l'ajout")
        return result.data[0]

    async def update(self, club_id: str, fields: Dict[str, Any]) -> Dict[str, Any]:
        query = self.client.table(self.table).update(fields).eq("id", club_id)
        result = await self._execute(query, "update")

        # 0행 갱신은 오류로 취급
        if not result.data:
            raise ClubNotFoundError(club_id)
        return result.data[0]

    async def delete(self, club_id: str) -> None:
        query = self.client.table(self.table).delete().eq("id", club_id)
        await self._execute(query, "delete")
