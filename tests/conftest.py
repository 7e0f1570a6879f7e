"""
Pytest configuration and fixtures for Club Registry tests
"""

import asyncio
import pytest
import sys
import uuid
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional, Set

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from app.clubs.registry import ClubRegistry
from app.clubs.store import ClubNotFoundError, RemoteStoreError


class FakeClubStore:
    """메모리 clubs 테이블 (Supabase 대체)"""

    def __init__(self):
        self.rows: List[Dict[str, Any]] = []
        self.failing: Set[str] = set()
        self.failure_message = "Failed to fetch"
        self.calls: List[str] = []
        self._clock = datetime(2024, 6, 14, 9, 0, tzinfo=timezone.utc)

    def _now(self) -> str:
        self._clock += timedelta(seconds=1)
        return self._clock.isoformat()

    async def _check(self, action: str):
        self.calls.append(action)
        await asyncio.sleep(0)
        if action in self.failing:
            raise RemoteStoreError(self.failure_message)

    def seed(self, name: str, adherents: int, location: str) -> Dict[str, Any]:
        now = self._now()
        row = {
            "id": str(uuid.uuid4()),
            "name": name,
            "adherents": adherents,
            "location": location,
            "created_at": now,
            "updated_at": now,
        }
        self.rows.append(row)
        return dict(row)

    def get(self, club_id: str) -> Optional[Dict[str, Any]]:
        for row in self.rows:
            if row["id"] == club_id:
                return row
        return None

    async def select_all(self) -> List[Dict[str, Any]]:
        await self._check("select")
        return [dict(r) for r in sorted(self.rows, key=lambda r: r["created_at"], reverse=True)]

    async def insert(self, row: Dict[str, Any]) -> Dict[str, Any]:
        await self._check("insert")
        return self.seed(row["name"], row.get("adherents", 0), row["location"])

    async def update(self, club_id: str, fields: Dict[str, Any]) -> Dict[str, Any]:
        await self._check("update")
        row = self.get(club_id)
        if row is None:
            raise ClubNotFoundError(club_id)
        row.update(fields)
        return dict(row)

    async def delete(self, club_id: str) -> None:
        await self._check("delete")
        self.rows = [r for r in self.rows if r["id"] != club_id]


@pytest.fixture
def store():
    """빈 가짜 저장소"""
    return FakeClubStore()


@pytest.fixture
def registry(store):
    """가짜 저장소를 쓰는 레지스트리"""
    return ClubRegistry(store)


@pytest.fixture
def sample_clubs(store):
    """Sample clubs (older first)"""
    return [
        store.seed("FC Daoulas", 25, "Salle des Fêtes Daoulas"),
        store.seed("Amicale Laïque Le Faou", 12, "Salle Polyvalente Le Faou"),
        store.seed("Daoulas Basket", 8, "Salle des Fêtes Daoulas"),
    ]
