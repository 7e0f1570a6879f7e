"""
Club Registry

clubs 테이블의 메모리 사본과 원격 저장소 동기화
- 모든 변경은 서버 확인 후에만 로컬 상태에 반영
- 실패는 예외 대신 ClubResult로 반환하고 error 슬롯에 기록
"""

from datetime import datetime, timezone
from typing import List, Optional

from loguru import logger

from .models import Club, ClubResult, ClubSummary
from .store import ClubStore, RemoteStoreError


LOAD_ERROR = "Erreur lors du chargement"
ADD_ERROR = "Erreur lors de l'ajout"
UPDATE_ERROR = "Erreur lors de la mise à jour"
DELETE_ERROR = "Erreur lors de la suppression"


def _error_message(exc: Exception, default: str) -> str:
    """저장소 오류만 메시지를 그대로 노출, 나머지는 작업별 기본 메시지"""
    if isinstance(exc, RemoteStoreError):
        return exc.message or default
    return default


class ClubRegistry:
    """참가 클럽 레지스트리"""

    def __init__(self, store: ClubStore):
        self.store = store
        self.clubs: List[Club] = []
        self.loading: bool = True
        self.error: Optional[str] = None

    # =============================================
    # 조회
    # =============================================

    async def load(self) -> None:
        """전체 클럽 다시 읽기 (created_at 내림차순)

        실패 시 기존 목록 유지, 자동 재시도 없음
        """
        self.loading = True
        try:
            rows = await self.store.select_all()
            self.clubs = [Club.model_validate(row) for row in rows or []]
            logger.info(f"클럽 {len(self.clubs)}개 로드")
        except Exception as e:
            self.error = _error_message(e, LOAD_ERROR)
            logger.error(f"클럽 로드 오류: {e}")
        finally:
            self.loading = False

    def find(self, club_id: str) -> Optional[Club]:
        for club in self.clubs:
            if club.id == club_id:
                return club
        return None

    def summary(self) -> ClubSummary:
        """총 클럽 수, 총 참석 인원, 장소 수"""
        return ClubSummary(
            total_clubs=len(self.clubs),
            total_adherents=sum(club.adherents for club in self.clubs),
            distinct_locations=len({club.location for club in self.clubs}),
        )

    def clear_error(self) -> None:
        self.error = None

    # =============================================
    # 변경
    # =============================================

    async def add(self, name: str, adherents: int, location: str) -> ClubResult:
        """클럽 등록, 서버가 돌려준 행을 목록 맨 앞에 추가"""
        try:
            row = await self.store.insert({
                "name": name.strip(),
                "adherents": max(0, int(adherents)),
                "location": location.strip(),
            })
            club = Club.model_validate(row)
        except Exception as e:
            message = _error_message(e, ADD_ERROR)
            self.error = message
            logger.error(f"클럽 추가 오류: {e}")
            return ClubResult(success=False, error=message)

        # 동시 load() 가 이미 가져온 행이면 교체
        self.clubs = [club] + [c for c in self.clubs if c.id != club.id]
        logger.info(f"클럽 추가: {club.name} ({club.adherents}명, {club.location})")
        return ClubResult(success=True, data=club)

    async def adjust_count(self, club_id: str, new_count: int) -> ClubResult:
        """참석 인원 저장 (0 미만은 0으로)

        호출자가 계산한 값을 그대로 쓰므로 동시 클릭 시 마지막 응답이 이김
        """
        try:
            row = await self.store.update(club_id, {
                "adherents": max(0, int(new_count)),
                "updated_at": datetime.now(timezone.utc).isoformat(),
            })
            updated = Club.model_validate(row)
        except Exception as e:
            message = _error_message(e, UPDATE_ERROR)
            self.error = message
            logger.error(f"참석 인원 갱신 오류 ({club_id}): {e}")
            return ClubResult(success=False, error=message)

        self.clubs = [
            club.model_copy(update={
                "adherents": updated.adherents,
                "updated_at": updated.updated_at,
            }) if club.id == club_id else club
            for club in self.clubs
        ]
        logger.debug(f"참석 인원 갱신: {club_id} -> {updated.adherents}")
        return ClubResult(success=True, data=updated)

    async def adjust_by(self, club_id: str, delta: int) -> ClubResult:
        """캐시된 인원 기준 증감"""
        club = self.find(club_id)
        if club is None:
            return ClubResult(success=False, error=f"Club introuvable: {club_id}", not_found=True)
        return await self.adjust_count(club_id, club.adherents + delta)

    async def remove(self, club_id: str) -> ClubResult:
        """클럽 삭제 (로컬에 없으면 목록 변화 없음)"""
        try:
            await self.store.delete(club_id)
        except Exception as e:
            message = _error_message(e, DELETE_ERROR)
            self.error = message
            logger.error(f"클럽 삭제 오류 ({club_id}): {e}")
            return ClubResult(success=False, error=message)

        self.clubs = [club for club in self.clubs if club.id != club_id]
        logger.info(f"클럽 삭제: {club_id}")
        return ClubResult(success=True)
