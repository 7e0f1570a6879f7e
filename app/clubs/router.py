"""
Club Registry Router

참가 클럽 등록/인원 관리 API
"""

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status

from .models import (
    AdherentCount,
    AdherentStep,
    Club,
    ClubCreate,
    ClubListResponse,
    ClubResult,
    ClubSummary,
)
from .registry import ClubRegistry

router = APIRouter(prefix="/clubs", tags=["Clubs"])


def get_registry(request: Request) -> ClubRegistry:
    registry = getattr(request.app.state, "registry", None)
    if registry is None:
        raise HTTPException(status_code=503, detail="레지스트리가 초기화되지 않았습니다")
    return registry


def _list_response(registry: ClubRegistry) -> ClubListResponse:
    return ClubListResponse(
        clubs=registry.clubs,
        loading=registry.loading,
        error=registry.error,
        summary=registry.summary(),
    )


def _raise_on_failure(result: ClubResult) -> None:
    if not result.success:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=result.error)


# =============================================
# 조회
# =============================================

@router.get("", response_model=ClubListResponse)
async def list_clubs(registry: ClubRegistry = Depends(get_registry)):
    """클럽 목록 + 집계 + 오류 배너"""
    return _list_response(registry)


@router.get("/summary", response_model=ClubSummary)
async def get_summary(registry: ClubRegistry = Depends(get_registry)):
    return registry.summary()


@router.post("/reload", response_model=ClubListResponse)
async def reload_clubs(registry: ClubRegistry = Depends(get_registry)):
    """오류 배너의 재시도 버튼"""
    await registry.load()
    return _list_response(registry)


@router.delete("/error", status_code=status.HTTP_204_NO_CONTENT)
async def dismiss_error(registry: ClubRegistry = Depends(get_registry)):
    registry.clear_error()
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# =============================================
# 변경
# =============================================

@router.post("", response_model=Club, status_code=status.HTTP_201_CREATED)
async def create_club(
    payload: ClubCreate,
    registry: ClubRegistry = Depends(get_registry)
):
    """클럽 등록"""
    result = await registry.add(payload.name, payload.adherents, payload.location)
    _raise_on_failure(result)
    return result.data


@router.put("/{club_id}/adherents", response_model=Club)
async def set_adherents(
    club_id: str,
    payload: AdherentCount,
    registry: ClubRegistry = Depends(get_registry)
):
    """참석 인원 직접 지정"""
    result = await registry.adjust_count(club_id, payload.adherents)
    _raise_on_failure(result)
    return result.data


@router.post("/{club_id}/adherents/step", response_model=Club)
async def step_adherents(
    club_id: str,
    payload: AdherentStep,
    registry: ClubRegistry = Depends(get_registry)
):
    """참석 인원 +/- (캐시된 값 기준)"""
    result = await registry.adjust_by(club_id, payload.delta)
    if result.not_found:
        raise HTTPException(status_code=404, detail="클럽을 찾을 수 없습니다")
    _raise_on_failure(result)
    return result.data


@router.delete("/{club_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_club(
    club_id: str,
    registry: ClubRegistry = Depends(get_registry)
):
    """클럽 삭제"""
    result = await registry.remove(club_id)
    _raise_on_failure(result)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
