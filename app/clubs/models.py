"""
Club Registry Models

Pydantic 모델 정의
"""

from datetime import datetime
from typing import Optional, List
from pydantic import BaseModel, Field, field_validator


# =============================================
# Club
# =============================================

class Club(BaseModel):
    """참가 클럽 (clubs 테이블 행)"""
    id: str
    name: str
    adherents: int = Field(default=0, ge=0)  # 참석 회원 수
    location: str                              # 헌혈 장소
    created_at: datetime
    updated_at: datetime


class ClubCreate(BaseModel):
    """클럽 등록 요청"""
    name: str = Field(..., max_length=200)
    adherents: int = Field(default=0, ge=0)
    location: str = Field(..., max_length=200)

    @field_validator('name', 'location')
    @classmethod
    def strip_required(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError('Ce champ est obligatoire')
        return v


class AdherentCount(BaseModel):
    """참석 인원 직접 지정 (음수는 0으로 저장)"""
    adherents: int


class AdherentStep(BaseModel):
    """참석 인원 증감 (+1 / -1 버튼)"""
    delta: int = Field(..., description="현재 캐시된 인원에 더할 값")


# =============================================
# Results / Aggregates
# =============================================

class ClubResult(BaseModel):
    """레지스트리 작업 결과"""
    success: bool
    data: Optional[Club] = None
    error: Optional[str] = None
    not_found: bool = False  # 캐시에 없는 클럽 (저장소 호출 안 함)


class ClubSummary(BaseModel):
    """집계 (렌더링마다 재계산)"""
    total_clubs: int = 0
    total_adherents: int = 0
    distinct_locations: int = 0


class ClubListResponse(BaseModel):
    """목록 응답"""
    clubs: List[Club] = []
    loading: bool = False
    error: Optional[str] = None
    summary: ClubSummary
