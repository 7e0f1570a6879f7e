"""
Club Registry - FastAPI 웹 서버
헌혈 행사 참가 클럽 등록 및 참석 인원 관리

데이터 소스: Supabase clubs 테이블
"""
from typing import Optional

from fastapi import FastAPI
from loguru import logger

from app.config import server_config
from app.clubs import clubs_router, ClubRegistry, SupabaseClubStore
from database.supabase_client import create_supabase_client


def create_app(registry: Optional[ClubRegistry] = None) -> FastAPI:
    """
    FastAPI 앱 생성

    Args:
        registry: 미리 구성된 레지스트리 (없으면 시작 시 Supabase로 구성)
    """
    app = FastAPI(
        title="Club Registry",
        description="Amicale pour le Don de Sang Bénévole - clubs participants",
        version="1.0.0"
    )
    app.state.registry = registry

    # 클럽 라우터 등록
    app.include_router(clubs_router, prefix="/api")

    @app.on_event("startup")
    async def startup_event():
        """서버 시작 시 클럽 목록 로드

        자격 증명이 없으면 ValueError로 시작 중단
        """
        if app.state.registry is None:
            client = await create_supabase_client()
            store = SupabaseClubStore(client, table=server_config.clubs_table)
            app.state.registry = ClubRegistry(store)

        await app.state.registry.load()
        logger.info(f"✅ 서버 시작 완료 - 클럽 {len(app.state.registry.clubs)}개")

    @app.on_event("shutdown")
    async def shutdown_event():
        logger.info("서버 종료됨")

    @app.get("/api/status")
    async def api_status():
        """상태 API"""
        registry = app.state.registry
        return {
            "status": "ok" if registry is not None and registry.error is None else "degraded",
            "table": server_config.clubs_table,
            "clubs": len(registry.clubs) if registry is not None else 0,
        }

    return app
