"""
Supabase 데이터베이스 클라이언트
"""
from typing import Optional
from supabase import acreate_client, AsyncClient
from loguru import logger

from app.config import SupabaseConfig, supabase_config


async def create_supabase_client(config: Optional[SupabaseConfig] = None) -> AsyncClient:
    """
    Supabase 비동기 클라이언트 생성

    자격 증명이 없으면 ValueError (서버 시작 전 실패)
    """
    config = config or supabase_config
    config.require_credentials()

    client = await acreate_client(config.supabase_url, config.supabase_key)
    logger.info(f"Supabase 클라이언트 생성: {config.supabase_url}")
    return client
