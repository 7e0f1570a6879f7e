"""
헌혈 행사 참가 클럽 레지스트리 메인
"""
import asyncio
import sys
from pathlib import Path

from loguru import logger

from app.config import server_config, supabase_config
from app.clubs import ClubRegistry, SupabaseClubStore
from database.supabase_client import create_supabase_client


def setup_logging(level: str = "INFO", log_dir: str = "logs") -> None:
    """로깅 설정"""
    logger.remove()
    logger.add(
        sys.stderr,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
        level=level
    )
    logger.add(
        str(Path(log_dir) / "registry_{time:YYYY-MM-DD}.log"),
        rotation="1 day",
        retention="30 days",
        level="DEBUG"
    )


async def print_clubs() -> int:
    """클럽 목록과 집계 출력"""
    client = await create_supabase_client()
    registry = ClubRegistry(SupabaseClubStore(client, table=server_config.clubs_table))
    await registry.load()

    if registry.error:
        logger.error(f"로드 실패: {registry.error}")
        return 1

    print("\n=== Clubs participants ===")
    for club in registry.clubs:
        print(f"  {club.name:<30} {club.adherents:>4}  {club.location}")

    summary = registry.summary()
    print(f"\n  clubs: {summary.total_clubs}")
    print(f"  adhérents présents: {summary.total_adherents}")
    print(f"  lieux de collecte: {summary.distinct_locations}")
    return 0


def main():
    """메인 함수"""
    import argparse

    parser = argparse.ArgumentParser(description="헌혈 행사 참가 클럽 레지스트리")
    parser.add_argument(
        "--mode",
        choices=["serve", "list"],
        default="serve",
        help="실행 모드"
    )
    parser.add_argument("--host", default=server_config.host, help="바인드 주소")
    parser.add_argument("--port", type=int, default=server_config.port, help="포트")

    args = parser.parse_args()

    setup_logging(server_config.log_level, server_config.log_dir)

    # 자격 증명 누락 시 즉시 종료
    try:
        supabase_config.require_credentials()
    except ValueError as e:
        logger.error(str(e))
        sys.exit(1)

    if args.mode == "list":
        sys.exit(asyncio.run(print_clubs()))

    import uvicorn

    uvicorn.run(
        "app.server:create_app",
        factory=True,
        host=args.host,
        port=args.port,
        log_level=server_config.log_level.lower()
    )


if __name__ == "__main__":
    main()
