"""
클럽 등록 서비스 설정
"""
from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings
from dotenv import load_dotenv

load_dotenv()


class SupabaseConfig(BaseSettings):
    """Supabase 설정

    프론트엔드에서 쓰던 VITE_SUPABASE_URL / VITE_SUPABASE_ANON_KEY 도 허용
    """

    supabase_url: str = Field(
        default="",
        validation_alias=AliasChoices("SUPABASE_URL", "VITE_SUPABASE_URL"),
        description="Supabase Project URL"
    )
    supabase_key: str = Field(
        default="",
        validation_alias=AliasChoices("SUPABASE_KEY", "VITE_SUPABASE_ANON_KEY"),
        description="Supabase anon key"
    )

    class Config:
        env_prefix = ""
        case_sensitive = False
        extra = "ignore"

    def require_credentials(self) -> None:
        """URL 또는 키가 비어 있으면 시작 단계에서 중단"""
        missing = []
        if not self.supabase_url:
            missing.append("SUPABASE_URL")
        if not self.supabase_key:
            missing.append("SUPABASE_KEY")
        if missing:
            raise ValueError(
                f"Variables d'environnement Supabase manquantes: {', '.join(missing)}"
            )


class ServerConfig(BaseSettings):
    """서버 설정"""

    host: str = Field(default="0.0.0.0", description="바인드 주소")
    port: int = Field(default=8000, description="포트")
    log_level: str = Field(default="INFO", description="콘솔 로그 레벨")
    log_dir: str = Field(default="logs", description="로그 파일 디렉토리")
    clubs_table: str = Field(default="clubs", description="클럽 테이블명")

    class Config:
        env_prefix = "REGISTRY_"
        case_sensitive = False


# 전역 설정 인스턴스
supabase_config = SupabaseConfig()
server_config = ServerConfig()
