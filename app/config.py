"""
Configuration Management

Centralized configuration management using environment variables
with proper validation and type safety.
"""

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv


# Load environment variables from .env in project root (resolve to absolute path)
_backend_root = Path(__file__).resolve().parent.parent
_env_path = _backend_root / ".env"
if _env_path.exists():
    load_dotenv(dotenv_path=str(_env_path))
else:
    # Also load from current working directory so "python backend_server.py" picks up .env
    load_dotenv()


DEFAULT_AUTOMATION_WEBHOOK_URL = "https://hook.us2.make.com/jjhmnebnzka3c44zkan5094v9wfjcmh7"


@dataclass
class SupabaseConfig:
    """Supabase project configuration"""
    url: str
    anon_key: str
    bucket: str = "resumes"
    folder: str = "public"
    table: str = "users"


@dataclass
class WebhookConfig:
    """Outbound automation webhook"""
    url: str = DEFAULT_AUTOMATION_WEBHOOK_URL


@dataclass
class ServerConfig:
    """HTTP server configuration"""
    host: str
    port: int
    frontend_url: str = ""


@dataclass
class RelayConfig:
    """Standalone upload relay configuration"""
    host: str
    port: int
    upload_dir: Path

    @classmethod
    def from_env(cls) -> "RelayConfig":
        """
        Create relay configuration from environment variables.

        The relay never talks to Supabase, so it does not require credentials.
        """
        upload_dir = os.getenv("UPLOAD_DIR") or str(_backend_root / "uploads")
        return cls(
            host=os.getenv("HOST", "0.0.0.0"),
            port=int(os.getenv("PORT", "3000")),
            upload_dir=Path(upload_dir),
        )


@dataclass
class Config:
    """Main application configuration"""

    # Supabase (storage + users table)
    supabase: SupabaseConfig

    # Automation webhook
    webhook: WebhookConfig

    # Server configuration
    server: ServerConfig

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    LOG_FORMAT: str = os.getenv(
        "LOG_FORMAT",
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    @classmethod
    def from_env(cls) -> "Config":
        """
        Create configuration from environment variables.

        Returns:
            Configured Config instance

        Raises:
            ValueError: If required environment variables are missing
        """
        supabase_url = os.getenv("SUPABASE_URL")
        supabase_anon_key = os.getenv("SUPABASE_ANON_KEY")

        if not supabase_url or not supabase_anon_key:
            raise ValueError("Missing Supabase environment variables")

        return cls(
            supabase=SupabaseConfig(
                url=supabase_url,
                anon_key=supabase_anon_key,
                bucket=os.getenv("SUPABASE_BUCKET", "resumes"),
                folder=os.getenv("SUPABASE_FOLDER", "public").strip("/"),
                table=os.getenv("SUPABASE_USERS_TABLE", "users"),
            ),
            webhook=WebhookConfig(
                url=os.getenv("AUTOMATION_WEBHOOK_URL") or DEFAULT_AUTOMATION_WEBHOOK_URL,
            ),
            server=ServerConfig(
                host=os.getenv("SERVER_HOST", "0.0.0.0"),
                port=int(os.getenv("SERVER_PORT", "8000")),
                frontend_url=os.getenv("FRONTEND_URL", ""),
            ),
            LOG_LEVEL=os.getenv("LOG_LEVEL", "INFO"),
        )


def get_config() -> Config:
    """
    Get configuration from environment variables.

    Returns:
        Configuration instance
    """
    return Config.from_env()


def get_relay_config() -> RelayConfig:
    return RelayConfig.from_env()
