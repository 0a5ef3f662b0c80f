from typing import Optional

from supabase import create_client, Client

from app.config import Config, get_config
from app.utils.logger import get_logger

logger = get_logger(__name__)

_client: Optional[Client] = None


def get_supabase(config: Optional[Config] = None) -> Client:
    """Return the shared Supabase client, creating it on first use."""
    global _client
    if _client is None:
        config = config or get_config()
        _client = create_client(config.supabase.url, config.supabase.anon_key)
        logger.info(f"[Supabase] Client initialised for {config.supabase.url}")
    return _client
