from typing import Optional

from app.config import get_config
from app.services.stores import SupabaseObjectStore, SupabaseRecordStore
from app.services.submission_service import SubmissionService
from app.services.webhook_client import WebhookClient

config = get_config()

_submission_service: Optional[SubmissionService] = None


def get_submission_service() -> SubmissionService:
    """FastAPI dependency. The Supabase client is only created on first use."""
    global _submission_service
    if _submission_service is None:
        _submission_service = SubmissionService(
            config,
            object_store=SupabaseObjectStore(config),
            record_store=SupabaseRecordStore(config),
            webhook_client=WebhookClient(config),
        )
    return _submission_service
