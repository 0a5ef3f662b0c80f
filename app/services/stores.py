"""
Storage Capabilities

Two narrow interfaces the submission pipeline depends on, plus their
Supabase-backed implementations:

- ObjectStore: put a file under a key, resolve its public URL
- RecordStore: find / insert / update user rows keyed by email, and upsert
"""

from abc import ABC, abstractmethod
from typing import Optional, Dict, Any

from supabase import Client

from app.config import Config
from app.db.supabase import get_supabase
from app.utils.logger import get_logger, log_supabase_error
from app.utils.exceptions import UploadError, PersistenceError

logger = get_logger(__name__)


class ObjectStore(ABC):
    """Write-once file storage with public URLs"""

    @abstractmethod
    def put(self, key: str, content: bytes, content_type: Optional[str] = None) -> None:
        """Store ``content`` under ``key``. Raises UploadError on failure."""

    @abstractmethod
    def public_url(self, key: str) -> str:
        """Public URL for a stored key."""


class RecordStore(ABC):
    """User records keyed by a unique field (email)"""

    key_field = "email"

    @abstractmethod
    def find_by_key(self, key: str) -> Optional[Dict[str, Any]]:
        """Return the record for ``key`` or None. Never raises for zero rows."""

    @abstractmethod
    def insert(self, record: Dict[str, Any]) -> None:
        """Insert a new record. Raises PersistenceError on failure."""

    @abstractmethod
    def update(self, key: str, fields: Dict[str, Any]) -> None:
        """Overwrite ``fields`` on the record for ``key``. Raises PersistenceError on failure."""

    def upsert(self, key: str, fields: Dict[str, Any]) -> bool:
        """
        Insert-or-update the record for ``key``.

        A failed lookup is logged and treated as "no record", so the insert
        path runs.

        Returns:
            True if an existing record was updated, False if one was inserted
        """
        try:
            existing = self.find_by_key(key)
        except Exception as e:
            logger.warning(f"[RecordStore] Lookup for {key} failed, treating as new record: {e}")
            existing = None

        if existing:
            self.update(key, fields)
            return True

        self.insert({**fields, self.key_field: key})
        return False


class SupabaseObjectStore(ObjectStore):
    """Supabase Storage bucket"""

    CACHE_CONTROL = "3600"

    def __init__(self, config: Config, client: Optional[Client] = None):
        self.config = config
        self.client = client or get_supabase(config)
        self.bucket = config.supabase.bucket

    def put(self, key: str, content: bytes, content_type: Optional[str] = None) -> None:
        try:
            self.client.storage.from_(self.bucket).upload(
                path=key,
                file=content,
                file_options={
                    "cache-control": self.CACHE_CONTROL,
                    "content-type": content_type or "application/octet-stream",
                    "upsert": "false",
                },
            )
        except Exception as e:
            log_supabase_error(logger, "upload", e)
            raise UploadError(component="SupabaseObjectStore") from e

    def public_url(self, key: str) -> str:
        return self.client.storage.from_(self.bucket).get_public_url(key)


class SupabaseRecordStore(RecordStore):
    """Supabase table of user records"""

    def __init__(self, config: Config, client: Optional[Client] = None):
        self.config = config
        self.client = client or get_supabase(config)
        self.table = config.supabase.table

    def find_by_key(self, key: str) -> Optional[Dict[str, Any]]:
        response = (
            self.client.table(self.table)
            .select("*")
            .eq(self.key_field, key)
            .limit(1)
            .execute()
        )
        return response.data[0] if response.data else None

    def insert(self, record: Dict[str, Any]) -> None:
        try:
            self.client.table(self.table).insert(record).execute()
        except Exception as e:
            log_supabase_error(logger, "insert", e)
            raise PersistenceError(PersistenceError.INSERT_MESSAGE, "SupabaseRecordStore") from e

    def update(self, key: str, fields: Dict[str, Any]) -> None:
        try:
            self.client.table(self.table).update(fields).eq(self.key_field, key).execute()
        except Exception as e:
            log_supabase_error(logger, "update", e)
            raise PersistenceError(PersistenceError.UPDATE_MESSAGE, "SupabaseRecordStore") from e
