"""
Submission Service

Runs the lead-capture pipeline for one form submission:

1. upload the resume (if any) to object storage and resolve its public URL
2. upsert the user record keyed by email
3. forward everything to the automation webhook

Steps run strictly in order, once each. The first failure aborts the rest
and is reported as a single message. Nothing is rolled back, so a resume
uploaded before a later failure stays in storage.
"""

from typing import Optional

from starlette.concurrency import run_in_threadpool

from app.config import Config
from app.schemas.submission import ResumeFile, Submission, SubmissionResult
from app.services.stores import ObjectStore, RecordStore
from app.services.webhook_client import WebhookClient
from app.utils.datetime_utils import epoch_millis, get_now_utc
from app.utils.exceptions import LeadCaptureError, SubmissionError, UploadError
from app.utils.logger import get_logger

logger = get_logger(__name__)


class SubmissionService:
    """Orchestrates storage upload, record upsert and webhook forward"""

    def __init__(
        self,
        config: Config,
        object_store: ObjectStore,
        record_store: RecordStore,
        webhook_client: WebhookClient,
    ):
        self.config = config
        self.object_store = object_store
        self.record_store = record_store
        self.webhook_client = webhook_client

    def build_resume_key(self, resume: ResumeFile) -> str:
        """Storage key for a resume: ``<folder>/<epoch-millis>.<ext>``."""
        file_name = f"{epoch_millis()}.{resume.extension}"
        folder = self.config.supabase.folder
        return f"{folder}/{file_name}" if folder else file_name

    def upload_resume(self, resume: ResumeFile) -> str:
        key = self.build_resume_key(resume)
        try:
            self.object_store.put(key, resume.content, resume.content_type)
            public_url = self.object_store.public_url(key)
        except UploadError:
            raise
        except Exception as e:
            logger.error(f"[SubmissionService] Upload error: {e}")
            raise UploadError(component="SubmissionService") from e
        logger.info(f"[SubmissionService] Resume stored as {key}")
        return public_url

    def save_user(self, submission: Submission, resume_url: Optional[str]) -> bool:
        fields = {
            "name": submission.name,
            "linkedin_url": submission.job_url,
            "resume_url": resume_url,
            "updated_at": get_now_utc().isoformat(),
        }
        updated = self.record_store.upsert(submission.email, fields)
        logger.info(
            f"[SubmissionService] {'Updated' if updated else 'Created'} user record for {submission.email}"
        )
        return updated

    async def submit(self, submission: Submission) -> SubmissionResult:
        """
        Run the pipeline and report the outcome.

        Never raises: every failure is turned into ``SubmissionResult(success=False)``
        carrying the message to show the visitor.
        """
        try:
            resume_url = None
            # supabase-py is synchronous, keep it off the event loop
            if submission.resume is not None:
                resume_url = await run_in_threadpool(self.upload_resume, submission.resume)

            updated = await run_in_threadpool(self.save_user, submission, resume_url)

            await self.webhook_client.forward(submission)

            logger.info(f"[SubmissionService] ✅ Submission complete for {submission.email}")
            return SubmissionResult(success=True, resume_url=resume_url, updated_existing=updated)

        except LeadCaptureError as e:
            logger.error(f"[SubmissionService] Form submission error: {e}")
            return SubmissionResult(success=False, error=e.user_message)
        except Exception as e:
            logger.error(f"[SubmissionService] Form submission error: {e}", exc_info=True)
            return SubmissionResult(success=False, error=str(e) or SubmissionError.default_message)
