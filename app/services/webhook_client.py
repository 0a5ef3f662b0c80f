"""
Automation Webhook Client

Forwards a submission to the external automation endpoint as a
multipart/form-data POST.
"""

from typing import Optional

import httpx

from app.config import Config
from app.schemas.submission import Submission
from app.utils.logger import get_logger
from app.utils.exceptions import SubmissionError

logger = get_logger(__name__)


class WebhookClient:
    """Posts submissions to the automation webhook"""

    def __init__(self, config: Config, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.config = config
        self.url = config.webhook.url
        self._transport = transport

    async def forward(self, submission: Submission) -> httpx.Response:
        """
        Send all fields plus the raw resume file.

        Raises:
            SubmissionError: If the webhook answers with a non-2xx status
            httpx.RequestError: If the endpoint cannot be reached
        """
        # Text fields go in as filename-less parts so the body is always
        # multipart, with or without a resume.
        parts = [
            ("name", (None, submission.name)),
            ("email", (None, submission.email)),
            ("linkedinUrl", (None, submission.job_url)),
        ]
        if submission.resume is not None:
            resume = submission.resume
            parts.append((
                "resume",
                (resume.filename, resume.content, resume.content_type or "application/octet-stream"),
            ))

        async with httpx.AsyncClient(transport=self._transport) as client:
            response = await client.post(self.url, files=parts)

        if not response.is_success:
            logger.error(
                f"[WebhookClient] Automation webhook error: {response.status_code} - {response.text[:200]}"
            )
            raise SubmissionError(component="WebhookClient")

        logger.info(f"[WebhookClient] Submission for {submission.email} accepted ({response.status_code})")
        return response
