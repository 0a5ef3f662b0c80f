"""
Exception taxonomy for the submission pipeline.

Each error carries the message shown to the visitor (``user_message``) and
the component that raised it.
"""

from typing import Optional


class LeadCaptureError(Exception):
    """Base error raised by services"""

    default_message = "Failed to submit form. Please try again."

    def __init__(self, message: Optional[str] = None, component: str = "unknown"):
        self.user_message = message or self.default_message
        self.component = component
        super().__init__(self.user_message)

    def __str__(self) -> str:
        return f"[{self.component}] {self.user_message}"


class UploadError(LeadCaptureError):
    """Object store rejected the resume upload"""

    default_message = "Failed to upload resume."


class PersistenceError(LeadCaptureError):
    """Insert or update of the user record failed"""

    UPDATE_MESSAGE = "Failed to update user information."
    INSERT_MESSAGE = "Failed to create user record."

    default_message = INSERT_MESSAGE


class SubmissionError(LeadCaptureError):
    """Automation webhook answered with a non-2xx status"""

    default_message = "Failed to submit form. Please try again."
