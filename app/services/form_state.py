"""
Form State

The landing page's transient UI state as an immutable value, with pure
transition functions. Every transition returns a new FormState.
"""

from dataclasses import dataclass, replace
from typing import Optional

from app.utils.job_url import job_url_error


@dataclass(frozen=True)
class FormState:
    name: str = ""
    email: str = ""
    job_url: str = ""
    resume_filename: Optional[str] = None
    is_submitting: bool = False
    success: bool = False
    error: Optional[str] = None
    link_error: Optional[str] = None
    mobile_menu_open: bool = False
    active_tab: int = 0
    is_visible: bool = False


def with_field(state: FormState, field: str, value: str) -> FormState:
    """Set name or email."""
    if field not in ("name", "email"):
        raise ValueError(f"Unknown form field: {field}")
    return replace(state, **{field: value})


def with_job_url(state: FormState, url: str) -> FormState:
    return replace(state, job_url=url, link_error=job_url_error(url))


def with_resume(state: FormState, filename: Optional[str]) -> FormState:
    return replace(state, resume_filename=filename or None)


def can_submit(state: FormState) -> bool:
    return not state.is_submitting and state.link_error is None


def begin_submit(state: FormState) -> FormState:
    return replace(state, is_submitting=True, error=None, success=False)


def submit_succeeded(state: FormState) -> FormState:
    """Success clears the form."""
    return replace(
        state,
        name="",
        email="",
        job_url="",
        resume_filename=None,
        link_error=None,
        is_submitting=False,
        success=True,
        error=None,
    )


def submit_failed(state: FormState, message: str) -> FormState:
    return replace(state, is_submitting=False, success=False, error=message)


def toggle_mobile_menu(state: FormState) -> FormState:
    return replace(state, mobile_menu_open=not state.mobile_menu_open)


def select_tab(state: FormState, index: int) -> FormState:
    return replace(state, active_tab=index)


def mark_visible(state: FormState) -> FormState:
    return replace(state, is_visible=True)
