from typing import Optional

from fastapi import APIRouter, Depends, File, Form, HTTPException, Query, Request, UploadFile, status
from fastapi.responses import HTMLResponse

from app.schemas.submission import (
    JobUrlValidationResponse,
    ResumeFile,
    Submission,
    SubmitResponse,
)
from app.services import form_state
from app.services.container import get_submission_service
from app.services.form_state import FormState
from app.services.submission_service import SubmissionService
from app.utils.job_url import job_url_error
from app.utils.logger import get_logger
from app.web.page import STEPS, render_landing_page

logger = get_logger(__name__)

# Landing page and lead-capture form endpoints
router = APIRouter(tags=["Landing"])


async def _read_resume(resume: Optional[UploadFile]) -> Optional[ResumeFile]:
    # Browsers send an empty, filename-less part when no file was picked
    if resume is None or not resume.filename:
        return None
    content = await resume.read()
    return ResumeFile(filename=resume.filename, content=content, content_type=resume.content_type)


@router.get("/", response_class=HTMLResponse)
async def landing_page(
    request: Request,
    menu: Optional[str] = None,
    step: int = Query(0, ge=0, lt=len(STEPS)),
):
    """
    Serve the marketing page with an empty form.

    ``menu=open`` and ``step`` let the page work without JavaScript: the
    mobile menu toggle and the how-it-works cards link back here.
    """
    state = FormState()
    if menu == "open":
        state = form_state.toggle_mobile_menu(state)
    state = form_state.select_tab(state, step)
    return render_landing_page(request, state)


@router.post("/submit", response_class=HTMLResponse)
async def submit_form(
    request: Request,
    name: str = Form(...),
    email: str = Form(...),
    linkedinUrl: str = Form(...),
    resume: Optional[UploadFile] = File(None),
    service: SubmissionService = Depends(get_submission_service),
):
    """
    Handle a classic form post from the landing page.

    Re-renders the page with the success banner (and a cleared form) or
    the error banner (fields kept).
    """
    resume_file = await _read_resume(resume)

    state = form_state.mark_visible(FormState())
    state = form_state.with_field(state, "name", name)
    state = form_state.with_field(state, "email", email)
    state = form_state.with_job_url(state, linkedinUrl)
    state = form_state.with_resume(state, resume_file.filename if resume_file else None)

    if not form_state.can_submit(state):
        logger.info(f"[API] Rejected submission with invalid job URL: {linkedinUrl}")
        return render_landing_page(request, state, status_code=status.HTTP_400_BAD_REQUEST)

    state = form_state.begin_submit(state)
    result = await service.submit(
        Submission(name=name, email=email, job_url=linkedinUrl, resume=resume_file)
    )
    if result.success:
        state = form_state.submit_succeeded(state)
    else:
        state = form_state.submit_failed(state, result.error)

    return render_landing_page(request, state)


@router.get("/api/validate-job-url", response_model=JobUrlValidationResponse)
async def validate_job_url(url: str = ""):
    """Live validation for the job link field. Empty input is never an error."""
    error = job_url_error(url)
    return JobUrlValidationResponse(valid=error is None, error=error)


@router.post("/api/submissions", response_model=SubmitResponse)
async def create_submission(
    name: str = Form(...),
    email: str = Form(...),
    linkedinUrl: str = Form(...),
    resume: Optional[UploadFile] = File(None),
    service: SubmissionService = Depends(get_submission_service),
):
    """
    Run the submission pipeline and report the outcome as JSON.

    Pipeline failures are reported in the body (``success: false``) rather
    than as HTTP errors, mirroring what the page shows.
    """
    error = job_url_error(linkedinUrl)
    if error:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=error)

    try:
        resume_file = await _read_resume(resume)
        result = await service.submit(
            Submission(name=name, email=email, job_url=linkedinUrl, resume=resume_file)
        )
    except Exception as e:
        error_msg = f"Failed to process submission: {str(e)}"
        logger.error(f"[API] {error_msg}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=error_msg
        )

    return SubmitResponse(success=result.success, error=result.error)
