"""
Landing page rendering.

The markup lives in ``templates/landing.html``; this module holds the page
copy and renders the template for a FormState.
"""

from pathlib import Path
from typing import List, Tuple

from fastapi import Request
from fastapi.templating import Jinja2Templates

from app.services.form_state import FormState

BRAND = "ResumeEdge"

STEPS: List[Tuple[str, str, str]] = [
    (
        "01",
        "Upload Your Resume",
        "Upload your current resume in PDF format. Our AI analyzes its content and structure for optimization.",
    ),
    (
        "02",
        "Add Job URL",
        "Paste the LinkedIn job posting URL. Our advanced AI matches your profile with job requirements.",
    ),
    (
        "03",
        "Receive Your Package",
        "Get your tailored resume and cover letter, optimized for ATS systems and hiring managers.",
    ),
]

FEATURES: List[Tuple[str, str]] = [
    ("AI-Powered Optimization", "Our advanced AI analyzes job descriptions to highlight your most relevant skills and experience."),
    ("ATS-Friendly Formatting", "Ensure your resume passes through Applicant Tracking Systems with optimized formatting."),
    ("Keyword Analysis", "Identify and incorporate industry-specific keywords that hiring managers are looking for."),
    ("Industry-Specific Templates", "Choose from templates designed for your specific industry to maximize impact."),
    ("24/7 Instant Generation", "Get your optimized resume in minutes, any time of day or night."),
    ("Professional Phrasing", "Transform your experience with powerful, professional language that impresses employers."),
]

SUCCESS_MESSAGE = "Check your email for your customized resume and cover letter."

templates = Jinja2Templates(directory=str(Path(__file__).resolve().parent / "templates"))


def render_landing_page(request: Request, state: FormState, status_code: int = 200):
    """TemplateResponse for the landing page in ``state``."""
    return templates.TemplateResponse(
        request,
        "landing.html",
        {
            "state": state,
            "brand": BRAND,
            "steps": STEPS,
            "features": FEATURES,
            "success_message": SUCCESS_MESSAGE,
        },
        status_code=status_code,
    )
