import re
from typing import Optional

# Accepts the LinkedIn job URL shapes seen in the wild:
#   https://www.linkedin.com/jobs/view/12345
#   https://linkedin.com/jobs/collections/recommended/?currentJobId=1
#   https://www.linkedin.com/jobs/search/?keywords=python
#   http://linkedin.com/job/some-slug
# Only the prefix is matched, anything after it (query, fragment) is accepted.
LINKEDIN_JOB_URL_RE = re.compile(
    r"^https?://(?:www\.)?linkedin\.com/(?:jobs|job)(?:/(?:view|collections|search))?(?:/[^/]+)?"
)

INVALID_JOB_URL_MESSAGE = (
    "Please enter a valid LinkedIn job URL (e.g., https://www.linkedin.com/jobs/...)"
)


def is_valid_job_url(url: str) -> bool:
    """Return True if ``url`` looks like a LinkedIn job posting link."""
    return LINKEDIN_JOB_URL_RE.match(url) is not None


def job_url_error(url: Optional[str]) -> Optional[str]:
    """
    Error message to show under the link field, or None.

    Empty input never shows an error; the field's ``required`` attribute
    covers that case.
    """
    if url and not is_valid_job_url(url):
        return INVALID_JOB_URL_MESSAGE
    return None
