"""Candidate notification emails sent through the Resend HTTP API."""

import html
import logging
import httpx
from app.settings import settings
from app.utils import is_valid_email

RESEND_ENDPOINT = "https://api.resend.com/emails"

logger = logging.getLogger(__name__)


class EmailError(Exception):
    pass


def build_confirmation_html(candidate_name: str, job_title: str, company_name: str) -> str:
    """Render the thank-you body sent after an application is received."""
    candidate_name, job_title, company_name = (html.escape(v) for v in (candidate_name, job_title, company_name))
    return f"""
<h2>Thank you for applying!</h2>
<p>Hi {candidate_name},</p>
<p>We have received your application for the <strong>{job_title}</strong> position at <strong>{company_name}</strong>.</p>
<p>Our team will review your application and get back to you within 5-7 business days.</p>
<p>Best regards,<br/>The {company_name} Team</p>
"""


async def send_application_confirmation_email(
    candidate_email: str,
    candidate_name: str,
    job_title: str,
    company_name: str,
    api_key: str | None = None,
    client: httpx.AsyncClient | None = None,
) -> None:
    """Send the application confirmation email to a candidate.

    Missing configuration and malformed addresses are logged and skipped
    rather than raised, so a submitted application never fails because of
    its notification.

    Args:
        candidate_email: Address the candidate entered on the form.
        candidate_name: Full name used in the greeting.
        job_title: Title of the job applied to.
        company_name: Company shown in the subject and signature.
        api_key: Resend API key, defaults to ``settings.resend_api_key``.
        client: Optional HTTP client, mainly for tests.

    Raises:
        EmailError: If Resend answers with a non-2xx status.
    """
    api_key = api_key or settings.resend_api_key
    if not api_key:
        logger.error("RESEND_API_KEY is not configured")
        return
    if not is_valid_email(candidate_email):
        logger.error("Invalid candidate email format: %r", candidate_email)
        return

    logger.info("Sending confirmation email to=%s job=%s", candidate_email.strip(), job_title)
    headers = {
        "Content-Type": "application/json",
        "Authorization": f"Bearer {api_key}",
    }
    payload = {
        "from": settings.email_from,
        "to": candidate_email.strip(),
        "subject": f"Application Received - {job_title} at {company_name}",
        "html": build_confirmation_html(candidate_name, job_title, company_name),
    }

    if client is None:
        async with httpx.AsyncClient(timeout=settings.email_timeout) as c:
            r = await c.post(RESEND_ENDPOINT, headers=headers, json=payload)
    else:
        r = await client.post(RESEND_ENDPOINT, headers=headers, json=payload)

    if r.is_error:
        raise EmailError(f"Email API error: {r.status_code} {r.text}")
