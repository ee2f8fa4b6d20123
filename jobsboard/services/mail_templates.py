# jobsboard/services/mail_templates.py
"""(subject, html content) pairs for every notification the board sends."""

SIGNATURE = """
<p>Best regards,</p>
<p>CSESoc Jobs Board Administrator</p>
"""


def company_registered(oversight_address: str):
    return (
        "Thank you for adding your company to the CSESoc Jobs Board",
        f"""
Thank you for registering your company with the CSESoc Jobs Board. We really appreciate your time and are looking forward to working with you to share amazing opportunities with our students.
<br>
Please contact our executive committee at <a href="mailto:{oversight_address}">{oversight_address}</a> to verify your company account.
<br>
{SIGNATURE}""",
    )


def company_verified(company_name: str):
    return (
        "CSESoc Jobs Board - Your company account has been verified",
        f"""
Your company account for {company_name} has been verified. You can now add job posts to the CSESoc Jobs Board.
<br>
{SIGNATURE}""",
    )


def job_submitted(role: str):
    return (
        "CSESoc Jobs Board - Job Post request submitted",
        f"""
Thank you for adding a job post ({role}) to the CSESoc Jobs Board. As part of our aim to ensure student safety, we check all job posting requests to ensure they follow our guidelines, as the safety of our students is our utmost priority.
<br>
A result will be sent to you shortly.
<br>
{SIGNATURE}""",
    )


def job_approved(role: str):
    return (
        "CSESoc Jobs Board - Job Post request approved",
        f"""
Your job post "{role}" has been approved and is now visible to students.
<br>
{SIGNATURE}""",
    )


def job_rejected(role: str, reason: str | None):
    why = f"<br>Reason: {reason}<br>" if reason else ""
    return (
        "CSESoc Jobs Board - Job Post request rejected",
        f"""
Unfortunately your job post "{role}" did not meet our guidelines and has been rejected.
{why}
Please contact us if you believe this was a mistake.
<br>
{SIGNATURE}""",
    )


def password_reset(token: str, expires_minutes: int):
    return (
        "CSESoc Jobs Board - Password reset request",
        f"""
A password reset was requested for your account. Use the following token to set a new password within {expires_minutes} minutes:
<br>
<code>{token}</code>
<br>
If you did not request this, you can ignore this email.
<br>
{SIGNATURE}""",
    )


def test_mail():
    return ("Scheduled emailing", "Message contents.")
