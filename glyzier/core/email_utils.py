import logging

import httpx

from . import config

logger = logging.getLogger(__name__)


def is_email_configured() -> bool:
    return bool(config.EMAIL_API_URL and config.EMAIL_API_KEY)


async def send_email(to: str, subject: str, body: str) -> bool:
    """
    Send a plain-text email through the configured HTTP provider.

    Returns False when no provider is configured or the provider rejects the
    request; callers decide whether that matters.
    """
    if not is_email_configured():
        logger.warning(f"Email provider not configured, not sending '{subject}' to {to}")
        return False

    payload = {
        "from": {"email": config.EMAIL_FROM},
        "personalizations": [{"to": [{"email": to}], "subject": subject}],
        "content": [{"type": "text/plain", "value": body}],
    }
    headers = {
        "Authorization": f"Bearer {config.EMAIL_API_KEY}",
        "Content-Type": "application/json",
    }
    try:
        async with httpx.AsyncClient(timeout=config.EMAIL_HTTP_TIMEOUT) as client:
            response = await client.post(config.EMAIL_API_URL, json=payload, headers=headers)
        response.raise_for_status()
        logger.info(f"Email '{subject}' sent to {to}")
        return True
    except httpx.HTTPError as e:
        logger.error(f"Failed to send email to {to}: {str(e)}")
        return False


async def send_password_reset_code(to: str, code: str) -> bool:
    # The code is always logged so development setups work without a provider
    logger.info(f"Password reset code for {to}: {code} (expires in {config.RESET_CODE_EXPIRE_MINUTES} minutes)")
    body = (
        "Hello,\n\n"
        f"Your Glyzier password reset code is: {code}\n\n"
        f"This code expires in {config.RESET_CODE_EXPIRE_MINUTES} minutes. "
        "If you did not request a password reset, you can ignore this email.\n\n"
        "The Glyzier team"
    )
    return await send_email(to, "Glyzier password reset code", body)
