"""SMTP 메일 발송 (aiosmtplib).

Outgoing mail. Delivery is disabled until ``SMTP_HOST`` and ``SMTP_USER``
are configured; port 465 uses implicit TLS, any other port STARTTLS.
"""

import logging
from email.message import EmailMessage
from email.utils import formataddr

import aiosmtplib

from greencity.config import settings

logger = logging.getLogger(__name__)

_IMPLICIT_TLS_PORT: int = 465


def is_email_enabled() -> bool:
    return bool(settings.SMTP_HOST and settings.SMTP_USER)


def build_message(to: str, subject: str, html: str, text: str | None = None) -> EmailMessage:
    """텍스트 + HTML 대체 본문을 가진 메시지를 만듭니다."""
    message = EmailMessage()
    message["Subject"] = subject
    message["From"] = formataddr((settings.SMTP_FROM_NAME, settings.SMTP_FROM_EMAIL or settings.SMTP_USER))
    message["To"] = to
    message.set_content(text or "This message requires an HTML-capable mail client.")
    message.add_alternative(html, subtype="html")
    return message


async def send_email(to: str, subject: str, html: str, text: str | None = None) -> None:
    """메일을 발송합니다. SMTP 미설정 시 아무것도 하지 않습니다.

    Raises:
        aiosmtplib.SMTPException: SMTP 서버 오류 (Server rejected the message)
        OSError: 연결 실패 (Connection failure)
    """
    if not is_email_enabled():
        logger.debug("SMTP not configured, skipping mail to %s", to)
        return

    implicit_tls: bool = settings.SMTP_PORT == _IMPLICIT_TLS_PORT
    await aiosmtplib.send(
        build_message(to, subject, html, text),
        hostname=settings.SMTP_HOST,
        port=settings.SMTP_PORT,
        username=settings.SMTP_USER,
        password=settings.SMTP_PASSWORD,
        use_tls=implicit_tls,
        start_tls=not implicit_tls,
        timeout=settings.SMTP_TIMEOUT,
    )
    logger.info("Mail '%s' sent to %s", subject, to)
