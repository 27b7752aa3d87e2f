"""장소 알림 서비스 — 상태 변경 시 제안자에게 이메일 발송.

Place notification service. Sends the place author an e-mail when a
moderator changes the place status. Runs as a FastAPI background task,
so a delivery failure is logged and never affects the HTTP response.
"""

import logging
from html import escape

import aiosmtplib

from greencity.models.enums import PlaceStatus
from greencity.utils.email import is_email_enabled, send_email

logger = logging.getLogger(__name__)

_STATUS_MESSAGES: dict[PlaceStatus, str] = {
    PlaceStatus.PROPOSED: "is waiting for moderation",
    PlaceStatus.APPROVED: "was approved and is now visible on the map",
    PlaceStatus.DECLINED: "was declined by a moderator",
    PlaceStatus.DELETED: "was removed",
}


class NotificationService:
    """장소 상태 변경 알림 서비스."""

    def build_message(self, author_name: str, place_name: str, status: PlaceStatus) -> tuple[str, str]:
        """알림 제목과 HTML 본문을 생성합니다.

        Returns:
            tuple[str, str]: (제목, HTML 본문) (Subject and HTML body)
        """
        subject: str = f"GreenCity: status of \"{place_name}\" changed to {status.value}"
        html: str = (
            f"<p>Hello, {escape(author_name)}!</p>"
            f"<p>The place <b>{escape(place_name)}</b> you proposed {_STATUS_MESSAGES[status]}.</p>"
        )
        return subject, html

    async def notify_status_changed(
        self,
        email: str,
        author_name: str,
        place_name: str,
        status: PlaceStatus,
    ) -> None:
        """상태 변경 알림을 발송합니다 (실패 시 경고 로그).

        Send the status-change e-mail; SMTP failures are logged as warnings.
        """
        if not is_email_enabled():
            return
        subject, html = self.build_message(author_name, place_name, status)
        try:
            await send_email(email, subject, html)
        except (aiosmtplib.SMTPException, OSError) as exc:
            logger.warning("Failed to send status mail to %s: %s", email, exc)


notification_service: NotificationService = NotificationService()
