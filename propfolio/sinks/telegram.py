"""Telegram Bot API sink for alert delivery."""

import logging

import requests

from propfolio.config import TelegramConfig
from propfolio.exceptions import NotificationError
from propfolio.models.base import Event

logger = logging.getLogger(__name__)


class TelegramSink:
    """Send alert messages to a single Telegram chat."""

    def __init__(self, config: TelegramConfig, session: requests.Session | None = None) -> None:
        """Initialize Telegram sink.

        Parameters
        ----------
        config : TelegramConfig
            Bot token, chat id and request settings.
        session : requests.Session | None
            Optional session to reuse connections.
        """
        self.config = config
        self.session = session or requests.Session()
        self.sent = 0

    def send_message(self, text: str) -> dict:
        """Post ``text`` to the configured chat and return the API response."""
        if not self.config.chat_id or not text or not self.config.bot_token:
            raise NotificationError("Missing Telegram chat ID, message, or bot token")

        url = f"{self.config.api_base_url}/bot{self.config.bot_token}/sendMessage"
        try:
            response = self.session.post(
                url,
                json={"chat_id": self.config.chat_id, "text": text},
                timeout=self.config.timeout_seconds,
            )
        except requests.RequestException as exc:
            raise NotificationError(f"Telegram request failed: {exc}") from exc

        if not response.ok:
            raise NotificationError(f"Telegram API error ({response.status_code}): {response.text}")

        self.sent += 1
        logger.debug("Telegram message delivered to chat %s", self.config.chat_id)
        return response.json()

    def notify(self, event: Event) -> None:
        """Deliver an alert event's message."""
        self.send_message(event.message)

    def close(self) -> None:
        self.session.close()
        logger.info("Telegram sink closed: sent=%d", self.sent)
