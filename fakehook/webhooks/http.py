from typing import Any

import requests

from .base import WebhookService
from .config import HttpWebhookConfig


class HttpWebhookService(WebhookService):
    config: HttpWebhookConfig

    def send(self, payload: Any) -> requests.Response:
        return self._post(self.config.WEBHOOK_URL, payload)
