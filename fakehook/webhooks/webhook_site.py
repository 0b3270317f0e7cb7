import logging
from typing import Any, Dict, List, Optional

import requests

from .base import WebhookService
from .config import WebhookSiteConfig

logger = logging.getLogger(__name__)


class WebhookSiteService(WebhookService):
    """
    Sends payloads to a webhook.site capture URL and reads back what it received.
    """
    config: WebhookSiteConfig

    def __call__(self, config: WebhookSiteConfig, *args, **kwargs):
        super().__call__(config)
        self.base_url = self.config.BASE_URL
        return self

    @property
    def token(self) -> Optional[str]:
        return self.config.WEBHOOK_SITE_TOKEN

    @property
    def url(self) -> str:
        return self.config.WEBHOOK_URL

    def create_token(self) -> str:
        response = self._request('POST', f'{self.base_url}/token', headers=self._auth_headers())
        data = self._decode_json(response)
        self.config.WEBHOOK_SITE_TOKEN = data['uuid']
        logger.info("Created webhook.site token %s", data['uuid'])
        return data['uuid']

    def delete_token(self) -> None:
        self._request('DELETE', self._token_url(), headers=self._auth_headers())
        logger.info("Deleted webhook.site token %s", self.token)
        self.config.WEBHOOK_SITE_TOKEN = None

    def send(self, payload: Any) -> requests.Response:
        return self._post(self.url, payload)

    def get_requests(self, sorting: str = 'newest', per_page: int = 50) -> List[Dict]:
        response = self._request(
            'GET',
            f'{self._token_url()}/requests',
            headers=self._auth_headers(),
            params={'sorting': sorting, 'per_page': per_page}
        )
        return self._decode_json(response).get('data', [])

    def get_latest_request(self) -> Optional[Dict]:
        captured = self.get_requests(sorting='newest', per_page=1)
        return captured[0] if captured else None

    def _token_url(self) -> str:
        if not self.token:
            raise ValueError('WEBHOOK_SITE_TOKEN is not set. Create a token first.')
        return f'{self.base_url}/token/{self.token}'

    def _auth_headers(self) -> Dict:
        if self.config.WEBHOOK_SITE_API_KEY:
            return {'Api-Key': self.config.WEBHOOK_SITE_API_KEY}
        return {}
