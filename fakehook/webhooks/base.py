import json
import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Iterable, Optional

import requests

from fakehook.models import Model

from .config import Config

logger = logging.getLogger(__name__)

JSON_HEADERS = {
    'Content-Type': 'application/json',
    'Accept': 'application/json',
}


class WebhookError(RuntimeError):
    """
    Raised when a webhook request cannot be delivered or is rejected.

    Attributes:
        url (str): The URL the request was sent to.
        status_code (int): HTTP status of the response, None when no response was received.
    """

    def __init__(self, message: str, url: Optional[str] = None, status_code: Optional[int] = None):
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class WebhookService(ABC):
    """
        Base class for webhook providers
    """
    config: Config

    def __call__(self, config: Config, *args, **kwargs):
        self.config = config
        return self

    @abstractmethod
    def send(self, payload: Any) -> requests.Response:
        """
        POSTs a JSON payload to the webhook
        """
        raise NotImplementedError

    def send_models(self, models: Iterable[Model]) -> requests.Response:
        """
        Serializes models into a JSON array and POSTs it in a single request.
        """
        body = json.dumps([model.as_dict() for model in models])
        return self.send(body)

    def _request(self, method: str, url: str, headers: Optional[Dict] = None, **kwargs) -> requests.Response:
        all_headers = {**JSON_HEADERS, **(headers or {})}
        try:
            response = requests.request(method, url, headers=all_headers, timeout=self.config.WEBHOOK_TIMEOUT, **kwargs)
        except requests.RequestException as e:
            logger.error("%s %s failed: %s", method, url, e)
            raise WebhookError(f'{method} {url} failed: {e}', url=url) from e

        if response.status_code >= 400:
            logger.error("%s %s returned HTTP %s: %s", method, url, response.status_code, response.text[:200])
            raise WebhookError(
                f'{method} {url} returned HTTP {response.status_code}',
                url=url,
                status_code=response.status_code
            )

        logger.debug("%s %s returned HTTP %s", method, url, response.status_code)
        return response

    def _decode_json(self, response: requests.Response) -> Any:
        try:
            return response.json()
        except requests.JSONDecodeError as e:
            logger.error("%s returned a body that is not JSON: %s", response.url, e)
            raise WebhookError(
                f'{response.url} returned a body that is not JSON',
                url=response.url,
                status_code=response.status_code
            ) from e

    def _post(self, url: str, payload: Any, headers: Optional[Dict] = None) -> requests.Response:
        # Pre-serialized JSON goes out as-is
        if isinstance(payload, (str, bytes)):
            return self._request('POST', url, headers=headers, data=payload)
        return self._request('POST', url, headers=headers, json=payload)
