from typing import Type, Dict, Tuple

from .enums import WebhookProvider
from .base import WebhookService
from .http import HttpWebhookService
from .webhook_site import WebhookSiteService
from .config import Config, HttpWebhookConfig, WebhookSiteConfig


class WebhookServiceFactory:
    def __init__(self):
        self._services: Dict[str, Tuple[Type[WebhookService], Type[Config]]] = {}

    def register_service(self, key: WebhookProvider, service: Type[WebhookService], config: Type[Config]):
        self._services[key] = (service, config)

    def _create(self, key: WebhookProvider, **kwargs) -> WebhookService:
        if key not in self._services:
            raise ValueError(f'Unsupported webhook provider: {key}')
        service_class, config_class = self._services[key]

        config = config_class(**kwargs)
        return service_class()(config=config)

    def get(self, **kwargs) -> WebhookService:
        key = Config(**kwargs).WEBHOOK_PROVIDER
        return self._create(key, **kwargs)


webhook_service_factory = WebhookServiceFactory()
webhook_service_factory.register_service(
    key=WebhookProvider.webhook_site, service=WebhookSiteService, config=WebhookSiteConfig)
webhook_service_factory.register_service(
    key=WebhookProvider.http, service=HttpWebhookService, config=HttpWebhookConfig)
