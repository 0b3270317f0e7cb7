from .config import Config, HttpWebhookConfig, WebhookSiteConfig
from .base import WebhookService, WebhookError
from .http import HttpWebhookService
from .webhook_site import WebhookSiteService
from .factory import webhook_service_factory, WebhookServiceFactory
from .enums import WebhookProvider


__all__ = [
    "Config",
    "HttpWebhookConfig",
    "WebhookSiteConfig",
    "WebhookService",
    "WebhookError",
    "HttpWebhookService",
    "WebhookSiteService",
    "webhook_service_factory",
    "WebhookServiceFactory",
    "WebhookProvider"
]
