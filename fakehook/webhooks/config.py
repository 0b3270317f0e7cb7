from typing import Optional

from pydantic.v1 import BaseSettings, Extra

from .enums import WebhookProvider


class Config(BaseSettings):
    WEBHOOK_PROVIDER: WebhookProvider = WebhookProvider.webhook_site
    WEBHOOK_TIMEOUT: float = 10.0

    class Config:
        extra = Extra.ignore


class HttpWebhookConfig(Config):
    WEBHOOK_URL: str


class WebhookSiteConfig(Config):
    WEBHOOK_SITE_BASE_URL: str = 'https://webhook.site'
    WEBHOOK_SITE_TOKEN: Optional[str] = None
    WEBHOOK_SITE_API_KEY: Optional[str] = None

    @property
    def BASE_URL(self) -> str:
        return self.WEBHOOK_SITE_BASE_URL.rstrip('/')

    @property
    def WEBHOOK_URL(self) -> str:
        if not self.WEBHOOK_SITE_TOKEN:
            raise ValueError('WEBHOOK_SITE_TOKEN is not set. Create a token first.')
        return f'{self.BASE_URL}/{self.WEBHOOK_SITE_TOKEN}'
