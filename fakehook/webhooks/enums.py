from enum import Enum


class WebhookProvider(str, Enum):
    webhook_site = 'webhook_site'
    http = 'http'

    def __str__(self):
        return str(self.value)
