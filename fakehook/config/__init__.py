from .config import BaseConfig, FakehookConfig
