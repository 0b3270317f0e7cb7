"""
Config class that reads the process environment, optionally seeded from .env files.
"""
import os
import logging
from typing import Dict, List, Optional

from dotenv import load_dotenv, dotenv_values

from fakehook.generators import DEFAULT_LOCALE

logger = logging.getLogger(__name__)

TRUE_VALUES = {'1', 'true', 'yes', 'on'}
DEFAULT_COUNT = 5
WEBHOOK_VAR_PREFIX = 'WEBHOOK_'


class BaseConfig():
    """
    Config class that snapshots the environment after loading a .env file.
    """
    def __init__(self, env_files: Optional[List[str]] = None):
        load_dotenv()
        self.env_vars = {key: os.getenv(key) for key in os.environ}
        for env_file in env_files or []:
            self.load_env_file(env_file)

    def load_env_file(self, env_file: str):
        """
        Merges the values of a dotenv file over the current snapshot
        Args:
            env_file (str) : Path to the dotenv file
        """
        if not os.path.isfile(env_file):
            raise FileNotFoundError(f'{env_file} file not found.')
        self.env_vars.update(dotenv_values(env_file))

    def get_env_vars(self) -> dict:
        """
        Return the dictionary containing all environment variables
        """
        return self.env_vars

    def get_env_var(self, var_name: str):
        """
        Retrieve the value of the specified environment variable
        Args:
            var_name (str) : Name of the env var to fetch
        """
        if var_name in self.env_vars.keys():
            return self.env_vars[var_name]
        else:
            logger.warning("Variable %s not found.", var_name)
            return None

    def get_var_as_list(self, var_name: str) -> Optional[List[str]]:
        """
        Returns a comma-delimited var as list
        """
        value = self.get_env_var(var_name)
        if value is None:
            return None
        return [item.strip() for item in value.split(",") if item.strip()]

    def get_var_as_int(self, var_name: str) -> Optional[int]:
        value = self.get_env_var(var_name)
        if value is None or value == '':
            return None
        try:
            return int(value)
        except ValueError:
            raise ValueError(f'{var_name} must be an integer, got {value!r}') from None

    def get_var_as_bool(self, var_name: str) -> Optional[bool]:
        value = self.get_env_var(var_name)
        if value is None:
            return None
        return value.strip().lower() in TRUE_VALUES

    def validate_env_vars(self):
        """
        Validation hook for subclasses.
        """


class FakehookConfig(BaseConfig):
    """
    Settings for generating people and picking the webhook they are sent to.
    """

    def _get_optional_int(self, var_name: str) -> Optional[int]:
        # Unset is not worth a warning for optional settings
        if var_name not in self.env_vars:
            return None
        return self.get_var_as_int(var_name)

    @property
    def locale(self) -> str:
        return self.env_vars.get('FAKEHOOK_LOCALE') or DEFAULT_LOCALE

    @property
    def seed(self) -> Optional[int]:
        return self._get_optional_int('FAKEHOOK_SEED')

    @property
    def count(self) -> int:
        count = self._get_optional_int('FAKEHOOK_COUNT')
        return DEFAULT_COUNT if count is None else count

    def webhook_settings(self) -> Dict[str, str]:
        """
        Returns the WEBHOOK_* variables, ready to be passed to the webhook service factory
        """
        return {key: value for key, value in self.env_vars.items()
                if key.startswith(WEBHOOK_VAR_PREFIX) and value is not None}

    def validate_env_vars(self):
        count = self.count
        seed = self.seed
        if count < 0:
            raise ValueError(f'FAKEHOOK_COUNT must not be negative, got {count}')
        logger.debug("Using count=%s seed=%s locale=%s", count, seed, self.locale)
