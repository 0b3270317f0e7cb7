from abc import ABC, abstractmethod
from typing import List, Optional

from faker import Faker

from fakehook.models import Model

DEFAULT_LOCALE = 'en_US'


class ModelFactory(ABC):
    """
        Base class for factories that fill models with Faker values
    """

    def __init__(self, locale: Optional[str] = None, seed: Optional[int] = None):
        self.locale = locale or DEFAULT_LOCALE
        try:
            self.faker = Faker(self.locale)
        except AttributeError as e:
            # Faker reports unknown locales as AttributeError
            raise ValueError(f'Unknown Faker locale: {self.locale}') from e
        if seed is not None:
            self.faker.seed_instance(seed)

    @abstractmethod
    def create(self) -> Model:
        """
        Builds a single model instance
        """
        raise NotImplementedError

    def create_many(self, count: int) -> List[Model]:
        if count < 0:
            raise ValueError(f'count must be zero or positive, got {count}')
        return [self.create() for _ in range(count)]
