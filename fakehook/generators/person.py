import logging
import re
import unicodedata
from datetime import date, timedelta
from typing import List, Optional

from fakehook.models import Person
from fakehook.models.person import MAX_AGE

from .base import ModelFactory

logger = logging.getLogger(__name__)


def calculate_age(birth_date: date, today: Optional[date] = None) -> int:
    today = today or date.today()
    had_birthday = (today.month, today.day) >= (birth_date.month, birth_date.day)
    return today.year - birth_date.year - (0 if had_birthday else 1)


def _ascii_slug(value: str) -> str:
    normalized = unicodedata.normalize('NFKD', value).encode('ascii', 'ignore').decode('ascii')
    return re.sub(r'[^a-z0-9]', '', normalized.lower())


class PersonFactory(ModelFactory):
    def __init__(self, locale: Optional[str] = None, seed: Optional[int] = None,
                 minimum_age: int = 18, maximum_age: int = 90):
        if minimum_age < 0 or maximum_age < 0:
            raise ValueError('Ages must not be negative')
        if maximum_age > MAX_AGE:
            raise ValueError(f'maximum_age must not exceed {MAX_AGE}, got {maximum_age}')
        if minimum_age > maximum_age:
            raise ValueError(f'minimum_age ({minimum_age}) is greater than maximum_age ({maximum_age})')
        super().__init__(locale=locale, seed=seed)
        self.minimum_age = minimum_age
        self.maximum_age = maximum_age

    def create(self) -> Person:
        first_name = self.faker.first_name()
        last_name = self.faker.last_name()
        birth_date = self.faker.date_of_birth(minimum_age=self.minimum_age, maximum_age=self.maximum_age)
        if birth_date >= date.today():
            # minimum_age=0 lets Faker pick today
            birth_date = date.today() - timedelta(days=1)

        return Person(
            first_name=first_name,
            last_name=last_name,
            age=calculate_age(birth_date),
            birth_date=birth_date,
            address=self.faker.address().replace('\n', ', '),
            phone_number=self.faker.phone_number(),
            email=self._email_for(first_name, last_name),
        )

    def _email_for(self, first_name: str, last_name: str) -> str:
        local_part = '.'.join(part for part in (_ascii_slug(first_name), _ascii_slug(last_name)) if part)
        if not local_part:
            logger.debug("No ASCII letters in '%s %s', using a random email", first_name, last_name)
            return self.faker.email()
        return f'{local_part}@{self.faker.free_email_domain()}'


def generate_people(count: int, locale: Optional[str] = None, seed: Optional[int] = None) -> List[Person]:
    """
    Generates `count` people with fake but plausible values.

    Args:
        count (int): Number of people to generate.
        locale (str): Faker locale, e.g. "en_US" or "de_DE".
        seed (int): Seed for reproducible output.
    """
    return PersonFactory(locale=locale, seed=seed).create_many(count)
