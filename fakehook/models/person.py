"""
Person model
"""

import re
from dataclasses import dataclass, field
from datetime import date
from typing import Optional

from .model import Model, require_text

EMAIL_PATTERN = re.compile(r'^[^@\s]+@[^@\s]+\.[^@\s]+$')
MIN_AGE = 0
MAX_AGE = 150


@dataclass
class Person(Model):
    """A person record with the descriptive fields used as test data."""

    first_name: Optional[str] = field(default=None, metadata={'alias': 'firstName'})
    last_name: Optional[str] = field(default=None, metadata={'alias': 'lastName'})
    age: Optional[int] = None
    birth_date: Optional[date] = field(default=None, metadata={'alias': 'birthDate'})
    address: Optional[str] = None
    phone_number: Optional[str] = field(default=None, metadata={'alias': 'phoneNumber'})
    email: Optional[str] = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def validate_first_name(self):
        return require_text('first_name', self.first_name)

    def validate_last_name(self):
        return require_text('last_name', self.last_name)

    def validate_age(self):
        if not isinstance(self.age, int) or isinstance(self.age, bool):
            return "'age' must be an integer"
        if not MIN_AGE <= self.age <= MAX_AGE:
            return f"'age' must be between {MIN_AGE} and {MAX_AGE}, got {self.age}"
        return None

    def validate_birth_date(self):
        if not isinstance(self.birth_date, date):
            return "'birth_date' must be a date"
        if self.birth_date >= date.today():
            return "'birth_date' must be in the past"
        return None

    def validate_address(self):
        return require_text('address', self.address)

    def validate_phone_number(self):
        return require_text('phone_number', self.phone_number)

    def validate_email(self):
        if not self.email or not EMAIL_PATTERN.match(self.email):
            return f"'email' is not a valid address: {self.email!r}"
        return None
