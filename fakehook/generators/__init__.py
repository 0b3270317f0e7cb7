from .base import ModelFactory, DEFAULT_LOCALE
from .person import PersonFactory, generate_people, calculate_age


__all__ = [
    "ModelFactory",
    "PersonFactory",
    "generate_people",
    "calculate_age",
    "DEFAULT_LOCALE"
]
