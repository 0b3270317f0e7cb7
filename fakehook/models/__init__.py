"""
Models for fakehook
"""

from .model import Model, ModelValidationError
from .person import Person
