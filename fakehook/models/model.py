import logging
from dataclasses import dataclass, fields
from datetime import date, datetime
from typing import Any, Dict, List, Optional, Union, get_args, get_origin, get_type_hints

from dateutil.parser import isoparse

logger = logging.getLogger(__name__)


class ModelValidationError(Exception):
    """
    Exception raised when one or more validation errors occur in the model.

    Attributes:
        errors (list): A list of error messages returned from validation methods.
    """

    def __init__(self, errors):
        if isinstance(errors, str):
            errors = [errors]
        elif not isinstance(errors, list):
            raise ValueError("Errors should be a string or a list of strings")
        self.errors = errors
        super().__init__(self.format_errors())

    def format_errors(self):
        return "\n".join(self.errors)

    def __str__(self):
        return self.format_errors()


@dataclass(kw_only=True)
class Model:
    """A base dataclass for records that are generated, validated and sent as JSON."""

    @classmethod
    def fields(cls) -> List[str]:
        """Get fields of the model."""
        return [f.name for f in fields(cls)]

    @classmethod
    def _build_alias_mapping(cls) -> Dict[str, str]:
        return {f.metadata['alias']: f.name for f in fields(cls) if f.metadata.get('alias')}

    @staticmethod
    def _convert_value(value, convert_dates_to_iso_string: bool):
        if isinstance(value, Model):
            return value.as_dict(convert_dates_to_iso_string)
        if isinstance(value, (date, datetime)) and convert_dates_to_iso_string:
            return value.isoformat()
        return value

    def as_dict(self, convert_dates_to_iso_string: bool = True, use_aliases: bool = True) -> Dict[str, Any]:
        """
        Convert this model to a dictionary.

        Args:
            convert_dates_to_iso_string (bool): Whether to convert dates and datetimes to ISO strings.
            use_aliases (bool): Whether to key the result by field alias instead of field name.

        Returns:
            Dict[str, Any]: A dictionary representation of this model.
        """
        result = {}
        for f in fields(self):
            key = f.metadata.get('alias', f.name) if use_aliases else f.name
            result[key] = self._convert_value(getattr(self, f.name), convert_dates_to_iso_string)
        return result

    @classmethod
    def _parse_date_value(cls, v, expected_type) -> Any:
        """Parse ISO strings into date or datetime when the annotation asks for one."""
        if not isinstance(v, str):
            return v

        candidates = get_args(expected_type) if get_origin(expected_type) is Union else (expected_type,)
        for candidate in candidates:
            if candidate not in (date, datetime):
                continue
            try:
                parsed = isoparse(v)
            except (ValueError, TypeError):
                logger.info("'%s' is not a valid ISO date.", v)
                return v
            return parsed if candidate is datetime else parsed.date()
        return v

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Model":
        """
        Load model from dict. Keys may be field names or aliases; unknown keys are dropped.
        """
        alias_to_field = cls._build_alias_mapping()
        model_fields = cls.fields()
        hints = get_type_hints(cls)

        clean_data = {}
        for k, v in data.items():
            name = alias_to_field.get(k, k)
            if name not in model_fields:
                continue
            expected_type = hints.get(name)
            clean_data[name] = cls._parse_date_value(v, expected_type) if v is not None else None

        return cls(**clean_data)

    def validate(self):
        """
        Validate all fields by calling corresponding `validate_<field_name>` methods if defined.
        Raise `ModelValidationError` if any validations fail.
        """
        errors = []
        for name in self.fields():
            validator = getattr(self, f"validate_{name}", None)
            if callable(validator):
                error = validator()
                if error:
                    errors.append(error)

        if errors:
            raise ModelValidationError(errors)


def require_text(name: str, value: Optional[str]) -> Optional[str]:
    if value is None or not str(value).strip():
        return f"'{name}' must not be blank"
    return None
