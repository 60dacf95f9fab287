# app/shared/utils/input_validation.py

"""
Field-level validation for client and reservation payloads.

Every function here is pure: it receives plain values or a dictionary
and returns the list of violated rules, never raising and never touching
the database. Rules are checked on every field before returning, so the
caller can report all problems at once.
"""

import re
from datetime import datetime
from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Tuple

from app.domain.models.reservation_domain_model import ServiceType, ReservationStatus
from app.shared.utils.email_validation import validate_email

FieldError = Dict[str, str]


class InputValidator:
    """
    Rule engine used to validate request payloads,
    complementing the type coercion done by Pydantic.
    """

    # Limits
    MIN_NAME_LENGTH = 2
    MAX_NAME_LENGTH = 50
    MIN_PASSWORD_LENGTH = 6
    MAX_PASSWORD_LENGTH = 72  # bcrypt only uses the first 72 bytes
    MIN_AGE = 18
    MAX_AGE = 120
    MIN_VEHICLE_LENGTH = 2
    MAX_VEHICLE_LENGTH = 100
    MAX_NOTES_LENGTH = 500

    # Optional leading "+", no leading zero, up to 16 digits
    PHONE_PATTERN = re.compile(r'^\+?[1-9]\d{0,15}$')

    @classmethod
    def validate_email(cls, value: str) -> Tuple[bool, Optional[str]]:
        is_valid, error_msg = validate_email(value)
        return is_valid, error_msg or None

    @classmethod
    def validate_phone(cls, value: str) -> Tuple[bool, Optional[str]]:
        if not cls.PHONE_PATTERN.match(value):
            return False, "Must be a valid phone number"
        return True, None

    @classmethod
    def validate_dict_data(
            cls,
            data: Dict[str, Any],
            rules: Dict[str, Dict[str, Any]],
            partial: bool = False,
    ) -> List[FieldError]:
        """
        Validate a dictionary against a set of rules.

        Args:
            data: Data to validate, keyed by field name
            rules: Rules in the format
                  {'field': {'label': str, 'alias': str, 'required': bool, 'nullable': bool,
                             'type': type, 'min_length': int, 'max_length': int,
                             'min_value': int, 'max_value': int, 'pattern': Pattern,
                             'choices': list, 'validator': callable}}
            partial: When True only the keys present in ``data`` are checked

        Returns:
            List of {'field', 'message'} items (empty when everything is valid)
        """
        errors: List[FieldError] = []

        for field, rule in rules.items():
            alias = rule.get("alias", field)
            label = rule.get("label", field)

            if field not in data:
                if rule.get("required", False) and not partial:
                    errors.append({"field": alias, "message": f"{label} is required"})
                continue

            value = data[field]

            if value is None:
                if rule.get("nullable", False):
                    continue
                if partial:
                    errors.append({"field": alias, "message": f"{label} cannot be null"})
                elif rule.get("required", False):
                    errors.append({"field": alias, "message": f"{label} is required"})
                continue

            error = cls._check_value(value, rule, label)
            if error:
                errors.append({"field": alias, "message": error})

        return errors

    @classmethod
    def _check_value(cls, value: Any, rule: Dict[str, Any], label: str) -> Optional[str]:
        """Return the first violated rule for a single non-null value."""
        expected_type = rule.get("type")
        if expected_type is not None:
            # bool is an int subclass but never a valid age
            if isinstance(value, bool) and expected_type is not bool:
                return f"{label} must be of type {expected_type.__name__}"
            if not isinstance(value, expected_type):
                return f"{label} must be of type {expected_type.__name__}"

        if isinstance(value, str):
            min_length = rule.get("min_length")
            max_length = rule.get("max_length")
            length = len(value.strip())
            if min_length is not None and max_length is not None:
                if not min_length <= length <= max_length:
                    return f"{label} must be between {min_length} and {max_length} characters"
            elif min_length is not None and length < min_length:
                return f"{label} must be at least {min_length} characters"
            elif max_length is not None and length > max_length:
                return f"{label} cannot exceed {max_length} characters"

        min_value = rule.get("min_value")
        max_value = rule.get("max_value")
        if min_value is not None and max_value is not None and not min_value <= value <= max_value:
            return f"{label} must be a number between {min_value} and {max_value}"

        choices = rule.get("choices")
        if choices is not None:
            raw = value.value if isinstance(value, Enum) else value
            if raw not in choices:
                return f"Invalid {label.lower()}"

        validator: Optional[Callable[[Any], Tuple[bool, Optional[str]]]] = rule.get("validator")
        if validator is not None:
            is_valid, error_msg = validator(value)
            if not is_valid:
                return error_msg

        return None


CLIENT_RULES: Dict[str, Dict[str, Any]] = {
    "name": {
        "label": "Name", "required": True, "type": str,
        "min_length": InputValidator.MIN_NAME_LENGTH, "max_length": InputValidator.MAX_NAME_LENGTH,
    },
    "email": {
        "label": "Email", "required": True, "type": str,
        "validator": InputValidator.validate_email,
    },
    "password": {
        "label": "Password", "required": True, "type": str,
        "min_length": InputValidator.MIN_PASSWORD_LENGTH, "max_length": InputValidator.MAX_PASSWORD_LENGTH,
    },
    "phone": {
        "label": "Phone", "required": True, "type": str,
        "validator": InputValidator.validate_phone,
    },
    "age": {
        "label": "Age", "required": True, "type": int,
        "min_value": InputValidator.MIN_AGE, "max_value": InputValidator.MAX_AGE,
    },
}

RESERVATION_RULES: Dict[str, Dict[str, Any]] = {
    "client_id": {
        "label": "Client ID", "alias": "clientId", "required": True, "type": str,
    },
    "vehicle": {
        "label": "Vehicle", "required": True, "type": str,
        "min_length": InputValidator.MIN_VEHICLE_LENGTH, "max_length": InputValidator.MAX_VEHICLE_LENGTH,
    },
    "service": {
        "label": "Service", "required": True,
        "choices": [service.value for service in ServiceType],
    },
    "scheduled_date": {
        "label": "Scheduled date", "alias": "scheduledDate", "required": True, "type": datetime,
    },
    "status": {
        "label": "Status",
        "choices": [status.value for status in ReservationStatus],
    },
    "notes": {
        "label": "Notes", "nullable": True, "type": str,
        "max_length": InputValidator.MAX_NOTES_LENGTH,
    },
}


def validate_client_data(data: Dict[str, Any], partial: bool = False) -> List[FieldError]:
    """Validate a client payload (all fields required unless ``partial``)."""
    return InputValidator.validate_dict_data(data, CLIENT_RULES, partial=partial)


def validate_reservation_data(data: Dict[str, Any], partial: bool = False) -> List[FieldError]:
    """Validate a reservation payload (all mandatory fields required unless ``partial``)."""
    return InputValidator.validate_dict_data(data, RESERVATION_RULES, partial=partial)
