# app/shared/utils/email_validation.py
"""
Utilities for email validation and normalization.
"""

import re
from typing import Tuple

from email_validator import EmailNotValidError, validate_email as check_email_syntax

# Basic email format, checked on top of the RFC syntax check
EMAIL_REGEX = re.compile(r'^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$')

MAX_EMAIL_LENGTH = 255


def validate_email(email: str) -> Tuple[bool, str]:
    """
    Validate an email address.

    Syntax is checked with email-validator (no DNS lookups), then against
    the basic ASCII format accepted by the API.

    Args:
        email: The email address to validate

    Returns:
        Tuple (valid, error message)
    """
    if not email:
        return False, "Email cannot be empty"

    email = normalize_email(email)

    if len(email) > MAX_EMAIL_LENGTH:
        return False, f"Email cannot exceed {MAX_EMAIL_LENGTH} characters"

    try:
        check_email_syntax(email, check_deliverability=False)
    except EmailNotValidError:
        return False, "Must be a valid email"

    if not EMAIL_REGEX.match(email):
        return False, "Must be a valid email"

    return True, ""


def normalize_email(email: str) -> str:
    """
    Normalize an email address by stripping spaces and lower-casing it.

    Args:
        email: The email address to normalize

    Returns:
        Normalized email
    """
    return email.strip().lower()
