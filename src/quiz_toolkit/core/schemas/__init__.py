"""
Schemas Package

JSON schema definition and validation for question banks.
"""

from .validator import (
    validate_question_bank,
    ValidationError,
    QUESTION_BANK_SCHEMA_VERSION,
)

__all__ = [
    "validate_question_bank",
    "ValidationError",
    "QUESTION_BANK_SCHEMA_VERSION",
]
