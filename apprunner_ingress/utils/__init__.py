"""Utility modules for App Runner VPC ingress connection definitions."""

from .arn_utils import extract_vpc_ingress_connection_name, is_valid_arn
from .input_validation import (
    InputValidator,
    InvalidNameFormatError,
    InvalidNameLengthError,
    ValidationError,
)
from .logging_config import configure_logging

__all__ = [
    "extract_vpc_ingress_connection_name",
    "is_valid_arn",
    "InputValidator",
    "InvalidNameFormatError",
    "InvalidNameLengthError",
    "ValidationError",
    "configure_logging",
]
