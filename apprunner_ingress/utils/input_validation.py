# Copyright (c) 2025 OptimNow - Jean Latiere. All Rights Reserved.
# Licensed under the Proprietary Software License.
# See LICENSE file in the project root for full license information.

"""Input validation for VPC ingress connection definitions.

Validation only ever looks at concrete values. A pending value is unknown
until the deployment graph resolves it, so it is passed through unchecked.
"""

import logging
import re
from typing import Any, Optional

from ..models.resolvable import Concrete, Pending

logger = logging.getLogger(__name__)


class ValidationError(Exception):
    """Raised when input validation fails."""

    def __init__(self, field: str, message: str, value: Any = None):
        """
        Initialize validation error.

        Args:
            field: The field that failed validation
            message: Human-readable error message
            value: The invalid value (optional, for logging)
        """
        self.field = field
        self.message = message
        self.value = value
        super().__init__(f"Validation error for '{field}': {message}")


class InvalidNameLengthError(ValidationError):
    """Raised when a concrete connection name is too short or too long."""

    def __init__(self, field: str, message: str, length: int):
        self.length = length
        super().__init__(field, message, length)


class InvalidNameFormatError(ValidationError):
    """Raised when a concrete connection name contains disallowed characters."""

    pass


class InputValidator:
    """
    Validator for VPC ingress connection inputs.

    Naming rules for App Runner VPC ingress connections:
    - 4 to 40 characters
    - first character is alphanumeric
    - remaining characters are alphanumeric, hyphens or underscores
    """

    MIN_NAME_LENGTH = 4
    MAX_NAME_LENGTH = 40

    # Matched with fullmatch so a trailing newline is rejected
    NAME_PATTERN = re.compile(r"[A-Za-z0-9][A-Za-z0-9\-_]*")

    @classmethod
    def validate_vpc_ingress_connection_name(
        cls,
        name: Optional[Concrete | Pending],
        field_name: str = "vpc_ingress_connection_name",
    ) -> Optional[Concrete | Pending]:
        """
        Validate a VPC ingress connection name.

        Args:
            name: The name to validate; None and pending values are accepted as-is
            field_name: Name of the field (for error messages)

        Returns:
            The name, unchanged

        Raises:
            InvalidNameLengthError: If a concrete name is outside 4-40 characters
            InvalidNameFormatError: If a concrete name fails the character rules
        """
        if name is None or isinstance(name, Pending):
            return name

        value = name.value
        if not isinstance(value, str):
            logger.warning(
                f"Rejected {field_name}: expected a string, got {type(value).__name__}"
            )
            raise InvalidNameFormatError(
                field_name,
                f"Must be a string, got {type(value).__name__}",
                value,
            )

        length = len(value)
        if length < cls.MIN_NAME_LENGTH or length > cls.MAX_NAME_LENGTH:
            logger.warning(
                f"Rejected {field_name}: length={length}, "
                f"allowed={cls.MIN_NAME_LENGTH}-{cls.MAX_NAME_LENGTH}"
            )
            raise InvalidNameLengthError(
                field_name,
                f"Must be between {cls.MIN_NAME_LENGTH} and {cls.MAX_NAME_LENGTH} "
                f"characters, got: {length} characters.",
                length,
            )

        if not cls.NAME_PATTERN.fullmatch(value):
            logger.warning(f"Rejected {field_name}: invalid characters in {value!r}")
            raise InvalidNameFormatError(
                field_name,
                "Must start with an alphanumeric character and contain only "
                "alphanumeric characters, hyphens, or underscores after that, "
                f"got: {value}.",
                value,
            )

        return name
