# Copyright (c) 2025 OptimNow - Jean Latiere. All Rights Reserved.
# Licensed under the Proprietary Software License.
# See LICENSE file in the project root for full license information.

"""Shared ARN utilities.

App Runner VPC ingress connection ARNs look like:

    arn:aws:apprunner:us-east-1:123456789012:vpcingressconnection/myconn/abcd1234
"""

import re
from typing import Optional

from ..models.resolvable import Concrete, Pending, select, split

# ARN validation pattern - supports standard AWS partitions and
# resources with colons or slashes in their identifiers
ARN_PATTERN = re.compile(r"^arn:aws[a-z-]*:[a-z0-9-]+:[a-z0-9-]*:[0-9]*:.+")


def is_valid_arn(arn: Optional[str]) -> bool:
    """
    Validate if a string is a valid AWS ARN format.

    Args:
        arn: String to validate

    Returns:
        True if valid ARN format, False otherwise
    """
    if not arn or not isinstance(arn, str):
        return False

    return bool(ARN_PATTERN.match(arn))


def extract_vpc_ingress_connection_name(arn: Concrete | Pending) -> Concrete | Pending:
    """
    Derive the connection name from a VPC ingress connection ARN.

    The ARN is split on "/" and the first segment is the name. An ARN without
    any "/" yields the whole string. Concrete and pending ARNs follow the same
    rule: a pending ARN produces the equivalent Fn::Select / Fn::Split chain,
    which resolves to the same value the concrete path returns and never
    selects past the end of the list.

    Args:
        arn: Resolvable ARN. A concrete non-string value is used as its str().

    Returns:
        Resolvable connection name

    Example:
        >>> extract_vpc_ingress_connection_name(Concrete(value=(
        ...     "arn:aws:apprunner:us-east-1:123456789012:vpcingressconnection/myconn/abcd1234"
        ... ))).value
        'arn:aws:apprunner:us-east-1:123456789012:vpcingressconnection'
    """
    if isinstance(arn, Concrete) and not isinstance(arn.value, str):
        arn = Concrete(value=str(arn.value))

    return select(0, split("/", arn))
