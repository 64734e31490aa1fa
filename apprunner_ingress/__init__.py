"""Definitions for App Runner VPC ingress connections."""

from .clients import DuplicateResourceError, ProvisioningCollaborator, TemplateProvisioner
from .models import (
    Concrete,
    InterfaceVpcEndpointReference,
    Pending,
    ServiceReference,
    VpcIngressConnection,
    VpcIngressConnectionAttributes,
    VpcIngressConnectionProps,
    VpcIngressConnectionRef,
    VpcReference,
)
from .services import VpcIngressConnectionService
from .utils import InvalidNameFormatError, InvalidNameLengthError, ValidationError

__all__ = [
    "DuplicateResourceError",
    "ProvisioningCollaborator",
    "TemplateProvisioner",
    "Concrete",
    "InterfaceVpcEndpointReference",
    "Pending",
    "ServiceReference",
    "VpcIngressConnection",
    "VpcIngressConnectionAttributes",
    "VpcIngressConnectionProps",
    "VpcIngressConnectionRef",
    "VpcReference",
    "VpcIngressConnectionService",
    "InvalidNameFormatError",
    "InvalidNameLengthError",
    "ValidationError",
]
