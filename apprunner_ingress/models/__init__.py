"""Data models for App Runner VPC ingress connections."""

from .resolvable import (
    ASSIGNED_NAME,
    Concrete,
    Pending,
    Resolvable,
    as_resolvable,
    is_pending,
    render,
    select,
    split,
)
from .references import (
    InterfaceVpcEndpointRef,
    InterfaceVpcEndpointReference,
    ServiceRef,
    ServiceReference,
    VpcIngressConnectionRef,
    VpcRef,
    VpcReference,
)
from .vpc_ingress_connection import (
    RESOURCE_TYPE,
    IngressVpcConfiguration,
    VpcIngressConnection,
    VpcIngressConnectionAttributes,
    VpcIngressConnectionProps,
    VpcIngressConnectionRequest,
)

__all__ = [
    "ASSIGNED_NAME",
    "Concrete",
    "Pending",
    "Resolvable",
    "as_resolvable",
    "is_pending",
    "render",
    "select",
    "split",
    "InterfaceVpcEndpointRef",
    "InterfaceVpcEndpointReference",
    "ServiceRef",
    "ServiceReference",
    "VpcIngressConnectionRef",
    "VpcRef",
    "VpcReference",
    "RESOURCE_TYPE",
    "IngressVpcConfiguration",
    "VpcIngressConnection",
    "VpcIngressConnectionAttributes",
    "VpcIngressConnectionProps",
    "VpcIngressConnectionRequest",
]
