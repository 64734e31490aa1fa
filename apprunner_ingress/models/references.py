# Copyright (c) 2025 OptimNow - Jean Latiere. All Rights Reserved.
# Licensed under the Proprietary Software License.
# See LICENSE file in the project root for full license information.

"""References to resources a VPC ingress connection is wired to.

The connection only reads a single identifier from each collaborator, so the
protocols expose just that attribute. Any object with the right attribute
works; the small models below are provided for callers without their own.
"""

from typing import Any, Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .resolvable import Resolvable, as_resolvable


@runtime_checkable
class ServiceRef(Protocol):
    """An App Runner service."""

    service_arn: Any


@runtime_checkable
class VpcRef(Protocol):
    """A VPC."""

    vpc_id: Any


@runtime_checkable
class InterfaceVpcEndpointRef(Protocol):
    """An interface VPC endpoint."""

    vpc_endpoint_id: Any


@runtime_checkable
class VpcIngressConnectionRef(Protocol):
    """Read capability shared by created and imported VPC ingress connections."""

    @property
    def vpc_ingress_connection_arn(self) -> Any: ...

    @property
    def vpc_ingress_connection_name(self) -> Any: ...


class ServiceReference(BaseModel):
    """Reference to an existing App Runner service by ARN."""

    model_config = ConfigDict(frozen=True)

    service_arn: Resolvable = Field(..., description="ARN of the App Runner service")

    @field_validator("service_arn", mode="before")
    @classmethod
    def coerce_resolvable(cls, value: Any) -> Any:
        return as_resolvable(value)


class VpcReference(BaseModel):
    """Reference to an existing VPC by ID."""

    model_config = ConfigDict(frozen=True)

    vpc_id: Resolvable = Field(..., description="ID of the VPC (e.g., vpc-0abc...)")

    @field_validator("vpc_id", mode="before")
    @classmethod
    def coerce_resolvable(cls, value: Any) -> Any:
        return as_resolvable(value)


class InterfaceVpcEndpointReference(BaseModel):
    """Reference to an existing interface VPC endpoint by ID."""

    model_config = ConfigDict(frozen=True)

    vpc_endpoint_id: Resolvable = Field(
        ..., description="ID of the interface VPC endpoint (e.g., vpce-0abc...)"
    )

    @field_validator("vpc_endpoint_id", mode="before")
    @classmethod
    def coerce_resolvable(cls, value: Any) -> Any:
        return as_resolvable(value)
