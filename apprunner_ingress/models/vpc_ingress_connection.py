# Copyright (c) 2025 OptimNow - Jean Latiere. All Rights Reserved.
# Licensed under the Proprietary Software License.
# See LICENSE file in the project root for full license information.

"""VPC ingress connection data models."""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .references import InterfaceVpcEndpointRef, ServiceRef, VpcRef
from .resolvable import Resolvable, as_resolvable, render

RESOURCE_TYPE = "AWS::AppRunner::VpcIngressConnection"


class VpcIngressConnectionProps(BaseModel):
    """Inputs for defining a new VPC ingress connection."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    service: ServiceRef = Field(..., description="The App Runner service to connect")
    vpc: VpcRef = Field(..., description="The VPC for the ingress connection")
    interface_vpc_endpoint: InterfaceVpcEndpointRef = Field(
        ..., description="The interface VPC endpoint for the ingress connection"
    )
    vpc_ingress_connection_name: Optional[Resolvable] = Field(
        None,
        description="Name of the connection. None lets the provisioning engine assign one.",
    )

    @field_validator("vpc_ingress_connection_name", mode="before")
    @classmethod
    def coerce_resolvable(cls, value: Any) -> Any:
        return as_resolvable(value)


class VpcIngressConnectionAttributes(BaseModel):
    """Attributes of an existing VPC ingress connection, used for imports."""

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "vpc_ingress_connection_arn": (
                    "arn:aws:apprunner:us-east-1:123456789012:"
                    "vpcingressconnection/myconn/abcd1234"
                ),
                "vpc_ingress_connection_name": "myconn",
                "domain_name": "abcd1234.us-east-1.awsapprunner.com",
                "status": "AVAILABLE",
            }
        },
    )

    vpc_ingress_connection_arn: Resolvable = Field(..., description="ARN of the connection")
    vpc_ingress_connection_name: Resolvable = Field(..., description="Name of the connection")
    domain_name: Resolvable = Field(..., description="Domain name associated with the connection")
    status: Resolvable = Field(..., description="Current status of the connection")

    @field_validator(
        "vpc_ingress_connection_arn",
        "vpc_ingress_connection_name",
        "domain_name",
        "status",
        mode="before",
    )
    @classmethod
    def coerce_resolvable(cls, value: Any) -> Any:
        return as_resolvable(value)


class IngressVpcConfiguration(BaseModel):
    """Network side of the connection: the VPC and its interface endpoint."""

    model_config = ConfigDict(frozen=True)

    vpc_id: Resolvable = Field(..., description="ID of the VPC")
    vpc_endpoint_id: Resolvable = Field(..., description="ID of the interface VPC endpoint")

    @field_validator("vpc_id", "vpc_endpoint_id", mode="before")
    @classmethod
    def coerce_resolvable(cls, value: Any) -> Any:
        return as_resolvable(value)


class VpcIngressConnectionRequest(BaseModel):
    """Fully specified request handed to the provisioning collaborator."""

    model_config = ConfigDict(frozen=True)

    logical_id: str = Field(..., description="Identity of the resource in the deployment graph")
    ingress_vpc_configuration: IngressVpcConfiguration = Field(
        ..., description="VPC and endpoint the connection ingresses through"
    )
    service_arn: Resolvable = Field(..., description="ARN of the target App Runner service")
    vpc_ingress_connection_name: Resolvable = Field(
        ..., description="Validated name, or the assigned-name placeholder"
    )

    @field_validator("service_arn", "vpc_ingress_connection_name", mode="before")
    @classmethod
    def coerce_resolvable(cls, value: Any) -> Any:
        return as_resolvable(value)

    def to_properties(self) -> dict[str, Any]:
        """Render the request as CloudFormation resource properties."""
        return {
            "IngressVpcConfiguration": {
                "VpcId": render(self.ingress_vpc_configuration.vpc_id),
                "VpcEndpointId": render(self.ingress_vpc_configuration.vpc_endpoint_id),
            },
            "ServiceArn": render(self.service_arn),
            "VpcIngressConnectionName": render(self.vpc_ingress_connection_name),
        }

    def to_cloudformation(self) -> dict[str, Any]:
        """Render the request as a CloudFormation resource entry."""
        return {"Type": RESOURCE_TYPE, "Properties": self.to_properties()}


class VpcIngressConnection(BaseModel):
    """
    Handle to a VPC ingress connection.

    Produced by creating a new connection or by importing an existing one.
    Domain name and status are None when the handle was imported from an ARN.
    """

    model_config = ConfigDict(frozen=True)

    vpc_ingress_connection_arn: Resolvable = Field(..., description="ARN of the connection")
    vpc_ingress_connection_name: Resolvable = Field(..., description="Name of the connection")
    domain_name: Optional[Resolvable] = Field(
        None, description="Domain name associated with the connection"
    )
    status: Optional[Resolvable] = Field(None, description="Current status of the connection")

    @field_validator(
        "vpc_ingress_connection_arn",
        "vpc_ingress_connection_name",
        "domain_name",
        "status",
        mode="before",
    )
    @classmethod
    def coerce_resolvable(cls, value: Any) -> Any:
        return as_resolvable(value)
