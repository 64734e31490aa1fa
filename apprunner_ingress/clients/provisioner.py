# Copyright (c) 2025 OptimNow - Jean Latiere. All Rights Reserved.
# Licensed under the Proprietary Software License.
# See LICENSE file in the project root for full license information.

"""Provisioning collaborators for VPC ingress connection requests.

The provisioning engine that turns a request into a live resource lives
outside this package. It is consumed through ``ProvisioningCollaborator``.
``TemplateProvisioner`` is the default implementation: it collects requests
into a CloudFormation template fragment and hands back pending references
to the attributes CloudFormation will produce.
"""

import logging
from typing import Any, Protocol

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..models.resolvable import Pending, Resolvable, as_resolvable
from ..models.vpc_ingress_connection import VpcIngressConnectionRequest

logger = logging.getLogger(__name__)


class DuplicateResourceError(Exception):
    """Raised when a logical ID is registered twice in the same template."""

    pass


class ProvisionedVpcIngressConnection(BaseModel):
    """Output attributes reported by the provisioning collaborator."""

    model_config = ConfigDict(frozen=True)

    assigned_name: Resolvable = Field(..., description="Name the engine assigned")
    arn: Resolvable = Field(..., description="ARN of the connection")
    domain_name: Resolvable = Field(..., description="Domain name of the connection")
    status: Resolvable = Field(..., description="Status of the connection")

    @field_validator("assigned_name", "arn", "domain_name", "status", mode="before")
    @classmethod
    def coerce_resolvable(cls, value: Any) -> Any:
        return as_resolvable(value)


class ProvisioningCollaborator(Protocol):
    """Anything that accepts a VPC ingress connection request."""

    def provision(
        self, request: VpcIngressConnectionRequest
    ) -> ProvisionedVpcIngressConnection: ...


class TemplateProvisioner:
    """
    Collects requests into a CloudFormation ``Resources`` section.

    Attributes of the provisioned connection are returned as pending
    ``Ref`` / ``Fn::GetAtt`` expressions since they only exist once the
    template is deployed.
    """

    ARN_ATTRIBUTE = "VpcIngressConnectionArn"
    DOMAIN_NAME_ATTRIBUTE = "DomainName"
    STATUS_ATTRIBUTE = "Status"

    def __init__(self):
        self._resources: dict[str, dict[str, Any]] = {}
        self._requests: list[VpcIngressConnectionRequest] = []

    @property
    def requests(self) -> list[VpcIngressConnectionRequest]:
        """Requests received so far, in order."""
        return list(self._requests)

    def provision(
        self, request: VpcIngressConnectionRequest
    ) -> ProvisionedVpcIngressConnection:
        """
        Record a request and return pending references to its attributes.

        Args:
            request: The request to record

        Returns:
            Pending output attributes of the connection

        Raises:
            DuplicateResourceError: If the logical ID is already in the template
        """
        logical_id = request.logical_id
        if logical_id in self._resources:
            raise DuplicateResourceError(
                f"There is already a resource with logical ID '{logical_id}' in the template"
            )

        self._resources[logical_id] = request.to_cloudformation()
        self._requests.append(request)
        logger.debug(f"Recorded VPC ingress connection resource '{logical_id}'")

        return ProvisionedVpcIngressConnection(
            assigned_name=Pending.ref(logical_id),
            arn=Pending.get_att(logical_id, self.ARN_ATTRIBUTE),
            domain_name=Pending.get_att(logical_id, self.DOMAIN_NAME_ATTRIBUTE),
            status=Pending.get_att(logical_id, self.STATUS_ATTRIBUTE),
        )

    def to_template(self) -> dict[str, Any]:
        """Return the collected resources as a template fragment."""
        return {"Resources": dict(self._resources)}
