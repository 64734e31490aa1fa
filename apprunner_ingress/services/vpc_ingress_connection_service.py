# Copyright (c) 2025 OptimNow - Jean Latiere. All Rights Reserved.
# Licensed under the Proprietary Software License.
# See LICENSE file in the project root for full license information.

"""Service for defining and importing App Runner VPC ingress connections."""

import logging

from ..clients.provisioner import ProvisioningCollaborator, TemplateProvisioner
from ..config import Settings, settings
from ..models.resolvable import ASSIGNED_NAME, Concrete, Pending, is_pending
from ..models.vpc_ingress_connection import (
    IngressVpcConfiguration,
    VpcIngressConnection,
    VpcIngressConnectionAttributes,
    VpcIngressConnectionProps,
    VpcIngressConnectionRequest,
)
from ..utils.arn_utils import extract_vpc_ingress_connection_name, is_valid_arn
from ..utils.input_validation import InputValidator

logger = logging.getLogger(__name__)


class VpcIngressConnectionService:
    """
    Service for App Runner VPC ingress connections.

    This service handles:
    - Creating a connection: validate the name, emit one request to the
      provisioning collaborator, return a handle bound to its outputs
    - Importing a connection from a full attribute bundle
    - Importing a connection from its ARN

    Imports never validate and never emit a request.
    """

    def __init__(
        self,
        provisioner: ProvisioningCollaborator | None = None,
        config: Settings | None = None,
    ):
        """
        Initialize the VpcIngressConnectionService.

        Args:
            provisioner: Collaborator receiving create requests.
                Defaults to a new TemplateProvisioner.
            config: Settings to use. Defaults to the global settings.
        """
        self.provisioner = provisioner if provisioner is not None else TemplateProvisioner()
        self._config = config

    @property
    def config(self) -> Settings:
        if self._config is None:
            self._config = settings()
        return self._config

    def create(self, resource_id: str, props: VpcIngressConnectionProps) -> VpcIngressConnection:
        """
        Define a new VPC ingress connection.

        Args:
            resource_id: Identity of the connection in the deployment graph
            props: Service, VPC, endpoint and optional name

        Returns:
            Handle whose attributes are the collaborator's outputs

        Raises:
            InvalidNameLengthError: If a concrete name is outside 4-40 characters
            InvalidNameFormatError: If a concrete name fails the character rules
        """
        name = InputValidator.validate_vpc_ingress_connection_name(
            props.vpc_ingress_connection_name
        )

        request = VpcIngressConnectionRequest(
            logical_id=resource_id,
            ingress_vpc_configuration=IngressVpcConfiguration(
                vpc_id=props.vpc.vpc_id,
                vpc_endpoint_id=props.interface_vpc_endpoint.vpc_endpoint_id,
            ),
            service_arn=props.service.service_arn,
            vpc_ingress_connection_name=name if name is not None else ASSIGNED_NAME,
        )

        logger.info(
            f"Emitting VPC ingress connection request '{resource_id}' "
            f"(name={'assigned' if name is None else 'supplied'})"
        )
        provisioned = self.provisioner.provision(request)

        return VpcIngressConnection(
            vpc_ingress_connection_arn=provisioned.arn,
            vpc_ingress_connection_name=provisioned.assigned_name,
            domain_name=provisioned.domain_name,
            status=provisioned.status,
        )

    def from_attributes(self, attrs: VpcIngressConnectionAttributes) -> VpcIngressConnection:
        """
        Import an existing VPC ingress connection from its attributes.

        Args:
            attrs: ARN, name, domain name and status of the connection

        Returns:
            Handle carrying the attributes verbatim
        """
        logger.debug("Importing VPC ingress connection from attributes")
        return VpcIngressConnection(
            vpc_ingress_connection_arn=attrs.vpc_ingress_connection_arn,
            vpc_ingress_connection_name=attrs.vpc_ingress_connection_name,
            domain_name=attrs.domain_name,
            status=attrs.status,
        )

    def from_arn(self, vpc_ingress_connection_arn: str | Concrete | Pending) -> VpcIngressConnection:
        """
        Import an existing VPC ingress connection from its ARN.

        Domain name and status cannot be derived from an ARN and are left unset.

        Args:
            vpc_ingress_connection_arn: ARN as a string or resolvable value.
                Any other raw value is wrapped as a concrete ARN.

        Returns:
            Handle with the ARN and the name derived from it
        """
        arn = vpc_ingress_connection_arn
        if not isinstance(arn, (Concrete, Pending)):
            arn = Concrete(value=arn)

        if not is_pending(arn) and self.config.warn_on_malformed_arn:
            value = str(arn.value)
            if not is_valid_arn(value) or "/" not in value:
                logger.warning(
                    f"VPC ingress connection ARN {value!r} is not in the expected "
                    f"'arn:...:vpcingressconnection/<name>/<id>' form; "
                    f"the derived name may not be meaningful"
                )

        return VpcIngressConnection(
            vpc_ingress_connection_arn=arn,
            vpc_ingress_connection_name=extract_vpc_ingress_connection_name(arn),
        )
