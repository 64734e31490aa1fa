"""Provisioning collaborators."""

from .provisioner import (
    DuplicateResourceError,
    ProvisionedVpcIngressConnection,
    ProvisioningCollaborator,
    TemplateProvisioner,
)

__all__ = [
    "DuplicateResourceError",
    "ProvisionedVpcIngressConnection",
    "ProvisioningCollaborator",
    "TemplateProvisioner",
]
