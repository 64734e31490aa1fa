"""Services for App Runner VPC ingress connections."""

from .vpc_ingress_connection_service import VpcIngressConnectionService

__all__ = ["VpcIngressConnectionService"]
