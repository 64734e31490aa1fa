"""Pytest configuration and shared fixtures."""

import pytest

from apprunner_ingress.clients.provisioner import TemplateProvisioner
from apprunner_ingress.config import Settings
from apprunner_ingress.models import (
    InterfaceVpcEndpointReference,
    ServiceReference,
    VpcIngressConnectionProps,
    VpcReference,
)
from apprunner_ingress.services.vpc_ingress_connection_service import (
    VpcIngressConnectionService,
)

SERVICE_ARN = (
    "arn:aws:apprunner:us-east-1:123456789012:service/my-service/8fe1e10304f84fd2b0df550fe98a71fa"
)
VPC_ID = "vpc-0a1b2c3d4e5f67890"
VPC_ENDPOINT_ID = "vpce-0123456789abcdef0"
CONNECTION_ARN = "arn:aws:apprunner:us-east-1:123456789012:vpcingressconnection/myconn/abcd1234"


# =============================================================================
# Environment and Configuration Fixtures
# =============================================================================

@pytest.fixture
def test_env(monkeypatch):
    """Set up test environment variables."""
    test_vars = {
        "LOG_LEVEL": "DEBUG",
        "ENVIRONMENT": "test",
    }
    for key, value in test_vars.items():
        monkeypatch.setenv(key, value)
    return test_vars


@pytest.fixture
def test_settings():
    """Settings with defaults, independent of the process environment."""
    return Settings(_env_file=None, LOG_LEVEL="DEBUG", ENVIRONMENT="test")


# =============================================================================
# Collaborator and Service Fixtures
# =============================================================================

@pytest.fixture
def provisioner():
    """Fresh template provisioner."""
    return TemplateProvisioner()


@pytest.fixture
def service(provisioner, test_settings):
    """VPC ingress connection service wired to a template provisioner."""
    return VpcIngressConnectionService(provisioner=provisioner, config=test_settings)


# =============================================================================
# Input Fixtures
# =============================================================================

@pytest.fixture
def make_props():
    """Factory for connection props with sensible defaults."""

    def _make_props(name=None, **overrides):
        values = {
            "service": ServiceReference(service_arn=SERVICE_ARN),
            "vpc": VpcReference(vpc_id=VPC_ID),
            "interface_vpc_endpoint": InterfaceVpcEndpointReference(
                vpc_endpoint_id=VPC_ENDPOINT_ID
            ),
            "vpc_ingress_connection_name": name,
        }
        values.update(overrides)
        return VpcIngressConnectionProps(**values)

    return _make_props
