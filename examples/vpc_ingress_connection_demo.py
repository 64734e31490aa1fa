# Copyright (c) 2025 OptimNow - Jean Latiere. All Rights Reserved.
# Licensed under the Proprietary Software License.
# See LICENSE file in the project root for full license information.

"""
Demo script showing how VPC ingress connections are defined and imported.

Covers name validation, the generated template fragment, and both import
paths.
"""

import json

from apprunner_ingress.clients.provisioner import TemplateProvisioner
from apprunner_ingress.models import (
    InterfaceVpcEndpointReference,
    Pending,
    ServiceReference,
    VpcIngressConnectionAttributes,
    VpcIngressConnectionProps,
    VpcReference,
)
from apprunner_ingress.services.vpc_ingress_connection_service import (
    VpcIngressConnectionService,
)
from apprunner_ingress.utils.input_validation import ValidationError
from apprunner_ingress.utils.logging_config import configure_logging

SERVICE_ARN = "arn:aws:apprunner:us-east-1:123456789012:service/my-service/8fe1e10304f84fd2"
CONNECTION_ARN = "arn:aws:apprunner:us-east-1:123456789012:vpcingressconnection/myconn/abcd1234"


def make_props(name):
    return VpcIngressConnectionProps(
        service=ServiceReference(service_arn=SERVICE_ARN),
        vpc=VpcReference(vpc_id="vpc-0a1b2c3d4e5f67890"),
        interface_vpc_endpoint=InterfaceVpcEndpointReference(
            vpc_endpoint_id="vpce-0123456789abcdef0"
        ),
        vpc_ingress_connection_name=name,
    )


def demo_name_validation(service):
    """Demonstrate create-time name validation."""
    print("=" * 70)
    print("NAME VALIDATION DEMO")
    print("=" * 70)

    for index, name in enumerate(["ab", "-abc", "Valid-Name_1"], start=1):
        print(f"\n{index}. Name {name!r}:")
        try:
            service.create(f"Connection{index}", make_props(name))
            print("   Accepted ✓")
        except ValidationError as e:
            print(f"   Rejected ({type(e).__name__}): {e.message}")

    print(f"\n4. Pending name:")
    service.create("Connection4", make_props(Pending.get_att("Naming", "Value")))
    print("   Accepted without validation ✓")


def demo_template(provisioner):
    """Show the resources recorded by the template provisioner."""
    print("\n" + "=" * 70)
    print("TEMPLATE DEMO")
    print("=" * 70)
    print(json.dumps(provisioner.to_template(), indent=2))


def demo_imports(service):
    """Demonstrate both import paths."""
    print("\n" + "=" * 70)
    print("IMPORT DEMO")
    print("=" * 70)

    handle = service.from_attributes(
        VpcIngressConnectionAttributes(
            vpc_ingress_connection_arn=CONNECTION_ARN,
            vpc_ingress_connection_name="myconn",
            domain_name="abcd1234.us-east-1.awsapprunner.com",
            status="AVAILABLE",
        )
    )
    print(f"\n1. From attributes:\n   {handle.model_dump()}")

    handle = service.from_arn(CONNECTION_ARN)
    print(f"\n2. From ARN:\n   {handle.model_dump()}")


if __name__ == "__main__":
    configure_logging()
    provisioner = TemplateProvisioner()
    service = VpcIngressConnectionService(provisioner=provisioner)

    demo_name_validation(service)
    demo_template(provisioner)
    demo_imports(service)
