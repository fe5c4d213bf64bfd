"""
Networking components for VPC infrastructure.

Components:
- VpcComponent: VPC with public subnet, internet gateway, route table
- SecurityGroupComponent: Security group for the CI hosts
"""

from cicd_iac.components.networking.vpc import VpcComponent, VpcOutputs
from cicd_iac.components.networking.security_groups import SecurityGroupComponent, SecurityGroupOutputs

__all__ = [
    "VpcComponent",
    "VpcOutputs",
    "SecurityGroupComponent",
    "SecurityGroupOutputs",
]
