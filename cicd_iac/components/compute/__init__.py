"""
Compute components for EC2.

Components:
- Ec2InstanceComponent: EC2 instance for one CI tool (Jenkins or SonarQube)
"""

from cicd_iac.components.compute.ec2_instance import Ec2InstanceComponent, Ec2InstanceOutputs

__all__ = [
    "Ec2InstanceComponent",
    "Ec2InstanceOutputs",
]
