"""
Security components for IAM.

Components:
- IamRoleComponent: IAM role and instance profile for CI hosts
"""

from cicd_iac.components.security.iam_roles import IamRoleComponent, IamRoleOutputs

__all__ = [
    "IamRoleComponent",
    "IamRoleOutputs",
]
