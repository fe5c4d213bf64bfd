"""
Storage components for ECR and S3.

Components:
- EcrRepositoryComponent: Container image registry for CI builds
- S3BucketComponent: Artifacts bucket
"""

from cicd_iac.components.storage.ecr_repository import EcrRepositoryComponent, EcrRepositoryOutputs
from cicd_iac.components.storage.s3_buckets import S3BucketComponent, S3BucketOutputs

__all__ = [
    "EcrRepositoryComponent",
    "EcrRepositoryOutputs",
    "S3BucketComponent",
    "S3BucketOutputs",
]
