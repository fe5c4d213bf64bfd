"""
S3 Bucket Component for CI build artifacts.

Access: Jenkins via the CI host IAM role (private, never public).
Features: Versioning (protect overwrites), Encryption (AES256),
PublicAccessBlock (absolute lockdown).
"""

from dataclasses import dataclass

import pulumi
import pulumi_aws as aws

from cicd_iac.utils.tags import create_tags


@dataclass
class S3BucketOutputs:
    """Output values from S3 bucket component."""
    bucket_name: pulumi.Output[str]
    bucket_arn: pulumi.Output[str]


class S3BucketComponent(pulumi.ComponentResource):
    """
    Private, versioned S3 bucket for pipeline artifacts.
    """

    def __init__(
        self,
        name: str,
        environment: str,
        bucket_name: str,
        force_destroy: bool = False,
        extra_tags: dict[str, str] | None = None,
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        super().__init__("custom:storage:S3Bucket", name, None, opts)

        child_opts = pulumi.ResourceOptions(parent=self)

        self.bucket = aws.s3.Bucket(
            f"{name}-artifacts",
            bucket=bucket_name,
            force_destroy=force_destroy,
            tags=create_tags(environment, f"{name}-artifacts", **(extra_tags or {})),
            opts=child_opts,
        )

        self.versioning = aws.s3.BucketVersioning(
            f"{name}-artifacts-versioning",
            bucket=self.bucket.id,
            versioning_configuration=aws.s3.BucketVersioningVersioningConfigurationArgs(
                status="Enabled",
            ),
            opts=child_opts,
        )

        self.encryption = aws.s3.BucketServerSideEncryptionConfiguration(
            f"{name}-artifacts-encryption",
            bucket=self.bucket.id,
            rules=[aws.s3.BucketServerSideEncryptionConfigurationRuleArgs(
                apply_server_side_encryption_by_default=aws.s3.BucketServerSideEncryptionConfigurationRuleApplyServerSideEncryptionByDefaultArgs(
                    sse_algorithm="AES256",
                ),
            )],
            opts=child_opts,
        )

        self.public_access_block = aws.s3.BucketPublicAccessBlock(
            f"{name}-artifacts-public-block",
            bucket=self.bucket.id,
            block_public_acls=True,
            block_public_policy=True,
            ignore_public_acls=True,
            restrict_public_buckets=True,
            opts=child_opts,
        )

        self.register_outputs({
            "bucket_name": self.bucket.bucket,
            "bucket_arn": self.bucket.arn,
        })

    def get_outputs(self) -> S3BucketOutputs:
        """Get S3 bucket output values."""
        return S3BucketOutputs(
            bucket_name=self.bucket.bucket,
            bucket_arn=self.bucket.arn,
        )
