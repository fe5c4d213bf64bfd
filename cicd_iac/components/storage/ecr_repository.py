"""
ECR Repository Component for CI-built container images.

Jenkins builds application images and pushes them here; the CI host role
(see IamRoleComponent) grants push/pull on this repository only.

Key Features:
- scan_on_push=True: Every image is scanned for CVEs on upload.
- Lifecycle Policy: Expire old images, keep only the last N.
- Encryption: Images encrypted at rest (AES256).
- Tag mutability: MUTABLE (allows overwriting 'latest' on each build).
- force_delete outside prod so `pulumi destroy` works with images present.
"""

import json
from dataclasses import dataclass

import pulumi
import pulumi_aws as aws

from cicd_iac.utils.tags import create_tags


@dataclass
class EcrRepositoryOutputs:
    """Output values from ECR repository component."""
    repository_url: pulumi.Output[str]
    repository_arn: pulumi.Output[str]
    repository_name: pulumi.Output[str]


def build_lifecycle_policy(keep_last_images: int) -> str:
    """Render a lifecycle policy that keeps the newest images."""
    return json.dumps({
        "rules": [{
            "rulePriority": 1,
            "description": f"Keep last {keep_last_images} images",
            "selection": {
                "tagStatus": "any",
                "countType": "imageCountMoreThan",
                "countNumber": keep_last_images,
            },
            "action": {
                "type": "expire",
            },
        }],
    })


class EcrRepositoryComponent(pulumi.ComponentResource):
    """
    Private ECR repository for images produced by the CI pipeline.
    """

    def __init__(
        self,
        name: str,
        environment: str,
        repository_name: str,
        keep_last_images: int = 10,
        force_delete: bool = False,
        extra_tags: dict[str, str] | None = None,
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        super().__init__("custom:storage:EcrRepository", name, None, opts)

        child_opts = pulumi.ResourceOptions(parent=self)

        self.repository = aws.ecr.Repository(
            f"{name}-repo",
            name=repository_name,
            image_scanning_configuration=aws.ecr.RepositoryImageScanningConfigurationArgs(
                scan_on_push=True,
            ),
            image_tag_mutability="MUTABLE",
            encryption_configurations=[
                aws.ecr.RepositoryEncryptionConfigurationArgs(
                    encryption_type="AES256",
                ),
            ],
            force_delete=force_delete,
            tags=create_tags(environment, f"{name}-repo", **(extra_tags or {})),
            opts=child_opts,
        )

        self.lifecycle_policy = aws.ecr.LifecyclePolicy(
            f"{name}-repo-lifecycle",
            repository=self.repository.name,
            policy=build_lifecycle_policy(keep_last_images),
            opts=child_opts,
        )

        self.register_outputs({
            "repository_url": self.repository.repository_url,
            "repository_arn": self.repository.arn,
            "repository_name": self.repository.name,
        })

    def get_outputs(self) -> EcrRepositoryOutputs:
        """Get ECR repository output values."""
        return EcrRepositoryOutputs(
            repository_url=self.repository.repository_url,
            repository_arn=self.repository.arn,
            repository_name=self.repository.name,
        )
