"""
Resource naming conventions for consistent AWS resource names.

Follows pattern: {project}-{environment}-{resource}
"""

from dataclasses import dataclass


@dataclass
class ResourceNamer:
    """
    Generates consistent resource names for AWS resources.

    Attributes:
        project: Project identifier
        environment: Deployment environment (dev, staging, prod)
    """
    project: str
    environment: str

    def name(self, resource: str) -> str:
        """
        Generate a resource name.

        Args:
            resource: Resource identifier (e.g., 'vpc', 'jenkins')

        Returns:
            Formatted resource name
        """
        if not resource:
            return f"{self.project}-{self.environment}"
        return f"{self.project}-{self.environment}-{resource}"

    def bucket_name(self, suffix: str) -> str:
        """
        Generate an S3 bucket name (must be globally unique).

        Args:
            suffix: Bucket suffix (e.g., 'artifacts')

        Returns:
            Lowercase bucket name
        """
        return f"{self.project}-{self.environment}-{suffix}".lower()

    def repository_name(self, suffix: str) -> str:
        """
        Generate an ECR repository name.

        Args:
            suffix: Repository suffix (e.g., 'app')

        Returns:
            Repository name with project/environment namespace
        """
        return f"{self.project}/{self.environment}/{suffix}".lower()
