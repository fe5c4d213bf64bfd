"""
EC2 Instance Component for CI servers (Jenkins, SonarQube).

Key Components:
1. AMI: Ubuntu 22.04 (the bootstrap scripts use apt). A fixed `ami_id` from
   stack config wins over the lookup.
2. User Data: The tool's bootstrap script, run ONCE at first boot. The scripts
   install packages sequentially with no error handling; a failed download
   leaves the host partially configured.
3. Instance Profile: Links the CI IAM role so the host can use ECR and S3.
4. Placement:
   - subnet_id: PUBLIC subnet, public IP assigned at launch.
   - security_group_id: Shared CI security group.
5. Storage (root_block_device): gp3 SSD, encrypted at rest.
6. IMDSv2 (http_tokens="required"): Secures metadata service against SSRF.
"""

from dataclasses import dataclass

import pulumi
import pulumi_aws as aws

from cicd_iac.configs.constants import (
    ROOT_VOLUME_SIZE,
    TOOL_PORTS,
    UBUNTU_AMI_NAME_FILTER,
    UBUNTU_AMI_OWNER,
)
from cicd_iac.userdata import SUPPORTED_TOOLS, load_user_data
from cicd_iac.utils.tags import create_tags, merge_tags


@dataclass
class Ec2InstanceOutputs:
    """Output values from EC2 component."""
    instance_id: pulumi.Output[str]
    public_ip: pulumi.Output[str]
    private_ip: pulumi.Output[str]
    public_dns: pulumi.Output[str]
    url: pulumi.Output[str]


def lookup_ubuntu_ami() -> str:
    """Find the newest Canonical Ubuntu 22.04 amd64 AMI in the current region."""
    ami = aws.ec2.get_ami(
        most_recent=True,
        owners=[UBUNTU_AMI_OWNER],
        filters=[
            aws.ec2.GetAmiFilterArgs(
                name="name",
                values=[UBUNTU_AMI_NAME_FILTER],
            ),
            aws.ec2.GetAmiFilterArgs(
                name="virtualization-type",
                values=["hvm"],
            ),
        ],
    )
    return ami.id


class Ec2InstanceComponent(pulumi.ComponentResource):
    """
    EC2 instance running one CI tool, bootstrapped from user data.
    """

    def __init__(
        self,
        name: str,
        environment: str,
        tool: str,
        instance_type: str,
        subnet_id: pulumi.Input[str],
        security_group_id: pulumi.Input[str],
        instance_profile_name: pulumi.Input[str],
        ami_id: str | None = None,
        key_name: str | None = None,
        root_volume_size: int = ROOT_VOLUME_SIZE,
        extra_tags: dict[str, str] | None = None,
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        if tool not in SUPPORTED_TOOLS:
            raise ValueError(f"Unsupported CI tool '{tool}', expected one of {', '.join(SUPPORTED_TOOLS)}")

        super().__init__("custom:compute:Ec2Instance", name, None, opts)
        self.tool = tool
        self.port = TOOL_PORTS[tool]

        child_opts = pulumi.ResourceOptions(parent=self)

        resolved_ami = ami_id or lookup_ubuntu_ami()
        pulumi.log.info(f"Declaring {tool} host {name} ({instance_type})")

        self.instance = aws.ec2.Instance(
            f"{name}-instance",
            ami=resolved_ami,
            instance_type=instance_type,
            subnet_id=subnet_id,
            vpc_security_group_ids=[security_group_id],
            iam_instance_profile=instance_profile_name,
            key_name=key_name,
            user_data=load_user_data(tool),
            root_block_device=aws.ec2.InstanceRootBlockDeviceArgs(
                volume_size=root_volume_size,
                volume_type="gp3",
                encrypted=True,
            ),
            metadata_options=aws.ec2.InstanceMetadataOptionsArgs(
                http_tokens="required",  # IMDSv2
                http_endpoint="enabled",
            ),
            tags=merge_tags(create_tags(environment, name, **(extra_tags or {})), {"Tool": tool}),
            opts=child_opts,
        )

        self.url = pulumi.Output.concat("http://", self.instance.public_ip, ":", str(self.port))

        self.register_outputs({
            "instance_id": self.instance.id,
            "public_ip": self.instance.public_ip,
            "private_ip": self.instance.private_ip,
            "public_dns": self.instance.public_dns,
            "url": self.url,
        })

    def get_outputs(self) -> Ec2InstanceOutputs:
        """Get EC2 output values."""
        return Ec2InstanceOutputs(
            instance_id=self.instance.id,
            public_ip=self.instance.public_ip,
            private_ip=self.instance.private_ip,
            public_dns=self.instance.public_dns,
            url=self.url,
        )
