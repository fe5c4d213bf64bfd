"""
First-boot bootstrap scripts for CI hosts.

Each CI tool ships a `<tool>_userdata.sh` script alongside this module. The
scripts are passed verbatim as EC2 user data and run once, sequentially, as
root at first boot.
"""

from importlib import resources

SCRIPT_SUFFIX = "_userdata.sh"

SUPPORTED_TOOLS: tuple[str, ...] = ("jenkins", "sonarqube")


def available_tools() -> list[str]:
    """List CI tools that have a bootstrap script packaged."""
    package_files = resources.files(__name__)
    return sorted(
        entry.name[: -len(SCRIPT_SUFFIX)]
        for entry in package_files.iterdir()
        if entry.name.endswith(SCRIPT_SUFFIX)
    )


def load_user_data(tool: str) -> str:
    """
    Read the bootstrap script for a CI tool.

    Args:
        tool: CI tool identifier ('jenkins' or 'sonarqube')

    Returns:
        Script contents

    Raises:
        ValueError: If the tool is not supported
        FileNotFoundError: If the script is missing from the package
    """
    if tool not in SUPPORTED_TOOLS:
        raise ValueError(f"Unsupported CI tool '{tool}', expected one of {', '.join(SUPPORTED_TOOLS)}")

    script = resources.files(__name__).joinpath(f"{tool}{SCRIPT_SUFFIX}")
    if not script.is_file():
        raise FileNotFoundError(f"Bootstrap script for '{tool}' not found")
    return script.read_text(encoding="utf-8")
