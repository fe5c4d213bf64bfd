"""
Stack output helpers.

Writes resolved stack outputs to a dotenv-style file so that local tooling
(scripts, docker login, SSH helpers) can pick them up without the Pulumi CLI.
"""

import logging
from pathlib import Path
from typing import Any, Mapping

import pulumi

logger = logging.getLogger(__name__)


def format_env_lines(values: Mapping[str, Any]) -> list[str]:
    """
    Render output values as KEY=value lines.

    Keys are upper-cased; None values are skipped.
    """
    lines = []
    for key in sorted(values):
        value = values[key]
        if value is None:
            continue
        lines.append(f"{key.upper()}={value}")
    return lines


def write_outputs_to_env(
    outputs: Mapping[str, pulumi.Input[Any]],
    filename: str,
) -> pulumi.Output[str]:
    """
    Write stack outputs to an env file once they resolve.

    Nothing is written during preview, since values are still unknown.

    Args:
        outputs: Output name to value mapping
        filename: Target file path

    Returns:
        Output resolving to the file path
    """
    path = Path(filename)

    def _write(resolved: dict[str, Any]) -> str:
        if pulumi.runtime.is_dry_run():
            return str(path)
        path.write_text("\n".join(format_env_lines(resolved)) + "\n", encoding="utf-8")
        logger.info("Wrote %d stack outputs to %s", len(resolved), path)
        return str(path)

    return pulumi.Output.all(**outputs).apply(_write)
