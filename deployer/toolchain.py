"""
Toolchain
Runs npm, Hardhat and generated scripts with inherited stdio
"""

import subprocess
import sys
from pathlib import Path
from typing import List, Mapping, Optional
from loguru import logger

from .config import DeployerConfig
from .errors import CommandError


def run_command(
    command: List[str],
    cwd: Optional[Path] = None,
    env: Optional[Mapping[str, str]] = None
) -> None:
    """
    Run an external command, blocking until it exits

    Args:
        command: Program and arguments
        cwd: Working directory for the child
        env: Environment for the child (None = inherit)

    Raises:
        CommandError: Non-zero exit or program could not be started
    """
    logger.debug(f"$ {' '.join(command)}")

    try:
        result = subprocess.run(command, cwd=cwd, env=env)
    except OSError as e:
        logger.error(f"Could not start {command[0]}: {e}")
        raise CommandError(command) from e

    if result.returncode != 0:
        logger.error(f"{command[0]} exited with code {result.returncode}")
        raise CommandError(command, result.returncode)


class Toolchain:
    """
    External build/deploy tools bound to the project directory
    """

    def __init__(self, config: DeployerConfig):
        """
        Initialize Toolchain

        Args:
            config: Deployer configuration
        """
        self.cwd = config.project_dir
        self.env = config.subprocess_env()

    def install_dependencies(self):
        """npm install"""
        run_command(['npm', 'install'], cwd=self.cwd, env=self.env)

    def compile(self):
        """npx hardhat compile"""
        run_command(['npx', 'hardhat', 'compile'], cwd=self.cwd, env=self.env)

    def run_script(self, script: str):
        """Run a generated Python script with the current interpreter"""
        run_command([sys.executable, script], cwd=self.cwd, env=self.env)
