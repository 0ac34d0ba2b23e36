"""
Deployer Errors
Single failure type for the deployment procedures
"""

from typing import List, Optional


class DeploymentError(Exception):
    """Raised when any deployment step fails"""


class CommandError(DeploymentError):
    """
    External command exited non-zero or could not be started
    """

    def __init__(self, command: List[str], returncode: Optional[int] = None):
        self.command = command
        self.returncode = returncode
        super().__init__(f"Command failed: {' '.join(command)}")
