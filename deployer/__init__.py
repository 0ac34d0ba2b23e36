"""
AIR Token Deployer Package
Project scaffolding, Hardhat toolchain driving and direct RPC deployment
"""

from .config import DeployerConfig
from .errors import DeploymentError, CommandError
from .deployment_record import DeploymentRecord
from .scaffold import ProjectScaffolder
from .toolchain import Toolchain, run_command
from .complete_deployer import CompleteDeployer
from .quick_deploy import quick_deploy, QuickDeployResult

__all__ = [
    'DeployerConfig',
    'DeploymentError',
    'CommandError',
    'DeploymentRecord',
    'ProjectScaffolder',
    'Toolchain',
    'run_command',
    'CompleteDeployer',
    'quick_deploy',
    'QuickDeployResult'
]
