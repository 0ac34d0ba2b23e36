"""
Deployer Configuration
Credential, RPC endpoint and project location passed explicitly to every step
"""

import os
from pathlib import Path
from typing import Dict, Mapping, Optional
from dotenv import load_dotenv


PROJECT_NAME = "air-token-project"
PLACEHOLDER_PRIVATE_KEY = "YOUR_PRIVATE_KEY_HERE"
DEFAULT_RPC_URL = "https://sepolia.base.org"

# Base Sepolia
HARDHAT_NETWORK = "baseSepolia"
CHAIN_ID = 84532
NETWORK_LABEL = "base-sepolia"
EXPLORER_ADDRESS_URL = "https://sepolia.basescan.org/address/"

PROJECT_DIRS = ['contracts', 'scripts', 'artifacts', 'cache']
ARTIFACT_RELATIVE_PATH = Path("artifacts") / "contracts" / "AIR.sol" / "AIR.json"
DEPLOYMENT_INFO_FILE = "deployment-info.json"


class DeployerConfig:
    """
    Settings for one deployer run
    """

    def __init__(
        self,
        private_key: str = PLACEHOLDER_PRIVATE_KEY,
        rpc_url: str = DEFAULT_RPC_URL,
        project_name: str = PROJECT_NAME,
        base_dir: Optional[Path] = None,
        artifact_path: Optional[Path] = None,
        environ: Optional[Mapping[str, str]] = None
    ):
        """
        Args:
            private_key: Signing credential (not validated)
            rpc_url: JSON-RPC endpoint
            project_name: Name of the scaffolded project directory
            base_dir: Directory the project is created in (default: cwd)
            artifact_path: Compiled contract artifact for quick mode
            environ: Base environment handed to subprocesses (None = copy of os.environ)
        """
        self.private_key = private_key
        self.rpc_url = rpc_url
        self.project_name = project_name
        self.base_dir = Path(base_dir) if base_dir is not None else Path.cwd()
        self.artifact_path = (
            Path(artifact_path) if artifact_path is not None
            else self.project_dir / ARTIFACT_RELATIVE_PATH
        )
        self.environ = dict(environ) if environ is not None else dict(os.environ)

    @classmethod
    def from_env(
        cls,
        environ: Optional[Mapping[str, str]] = None,
        base_dir: Optional[Path] = None
    ) -> "DeployerConfig":
        """
        Build configuration from environment variables

        Args:
            environ: Mapping to read from (None = .env file + os.environ)
            base_dir: Directory the project is created in

        Returns:
            DeployerConfig
        """
        if environ is None:
            load_dotenv()
            environ = os.environ

        return cls(
            private_key=environ.get('PRIVATE_KEY') or PLACEHOLDER_PRIVATE_KEY,
            rpc_url=environ.get('RPC_URL') or DEFAULT_RPC_URL,
            base_dir=base_dir,
            artifact_path=environ.get('CONTRACT_ARTIFACT') or None,
            environ=environ
        )

    @property
    def project_dir(self) -> Path:
        return self.base_dir / self.project_name

    @property
    def deployment_info_path(self) -> Path:
        return self.project_dir / DEPLOYMENT_INFO_FILE

    def has_credential(self) -> bool:
        """Check the key is set to something other than the placeholder"""
        return bool(self.private_key) and self.private_key != PLACEHOLDER_PRIVATE_KEY

    def subprocess_env(self) -> Dict[str, str]:
        """Environment for child processes with the configured credential and RPC URL"""
        env = dict(self.environ)
        env['RPC_URL'] = self.rpc_url

        if self.has_credential():
            env['PRIVATE_KEY'] = self.private_key
        else:
            env.pop('PRIVATE_KEY', None)

        return env
