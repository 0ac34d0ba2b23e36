"""
Complete Deployer
Scaffold-and-deploy mode: project files, npm install, compile, deploy, monitor
"""

from typing import Optional
from loguru import logger

from .config import DeployerConfig
from .deployment_record import DeploymentRecord
from .errors import DeploymentError
from .scaffold import ProjectScaffolder
from .toolchain import Toolchain


class CompleteDeployer:
    """
    Runs every deployment step in order

    A failing step stops the run; files already written stay on disk.
    """

    def __init__(
        self,
        config: DeployerConfig,
        scaffolder: Optional[ProjectScaffolder] = None,
        toolchain: Optional[Toolchain] = None
    ):
        """
        Initialize Complete Deployer

        Args:
            config: Deployer configuration
            scaffolder: Project file writer (default: ProjectScaffolder)
            toolchain: External tools (default: Toolchain)
        """
        self.config = config
        self.scaffolder = scaffolder or ProjectScaffolder(config)
        self.toolchain = toolchain or Toolchain(config)
        self.record = None

    def run(self) -> DeploymentRecord:
        """
        Run the full deployment

        Returns:
            Deployment record written by the deploy script
        """
        logger.info("🚀 STARTING COMPLETE AIR TOKEN DEPLOYMENT SYSTEM")

        self.create_project_structure()
        self.install_dependencies()
        self.create_config_files()
        self.deploy_contract()
        self.start_monitoring()

        logger.success("🎉 DEPLOYMENT COMPLETE! Your AIR token is live on Base Sepolia.")
        return self.record

    def create_project_structure(self):
        self.scaffolder.create_project_structure()

    def install_dependencies(self):
        logger.info("📦 Installing dependencies...")

        self.scaffolder.write_package_manifest()
        self.toolchain.install_dependencies()

    def create_config_files(self):
        self.scaffolder.create_config_files()

    def deploy_contract(self):
        """Compile, run the deploy script and load its record"""
        logger.info("📤 Deploying AIR token...")

        if not self.config.has_credential():
            raise DeploymentError("Please set PRIVATE_KEY environment variable")

        self.toolchain.compile()
        self.toolchain.run_script('scripts/deploy.py')

        self.record = DeploymentRecord.load(self.config.deployment_info_path)

        logger.success(f"Contract: {self.record.address}")
        logger.info(f"Deployer: {self.record.deployer}")
        logger.info(f"Network: {self.record.network}")
        logger.info(f"Timestamp: {self.record.timestamp}")

    def start_monitoring(self):
        """Write and run the monitor script (read errors are handled inside it)"""
        logger.info("📊 Starting deployment monitoring...")

        self.scaffolder.write_monitor_script()
        self.toolchain.run_script('monitor.py')
