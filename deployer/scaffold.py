"""
Project Scaffolder
Creates the Hardhat project layout and writes its template files
"""

from pathlib import Path
from loguru import logger

from . import templates
from .config import DeployerConfig, PROJECT_DIRS


class ProjectScaffolder:
    """
    Writes the AIR token project under config.project_dir

    All paths are resolved against the project directory; the process
    working directory is never changed.
    """

    def __init__(self, config: DeployerConfig):
        """
        Initialize Project Scaffolder

        Args:
            config: Deployer configuration
        """
        self.config = config
        self.project_dir = config.project_dir

    def create_project_structure(self) -> Path:
        """Create project directory and subdirectories (safe to re-run)"""
        logger.info("📁 Creating project structure...")

        self.project_dir.mkdir(parents=True, exist_ok=True)

        for name in PROJECT_DIRS:
            (self.project_dir / name).mkdir(exist_ok=True)

        logger.debug(f"Project directory: {self.project_dir}")
        return self.project_dir

    def write_package_manifest(self) -> Path:
        """Write package.json"""
        return self._write_file(
            'package.json',
            templates.render_package_json(self.config.project_name)
        )

    def create_config_files(self) -> list:
        """
        Write build config, contract source, deploy script, env template and ignore list

        Returns:
            Paths written
        """
        logger.info("⚙️  Creating configuration files...")

        rpc_url = self.config.rpc_url
        files = [
            ('hardhat.config.js', templates.render_hardhat_config(rpc_url)),
            ('contracts/AIR.sol', templates.render_contract_source()),
            ('scripts/deploy.py', templates.render_deploy_script(rpc_url)),
            ('.env.example', templates.render_env_template(rpc_url)),
            ('.gitignore', templates.render_gitignore())
        ]

        return [self._write_file(name, content) for name, content in files]

    def write_monitor_script(self) -> Path:
        """Write monitor.py"""
        return self._write_file(
            'monitor.py',
            templates.render_monitor_script(self.config.rpc_url)
        )

    def _write_file(self, relative_path: str, content: str) -> Path:
        """Write content verbatim, overwriting any existing file"""
        path = self.project_dir / relative_path
        path.write_bytes(content.encode('utf-8'))

        logger.debug(f"  Wrote {relative_path}")
        return path
