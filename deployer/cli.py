"""
Command-Line Interface
Logging setup and mode selection for the air-deployer command

Usage:
    air-deployer            # scaffold project, compile, deploy, monitor
    air-deployer --quick    # deploy compiled artifact directly over RPC
"""

import os
import sys
from typing import List, Optional
from loguru import logger

from .complete_deployer import CompleteDeployer
from .config import DeployerConfig
from .quick_deploy import quick_deploy

QUICK_FLAG = "--quick"


def setup_logging():
    """Configure loguru sinks"""
    logger.remove()
    logger.add(
        sys.stderr,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>",
        level=os.getenv('LOG_LEVEL', 'INFO')
    )
    logger.add(
        "logs/deployer.log",
        rotation="1 day",
        retention="7 days",
        format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function} - {message}",
        level="DEBUG"
    )


def main(argv: Optional[List[str]] = None, config: Optional[DeployerConfig] = None) -> int:
    """
    Run the deployer

    Args:
        argv: Command-line arguments (None = sys.argv[1:])
        config: Deployer configuration (None = from environment)

    Returns:
        Process exit code
    """
    args = sys.argv[1:] if argv is None else argv

    try:
        if config is None:
            config = DeployerConfig.from_env()

        if QUICK_FLAG in args:
            quick_deploy(config)
        else:
            CompleteDeployer(config).run()

    except Exception as e:
        logger.error(f"❌ Deployment failed: {e}")
        logger.opt(exception=e).debug("Traceback")
        return 1

    return 0


def cli():
    """Console script entry point"""
    setup_logging()
    sys.exit(main())

