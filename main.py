"""
AIR Token Deployer - Main Entry Point
Scaffolds and deploys the AIR token to Base Sepolia

Usage:
    python main.py            # scaffold project, compile, deploy, monitor
    python main.py --quick    # deploy compiled artifact directly over RPC
"""

from deployer.cli import cli

if __name__ == "__main__":
    cli()
