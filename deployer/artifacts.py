"""
Contract Artifacts
Loads ABI and bytecode from compiled Hardhat artifacts
"""

import json
from pathlib import Path
from typing import Dict, List, Tuple
from loguru import logger

from .errors import DeploymentError


def load_contract_artifact(path: Path) -> Tuple[List[Dict], str]:
    """
    Load a compiled contract

    Args:
        path: Hardhat artifact JSON (artifacts/contracts/<Name>.sol/<Name>.json)

    Returns:
        (abi, bytecode)

    Raises:
        DeploymentError: Artifact missing or without deployable bytecode
    """
    path = Path(path)

    if not path.exists():
        logger.info("Run 'npx hardhat compile' in the project directory first")
        raise DeploymentError(f"Contract artifact not found: {path}")

    try:
        with open(path, 'r') as f:
            contract_json = json.load(f)
    except json.JSONDecodeError as e:
        raise DeploymentError(f"Contract artifact is not valid JSON: {e}")

    bytecode = contract_json.get('bytecode') or ''
    if bytecode in ('', '0x'):
        raise DeploymentError(f"Contract artifact has no bytecode: {path}")

    abi = contract_json.get('abi')
    if not abi:
        # Use minimal ABI if the artifact was stripped
        logger.warning("Artifact has no ABI, using minimal ERC-20 ABI")
        abi = get_minimal_erc20_abi()

    return abi, bytecode


def get_minimal_erc20_abi() -> List[Dict]:
    """
    Minimal read-only ERC-20 ABI
    Used when compiled artifacts carry no ABI
    """
    return [
        {
            "inputs": [],
            "name": "name",
            "outputs": [{"name": "", "type": "string"}],
            "stateMutability": "view",
            "type": "function"
        },
        {
            "inputs": [],
            "name": "symbol",
            "outputs": [{"name": "", "type": "string"}],
            "stateMutability": "view",
            "type": "function"
        },
        {
            "inputs": [],
            "name": "totalSupply",
            "outputs": [{"name": "", "type": "uint256"}],
            "stateMutability": "view",
            "type": "function"
        },
        {
            "inputs": [{"name": "account", "type": "address"}],
            "name": "balanceOf",
            "outputs": [{"name": "", "type": "uint256"}],
            "stateMutability": "view",
            "type": "function"
        }
    ]
