"""
Quick Deploy
Direct contract-creation transaction over JSON-RPC, no project scaffolding
"""

from typing import NamedTuple, Optional
from web3 import Web3
from eth_account import Account
from loguru import logger

from .artifacts import load_contract_artifact
from .config import DeployerConfig
from .errors import DeploymentError


class QuickDeployResult(NamedTuple):
    address: str
    tx_hash: str


def quick_deploy(config: DeployerConfig, w3: Optional[Web3] = None) -> QuickDeployResult:
    """
    Deploy the compiled AIR contract straight through the RPC endpoint

    Args:
        config: Deployer configuration
        w3: Web3 instance (None = HTTPProvider on config.rpc_url)

    Returns:
        Contract address and transaction hash

    Raises:
        DeploymentError: Missing credential, missing artifact or reverted deployment
    """
    logger.info("⚡ QUICK DEPLOYMENT MODE (Direct web3.py)")

    if not config.has_credential():
        logger.error("❌ Please set PRIVATE_KEY environment variable")
        raise DeploymentError("PRIVATE_KEY not set")

    abi, bytecode = load_contract_artifact(config.artifact_path)

    if w3 is None:
        w3 = Web3(Web3.HTTPProvider(config.rpc_url))

    account = Account.from_key(config.private_key)

    logger.info(f"Deployer: {account.address}")
    balance = w3.eth.get_balance(account.address)
    logger.info(f"Balance: {w3.from_wei(balance, 'ether')} ETH")

    factory = w3.eth.contract(abi=abi, bytecode=bytecode)

    # Gas and fee fields are filled in by web3.py
    transaction = factory.constructor().build_transaction({
        'from': account.address,
        'nonce': w3.eth.get_transaction_count(account.address),
        'chainId': w3.eth.chain_id
    })

    logger.info("🚀 Deploying...")
    signed_tx = account.sign_transaction(transaction)
    tx_hash = w3.to_hex(w3.eth.send_raw_transaction(signed_tx.raw_transaction))

    logger.info(f"Transaction sent: {tx_hash}")
    receipt = w3.eth.wait_for_transaction_receipt(tx_hash)

    if receipt['status'] != 1:
        raise DeploymentError(f"Deployment transaction reverted: {tx_hash}")

    address = receipt['contractAddress']

    logger.success(f"✅ Contract deployed to: {address}")
    logger.success(f"Transaction hash: {tx_hash}")

    return QuickDeployResult(address=address, tx_hash=tx_hash)
