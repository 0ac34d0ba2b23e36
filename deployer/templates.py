"""
Project Templates
Fixed file contents for the scaffolded Hardhat project
"""

import json
import textwrap
from string import Template

from .config import (
    CHAIN_ID,
    DEPLOYMENT_INFO_FILE,
    EXPLORER_ADDRESS_URL,
    HARDHAT_NETWORK,
    NETWORK_LABEL,
)


def _quote(value: str) -> str:
    """Quote a string so it is a valid literal in both JS and Python"""
    return json.dumps(value)


def render_package_json(project_name: str) -> str:
    """package.json for the Hardhat project"""
    package_json = {
        'name': project_name,
        'version': '1.0.0',
        'scripts': {
            'compile': 'npx hardhat compile',
            'deploy': 'python scripts/deploy.py',
            'test': 'npx hardhat test'
        },
        'devDependencies': {
            '@openzeppelin/contracts': '^5.0.2',
            'hardhat': '^2.22.0'
        }
    }

    return json.dumps(package_json, indent=2) + "\n"


_HARDHAT_CONFIG = Template(textwrap.dedent('''\
    module.exports = {
      solidity: "0.8.20",
      networks: {
        $network: {
          url: $rpc_url,
          chainId: $chain_id,
          accounts: process.env.PRIVATE_KEY ? [process.env.PRIVATE_KEY] : []
        }
      }
    };
'''))


def render_hardhat_config(rpc_url: str) -> str:
    """hardhat.config.js pointing the baseSepolia network at the RPC endpoint"""
    return _HARDHAT_CONFIG.substitute(
        network=HARDHAT_NETWORK,
        rpc_url=_quote(rpc_url),
        chain_id=CHAIN_ID
    )


_CONTRACT_SOURCE = textwrap.dedent('''\
    // SPDX-License-Identifier: MIT
    pragma solidity ^0.8.20;

    import "@openzeppelin/contracts/token/ERC20/ERC20.sol";
    import "@openzeppelin/contracts/access/Ownable.sol";

    contract AIR is ERC20, Ownable {
        constructor() ERC20("AIR Token", "AIR") Ownable(msg.sender) {
            _mint(msg.sender, 1000000 * 10**decimals()); // 1 million tokens
        }

        function mint(address to, uint256 amount) public onlyOwner {
            _mint(to, amount);
        }
    }
''')


def render_contract_source() -> str:
    """contracts/AIR.sol"""
    return _CONTRACT_SOURCE


_DEPLOY_SCRIPT = Template(textwrap.dedent('''\
    """
    AIR Token Deployment Script
    Deploys the compiled AIR contract and records the result
    """

    import os
    import sys
    import json
    from datetime import datetime, timezone
    from web3 import Web3
    from eth_account import Account
    from loguru import logger
    from dotenv import load_dotenv

    load_dotenv()

    ARTIFACT_PATH = "artifacts/contracts/AIR.sol/AIR.json"
    DEPLOYMENT_INFO_PATH = $deployment_info
    DEFAULT_RPC_URL = $rpc_url
    NETWORK = $network_label


    def deploy():
        """Deploy AIR and write deployment info"""
        logger.info("🚀 Starting AIR token deployment...")

        private_key = os.getenv('PRIVATE_KEY')
        rpc_url = os.getenv('RPC_URL', DEFAULT_RPC_URL)

        if not private_key:
            logger.error("PRIVATE_KEY must be set")
            return 1

        w3 = Web3(Web3.HTTPProvider(rpc_url))
        account = Account.from_key(private_key)
        logger.info(f"Deployer: {account.address}")

        balance = w3.eth.get_balance(account.address)
        logger.info(f"Balance: {w3.from_wei(balance, 'ether')} ETH")

        with open(ARTIFACT_PATH, 'r') as f:
            artifact = json.load(f)

        AIR = w3.eth.contract(abi=artifact['abi'], bytecode=artifact['bytecode'])

        transaction = AIR.constructor().build_transaction({
            'from': account.address,
            'nonce': w3.eth.get_transaction_count(account.address),
            'chainId': w3.eth.chain_id
        })

        signed_tx = account.sign_transaction(transaction)
        tx_hash = w3.eth.send_raw_transaction(signed_tx.raw_transaction)
        logger.info(f"Transaction sent: {w3.to_hex(tx_hash)}")

        receipt = w3.eth.wait_for_transaction_receipt(tx_hash)

        if receipt['status'] != 1:
            logger.error(f"❌ Deployment reverted: {w3.to_hex(tx_hash)}")
            return 1

        address = receipt['contractAddress']
        air = w3.eth.contract(address=address, abi=artifact['abi'])

        logger.success(f"✅ AIR Token deployed to: {address}")
        logger.info(f"Name: {air.functions.name().call()}")
        logger.info(f"Symbol: {air.functions.symbol().call()}")
        logger.info(f"Total Supply: {w3.from_wei(air.functions.totalSupply().call(), 'ether')}")

        deployment_info = {
            'address': address,
            'deployer': account.address,
            'network': NETWORK,
            'timestamp': datetime.now(timezone.utc).isoformat()
        }

        with open(DEPLOYMENT_INFO_PATH, 'w') as f:
            json.dump(deployment_info, f, indent=2)

        logger.info(f"📄 Deployment info saved to {DEPLOYMENT_INFO_PATH}")
        return 0


    if __name__ == "__main__":
        try:
            sys.exit(deploy())
        except Exception as e:
            logger.error(f"Deployment error: {e}")
            sys.exit(1)
'''))


def render_deploy_script(rpc_url: str) -> str:
    """scripts/deploy.py, run from the project directory"""
    return _DEPLOY_SCRIPT.substitute(
        deployment_info=_quote(DEPLOYMENT_INFO_FILE),
        rpc_url=_quote(rpc_url),
        network_label=_quote(NETWORK_LABEL)
    )


def render_env_template(rpc_url: str) -> str:
    """.env.example"""
    return f"PRIVATE_KEY=\nRPC_URL={rpc_url}\n"


def render_gitignore() -> str:
    """.gitignore"""
    return "\n".join([
        'node_modules/',
        '.env',
        DEPLOYMENT_INFO_FILE,
        'artifacts/',
        'cache/',
        '__pycache__/'
    ]) + "\n"


_MONITOR_SCRIPT = Template(textwrap.dedent('''\
    """
    AIR Token Monitor
    One-shot read of the deployed contract
    """

    import json
    from web3 import Web3
    from loguru import logger

    RPC_URL = $rpc_url
    DEPLOYMENT_INFO_PATH = $deployment_info
    EXPLORER_URL = $explorer_url

    NAME_ABI = [{
        "inputs": [],
        "name": "name",
        "outputs": [{"name": "", "type": "string"}],
        "stateMutability": "view",
        "type": "function"
    }]


    def monitor():
        """Read the token name and print the explorer link"""
        w3 = Web3(Web3.HTTPProvider(RPC_URL))

        try:
            with open(DEPLOYMENT_INFO_PATH, 'r') as f:
                deployment_info = json.load(f)

            address = deployment_info['address']
            contract = w3.eth.contract(
                address=Web3.to_checksum_address(address),
                abi=NAME_ABI
            )

            logger.info("👀 Monitoring AIR token...")
            logger.info(f"Contract: {address}")
            logger.info(f"Name: {contract.functions.name().call()}")
            logger.info(f"BaseScan: {EXPLORER_URL}{address}")

        except Exception as e:
            logger.warning(f"Monitoring error: {e}")


    if __name__ == "__main__":
        monitor()
'''))


def render_monitor_script(rpc_url: str) -> str:
    """monitor.py, run from the project directory"""
    return _MONITOR_SCRIPT.substitute(
        rpc_url=_quote(rpc_url),
        deployment_info=_quote(DEPLOYMENT_INFO_FILE),
        explorer_url=_quote(EXPLORER_ADDRESS_URL)
    )
