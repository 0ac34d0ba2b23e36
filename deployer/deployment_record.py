"""
Deployment Record
Result of a successful deployment, stored as deployment-info.json
"""

import json
from datetime import datetime
from pathlib import Path
from typing import Dict
from web3 import Web3

from .config import EXPLORER_ADDRESS_URL, NETWORK_LABEL
from .errors import DeploymentError


def parse_timestamp(value: str) -> datetime:
    """Parse an ISO-8601 timestamp, accepting a trailing 'Z'"""
    if value.endswith('Z'):
        value = value[:-1] + '+00:00'
    return datetime.fromisoformat(value)


class DeploymentRecord:
    """Contract address, deployer, network label and timestamp"""

    FIELDS = ('address', 'deployer', 'network', 'timestamp')

    def __init__(self, address: str, deployer: str, network: str, timestamp: str):
        self.address = address
        self.deployer = deployer
        self.network = network
        self.timestamp = timestamp

    @classmethod
    def from_dict(cls, data: Dict) -> "DeploymentRecord":
        missing = [field for field in cls.FIELDS if field not in data]
        if missing:
            raise DeploymentError(f"Deployment record missing fields: {', '.join(missing)}")

        return cls(**{field: data[field] for field in cls.FIELDS})

    def to_dict(self) -> Dict[str, str]:
        return {field: getattr(self, field) for field in self.FIELDS}

    def validate(self) -> "DeploymentRecord":
        """
        Check address syntax, timestamp format and network label

        Raises:
            DeploymentError: If any field is invalid
        """
        for field in ('address', 'deployer'):
            value = getattr(self, field)
            if not isinstance(value, str) or not Web3.is_address(value):
                raise DeploymentError(f"Invalid {field} in deployment record: {value!r}")

        try:
            parse_timestamp(self.timestamp)
        except (TypeError, ValueError, AttributeError):
            raise DeploymentError(f"Invalid timestamp in deployment record: {self.timestamp!r}")

        if self.network != NETWORK_LABEL:
            raise DeploymentError(
                f"Unexpected network in deployment record: {self.network!r} "
                f"(expected {NETWORK_LABEL!r})"
            )

        return self

    def explorer_url(self) -> str:
        return f"{EXPLORER_ADDRESS_URL}{self.address}"

    @classmethod
    def load(cls, path: Path) -> "DeploymentRecord":
        """
        Load and validate a deployment record

        Raises:
            DeploymentError: File missing, not JSON, or invalid
        """
        path = Path(path)

        if not path.exists():
            raise DeploymentError(f"Deployment record not found: {path}")

        try:
            with open(path, 'r') as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise DeploymentError(f"Deployment record is not valid JSON: {e}")

        if not isinstance(data, dict):
            raise DeploymentError("Deployment record must be a JSON object")

        return cls.from_dict(data).validate()

    def __repr__(self):
        return f"DeploymentRecord(address={self.address!r}, network={self.network!r})"
