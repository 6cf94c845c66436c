import json
import logging
from pathlib import Path
from typing import Dict

from deployment.constants import ADDRESSES_DIR, REGISTRY_NAMES

logger = logging.getLogger(__name__)


def registry_filepath(network: str, directory: Path = ADDRESSES_DIR) -> Path:
    return Path(directory) / f"{network}Addresses.json"


def write_addresses(deployments, network: str, directory: Path = ADDRESSES_DIR) -> Path:
    """Writes the deployed addresses for `network`, replacing any previous record."""
    addresses = deployments.addresses()
    record = {REGISTRY_NAMES[name]: address for name, address in addresses.items()}

    filepath = registry_filepath(network=network, directory=directory)
    filepath.parent.mkdir(parents=True, exist_ok=True)
    with open(filepath, "w") as file:
        json.dump(record, file, indent=4)
    logger.info("Addresses saved to %s", filepath)
    return filepath


def read_addresses(filepath: Path) -> Dict[str, str]:
    """Returns the logical name -> address mapping of a persisted record."""
    with open(filepath, "r") as file:
        record = json.load(file)
    logical_names = {key: name for name, key in REGISTRY_NAMES.items()}
    unknown = set(record) - set(logical_names)
    if unknown:
        raise ValueError(f"Unexpected entries in {filepath}: {', '.join(sorted(unknown))}")
    return {logical_names[key]: address for key, address in record.items()}
