import logging

from ape import networks

from deployment.constants import CONSTRUCTOR_PARAMS_DIR
from deployment.deployer import DeployedResource
from deployment.params import DeploymentParams
from deployment.providers import EtherscanVerificationProvider
from deployment.registry import read_addresses, registry_filepath
from deployment.utils import ConstantBackoff, verify_contracts

CONSTRUCTOR_PARAMS_FILEPATH = CONSTRUCTOR_PARAMS_DIR / "farming.yml"


def main():
    """Re-runs explorer verification for the addresses recorded on the active network."""
    logging.basicConfig(level=logging.INFO)

    network = networks.provider.network.name
    params = DeploymentParams.from_yaml(filepath=CONSTRUCTOR_PARAMS_FILEPATH)
    addresses = read_addresses(registry_filepath(network=network))
    resources = [DeployedResource(name=name, address=address) for name, address in addresses.items()]
    return verify_contracts(
        resources,
        provider=EtherscanVerificationProvider(),
        cooldown=ConstantBackoff(params.verification_cooldown),
    )
