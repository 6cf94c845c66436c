import os

from ape import accounts, networks, project

from deployment.constants import DEPLOYER_ACCOUNT_ENV, LOCAL_BLOCKCHAIN_ENVIRONMENTS


def get_deployer_account(network_name: str):
    if network_name in LOCAL_BLOCKCHAIN_ENVIRONMENTS:
        return accounts.test_accounts[0]
    alias = os.environ.get(DEPLOYER_ACCOUNT_ENV)
    if not alias:
        raise ValueError(
            f"Set {DEPLOYER_ACCOUNT_ENV} to the ape account alias used on '{network_name}'"
        )
    return accounts.load(alias)


class ApeResourceFactory:
    """Deploys project contracts and transacts with them through ape."""

    def __init__(self, account, contracts=project):
        self.account = account
        self.contracts = contracts
        self._instances = {}

    def create(self, template: str, *args) -> str:
        container = getattr(self.contracts, template)
        instance = container.deploy(*args, sender=self.account)
        self._instances[instance.address] = instance
        return instance.address

    def call(self, address: str, method: str, *args):
        instance = self._instances[address]
        return getattr(instance, method)(*args, sender=self.account)


class EtherscanVerificationProvider:
    """
    Publishes contract source through the explorer plugin of the active network.
    The explorer reads constructor arguments from the creation transaction.
    """

    def __init__(self, explorer=None):
        self.explorer = explorer or networks.provider.network.explorer
        if self.explorer is None:
            raise ValueError(f"No explorer configured for {networks.provider.network.name}")

    def publish(self, address: str, constructor_args=()):
        return self.explorer.publish_contract(address)
