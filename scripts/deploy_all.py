#!/usr/bin/python3

import logging

from ape import networks

from deployment.constants import CONSTRUCTOR_PARAMS_DIR, LOCAL_BLOCKCHAIN_ENVIRONMENTS
from deployment.deployer import FarmingDeployer, run_deployment
from deployment.params import DeploymentParams
from deployment.providers import (
    ApeResourceFactory,
    EtherscanVerificationProvider,
    get_deployer_account,
)
from deployment.utils import ConstantBackoff

CONSTRUCTOR_PARAMS_FILEPATH = CONSTRUCTOR_PARAMS_DIR / "farming.yml"

logger = logging.getLogger("deploy_all")


def main():
    """
    Deploys the fake reward and staking tokens, the farming contract and the
    strategy mock, records their addresses and verifies them on the explorer.

    ape run deploy_all --network ethereum:sepolia:infura
    """
    logging.basicConfig(level=logging.INFO)

    network = networks.provider.network.name
    try:
        params = DeploymentParams.from_yaml(
            filepath=CONSTRUCTOR_PARAMS_FILEPATH,
            verify=network not in LOCAL_BLOCKCHAIN_ENVIRONMENTS,
        )
        factory = ApeResourceFactory(account=get_deployer_account(network))
        verifier = EtherscanVerificationProvider() if params.verify else None
    except Exception as error:
        logger.exception("Cannot configure deployment on %s: %r", network, error)
        return None

    return run_deployment(
        FarmingDeployer(factory=factory, params=params),
        network=network,
        verifier=verifier,
        cooldown=ConstantBackoff(params.verification_cooldown),
        verify=params.verify,
    )
