import logging
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterator, List, Optional, Tuple

from deployment.constants import (
    ADDRESSES_DIR,
    FARMING,
    REWARD_TOKEN,
    SET_STRATEGY,
    STAKING_TOKEN,
    STRATEGY,
)
from deployment.params import DeploymentParams
from deployment.registry import write_addresses
from deployment.utils import (
    VerificationOutcome,
    next_timestamp_divisible_by,
    skip_verification,
    verify_contracts,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DeployedResource:
    name: str
    address: str
    constructor_args: Tuple = ()


@dataclass(frozen=True)
class DeploymentSet:
    reward_token: DeployedResource
    staking_token: DeployedResource
    farming: DeployedResource
    strategy: DeployedResource
    start_time: int

    def resources(self) -> Iterator[DeployedResource]:
        """Resources in creation order."""
        yield self.reward_token
        yield self.staking_token
        yield self.farming
        yield self.strategy

    def addresses(self) -> Dict[str, str]:
        return {resource.name: resource.address for resource in self.resources()}


@dataclass(frozen=True)
class DeploymentResult:
    deployments: DeploymentSet
    registry_filepath: Path
    outcomes: List[VerificationOutcome] = field(default_factory=list)


class FarmingDeployer:
    """
    Deploys the reward token, staking token, farming contract and strategy,
    then binds the strategy to the farming contract.

    `factory` must provide `create(template, *args) -> address` and
    `call(address, method, *args)`, both returning only once the transaction
    is confirmed. Nothing here is idempotent: every call to `deploy` creates
    four new contracts.
    """

    def __init__(self, factory, params: DeploymentParams, clock=time.time):
        self.factory = factory
        self.params = params
        self.clock = clock

    def _create(self, name: str, *args) -> DeployedResource:
        template = self.params.template(name)
        logger.info("Deploying %s (%s)...", name, template)
        address = self.factory.create(template, *args)
        logger.info("%s deployed to: %s", template, address)
        return DeployedResource(name=name, address=address, constructor_args=tuple(args))

    def deploy(self) -> DeploymentSet:
        start_time = next_timestamp_divisible_by(self.params.period, self.clock())
        logger.info("Farming starts at %d", start_time)

        reward_token = self._create(REWARD_TOKEN, *self.params.token_args(REWARD_TOKEN))
        staking_token = self._create(STAKING_TOKEN, *self.params.token_args(STAKING_TOKEN))

        farming = self._create(FARMING, reward_token.address, staking_token.address, start_time)
        strategy = self._create(STRATEGY, staking_token.address, farming.address)

        logger.info("Setting strategy %s on farming %s", strategy.address, farming.address)
        self.factory.call(farming.address, SET_STRATEGY, strategy.address)

        return DeploymentSet(
            reward_token=reward_token,
            staking_token=staking_token,
            farming=farming,
            strategy=strategy,
            start_time=start_time,
        )


def run_deployment(
    deployer: FarmingDeployer,
    network: str,
    verifier,
    cooldown,
    verify: bool = True,
    addresses_dir: Path = ADDRESSES_DIR,
) -> Optional[DeploymentResult]:
    """
    Deploys, records the addresses for `network` and then verifies.

    Deployment and recording failures end the run before verification and
    return None. Verification failures never end the run.
    """
    try:
        deployments = deployer.deploy()
        filepath = write_addresses(deployments, network=network, directory=addresses_dir)
    except Exception as error:
        logger.exception("Deployment on %s failed: %r", network, error)
        return None

    resources = list(deployments.resources())
    try:
        if verify:
            outcomes = verify_contracts(resources, provider=verifier, cooldown=cooldown)
        else:
            outcomes = skip_verification(resources)
    except Exception as error:
        logger.exception("Verification phase aborted: %r", error)
        outcomes = []

    logger.info("Success")
    return DeploymentResult(deployments=deployments, registry_filepath=filepath, outcomes=outcomes)
