import itertools

import pytest

from deployment.params import ContractParams, DeploymentParams


class FakeFactory:
    """Returns canned addresses and records every create/call in order."""

    def __init__(self, addresses=None, fail_on=None):
        self._addresses = iter(addresses) if addresses else self._generated()
        self.fail_on = fail_on
        self.log = []

    @staticmethod
    def _generated():
        for index in itertools.count(1):
            yield f"0x{index:040x}"

    def create(self, template, *args):
        if template == self.fail_on:
            raise RuntimeError(f"{template} deployment reverted")
        address = next(self._addresses)
        self.log.append(("create", template, args, address))
        return address

    def call(self, address, method, *args):
        self.log.append(("call", address, method, args))
        return True


class FakeVerifier:
    def __init__(self, failures=()):
        self.failures = set(failures)
        self.published = []

    def publish(self, address, constructor_args=()):
        self.published.append((address, tuple(constructor_args)))
        if len(self.published) in self.failures:
            raise RuntimeError("Contract source code already verified")


class RecordingCooldown:
    def __init__(self):
        self.calls = 0

    def __call__(self):
        self.calls += 1


@pytest.fixture
def params():
    return DeploymentParams(
        contracts={
            "rewardToken": ContractParams("FakeERC20", "FakeRewardToken", "FakeRewardToken"),
            "stakingToken": ContractParams("FakeERC20", "FakeStakingToken", "FakeStakingToken"),
            "farming": ContractParams("NewFarming"),
            "strategy": ContractParams("StrategyMock"),
        },
        period=420,
        verification_cooldown=0,
    )


@pytest.fixture
def scenario_factory():
    return FakeFactory(addresses=["0xAAA", "0xBBB", "0xCCC", "0xDDD"])


@pytest.fixture
def verifier():
    return FakeVerifier()


@pytest.fixture
def cooldown():
    return RecordingCooldown()
