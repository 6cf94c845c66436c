from pathlib import Path

import deployment

LOCAL_BLOCKCHAIN_ENVIRONMENTS = ["local"]
DEPLOYMENT_DIR = Path(deployment.__file__).parent
CONSTRUCTOR_PARAMS_DIR = DEPLOYMENT_DIR / "constructor_params"
ARTIFACTS_DIR = DEPLOYMENT_DIR / "artifacts"
ADDRESSES_DIR = ARTIFACTS_DIR / "addresses"
DEPLOYER_ACCOUNT_ENV = "DEPLOYER_ACCOUNT"

# a "month" compressed to 7 minutes for test networks
FAKE_MONTH = 7 * 60
VERIFICATION_COOLDOWN = 16

REWARD_TOKEN = "rewardToken"
STAKING_TOKEN = "stakingToken"
FARMING = "farming"
STRATEGY = "strategy"
CONTRACT_NAMES = (REWARD_TOKEN, STAKING_TOKEN, FARMING, STRATEGY)

# logical name -> key in the persisted address record
REGISTRY_NAMES = {
    REWARD_TOKEN: "fakeRewardToken",
    STAKING_TOKEN: "fakeStakingToken",
    FARMING: "farming",
    STRATEGY: "fakeStrategy",
}

SET_STRATEGY = "setStrategy"
