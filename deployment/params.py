from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional

import yaml

from deployment.constants import (
    CONTRACT_NAMES,
    FAKE_MONTH,
    REWARD_TOKEN,
    STAKING_TOKEN,
    VERIFICATION_COOLDOWN,
)

TOKEN_NAMES = (REWARD_TOKEN, STAKING_TOKEN)


@dataclass(frozen=True)
class ContractParams:
    """Template name plus the static constructor values of one contract."""

    template: str
    name: Optional[str] = None
    symbol: Optional[str] = None


@dataclass(frozen=True)
class DeploymentParams:
    contracts: Dict[str, ContractParams]
    period: int = FAKE_MONTH
    verification_cooldown: float = VERIFICATION_COOLDOWN
    verify: bool = True

    def __post_init__(self):
        if not isinstance(self.period, int) or self.period <= 0:
            raise ValueError(f"period must be a positive integer, got {self.period!r}")
        if self.verification_cooldown < 0:
            raise ValueError(
                f"verification_cooldown cannot be negative, got {self.verification_cooldown!r}"
            )
        missing = [name for name in CONTRACT_NAMES if name not in self.contracts]
        if missing:
            raise ValueError(f"Missing constructor parameters for {', '.join(missing)}")
        for name in TOKEN_NAMES:
            token = self.contracts[name]
            if not token.name or not token.symbol:
                raise ValueError(f"'{name}' requires both a name and a symbol")

    def template(self, name: str) -> str:
        return self.contracts[name].template

    def token_args(self, name: str) -> tuple:
        token = self.contracts[name]
        return token.name, token.symbol

    @classmethod
    def from_dict(cls, config: dict, verify: bool = True) -> "DeploymentParams":
        settings = config.get("deployment") or {}
        contracts_config = config.get("contracts")
        if not contracts_config:
            raise ValueError("Constructor parameters must define a 'contracts' section")

        contracts = {}
        for name, values in contracts_config.items():
            if name not in CONTRACT_NAMES:
                raise ValueError(f"Unknown contract '{name}' in constructor parameters")
            values = values or {}
            if "template" not in values:
                raise ValueError(f"Contract '{name}' has no template")
            contracts[name] = ContractParams(
                template=values["template"],
                name=values.get("name"),
                symbol=values.get("symbol"),
            )

        return cls(
            contracts=contracts,
            period=settings.get("period", FAKE_MONTH),
            verification_cooldown=settings.get("verification_cooldown", VERIFICATION_COOLDOWN),
            verify=verify,
        )

    @classmethod
    def from_yaml(cls, filepath: Path, verify: bool = True) -> "DeploymentParams":
        with open(filepath, "r") as file:
            config = yaml.safe_load(file) or {}
        return cls.from_dict(config, verify=verify)
