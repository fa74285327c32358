from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from leasechain.core.config import settings
from leasechain.deploy.pipeline import ContractDeployer
from leasechain.generation.generator import ContractGenerator


@lru_cache
def get_generator() -> ContractGenerator:
    return ContractGenerator(settings)


@lru_cache
def get_deployer() -> ContractDeployer:
    return ContractDeployer(settings)


GeneratorDep = Annotated[ContractGenerator, Depends(get_generator)]
DeployerDep = Annotated[ContractDeployer, Depends(get_deployer)]
