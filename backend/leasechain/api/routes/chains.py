from fastapi import APIRouter

from leasechain.api.deps import DeployerDep
from leasechain.models import ChainPublic

router = APIRouter()


@router.get("", response_model=list[ChainPublic])
def read_chains(deployer: DeployerDep) -> list[ChainPublic]:
    """
    List the chains contracts can be deployed to.
    """
    return [
        ChainPublic(name=chain.name, chain_id=chain.chain_id, explorer_url=chain.explorer_url)
        for chain in deployer.chains
    ]
