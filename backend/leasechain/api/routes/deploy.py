import logging

from fastapi import APIRouter

from leasechain.api.deps import DeployerDep
from leasechain.deploy.pipeline import DeploymentRequest
from leasechain.errors import ApiError, UpstreamError
from leasechain.models import DeploymentData, DeployRequest, DeployResponse, ErrorMessage, Message

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post(
    "",
    response_model=DeployResponse,
    responses={
        400: {"model": Message, "description": "Invalid input or failed transaction"},
        500: {"model": ErrorMessage, "description": "Compilation or network error"},
    },
)
async def deploy_contract(body: DeployRequest, deployer: DeployerDep) -> DeployResponse:
    """
    Compile the contract source and deploy it to the selected chain.
    """
    request = DeploymentRequest(
        chain_name=body.chain_name,
        contract=body.contract,
        constructor_arguments=body.constructor_arguments or [],
    )
    try:
        result = await deployer.deploy(request)
    except ApiError:
        raise
    except Exception as exc:
        logger.exception("Contract deployment failed")
        raise UpstreamError("Error while deploying", error=str(exc)) from exc

    return DeployResponse(
        message="Contract deployed successfully",
        data=DeploymentData(
            hash=result.hash,
            link_to_block_explorer=result.link_to_block_explorer,
            abi=result.abi,
        ),
    )
