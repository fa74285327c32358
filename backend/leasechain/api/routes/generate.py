import logging
from typing import Any

from fastapi import APIRouter

from leasechain.api.deps import GeneratorDep
from leasechain.errors import ApiError, UpstreamError
from leasechain.models import ErrorMessage, GenerateRequest, Message

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post(
    "",
    responses={
        400: {"model": Message, "description": "Missing agreement"},
        500: {"model": ErrorMessage, "description": "Provider error"},
    },
)
async def generate_contract(body: GenerateRequest, generator: GeneratorDep) -> Any:
    """
    Draft a Solidity contract from a lease agreement. Returns the provider's raw completion.
    """
    try:
        return await generator.generate(body.agreement)
    except ApiError:
        raise
    except Exception as exc:
        logger.exception("Contract generation failed")
        raise UpstreamError("Error while generating", error=str(exc)) from exc
