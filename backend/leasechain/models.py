from typing import Any

from pydantic import BaseModel, ConfigDict, Field


# Generic message
class Message(BaseModel):
    message: str


class ErrorMessage(Message):
    error: str | None = None


# Generation
class GenerateRequest(BaseModel):
    agreement: str | None = None


# Deployment. Field names follow the camelCase JSON bodies of the front end.
class DeployRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    chain_name: str | None = Field(default=None, alias="chainName")
    contract: str | None = None
    constructor_arguments: list[Any] | None = Field(default=None, alias="constructorArguments")


class DeploymentData(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    hash: str
    link_to_block_explorer: str = Field(alias="linkToBlockExplorer")
    abi: list[dict[str, Any]]


class DeployResponse(Message):
    data: DeploymentData


# Chains
class ChainPublic(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str
    chain_id: int = Field(alias="chainId")
    explorer_url: str | None = Field(default=None, alias="explorerUrl")
