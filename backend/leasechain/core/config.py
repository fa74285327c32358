import json
from typing import Annotated, Any, Literal

from pydantic import AnyUrl, BeforeValidator, SecretStr, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def parse_cors(v: Any) -> list[str] | str:
    if isinstance(v, str) and not v.startswith("["):
        return [i.strip() for i in v.split(",") if i.strip()]
    elif isinstance(v, list | str):
        return v
    raise ValueError(v)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        # Use top level .env file (one level above ./backend/)
        env_file="../.env",
        env_ignore_empty=True,
        extra="ignore",
    )

    PROJECT_NAME: str = "leasechain"
    ENVIRONMENT: Literal["local", "staging", "production"] = "local"
    API_PREFIX: str = ""
    LOG_LEVEL: str = "INFO"

    BACKEND_CORS_ORIGINS: Annotated[
        list[AnyUrl] | str, BeforeValidator(parse_cors)
    ] = []
    FRONTEND_HOST: str = "http://localhost:3000"

    @computed_field  # type: ignore[prop-decorator]
    @property
    def all_cors_origins(self) -> list[str]:
        return [str(origin).rstrip("/") for origin in self.BACKEND_CORS_ORIGINS] + [
            self.FRONTEND_HOST
        ]

    # LLM provider. Any OpenAI-compatible chat completions endpoint works;
    # the defaults point at Anthropic's compatibility layer.
    LLM_API_KEY: str | None = None
    LLM_BASE_URL: str | None = "https://api.anthropic.com/v1/"
    MODEL_DEFAULT: str = "claude-3-opus-20240229"
    GENERATION_MAX_TOKENS: int = 4000

    # Deployment
    DEPLOYER_PRIVATE_KEY: SecretStr | None = None
    SOLC_VERSION: str = "0.8.24"
    CHAIN_RPC_URLS: dict[str, str] = {}
    RECEIPT_TIMEOUT_SECONDS: int = 180

    # Whether 500 responses carry the raw exception text in `error`.
    EXPOSE_ERROR_DETAILS: bool = True

    @field_validator("CHAIN_RPC_URLS", mode="before")
    @classmethod
    def parse_rpc_urls(cls, v: Any) -> Any:
        if isinstance(v, str):
            return json.loads(v) if v.strip() else {}
        return v


settings = Settings()  # type: ignore
