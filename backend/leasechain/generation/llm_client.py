import logging
from typing import Any

from openai import AsyncOpenAI

from leasechain.core.config import Settings

logger = logging.getLogger(__name__)


class LLMClient:
    """Provider-agnostic LLM client using the OpenAI chat completions API spec."""

    def __init__(
        self,
        settings: Settings,
        model_name: str | None = None,
        base_url: str | None = None,
        api_key: str | None = None,
    ):
        self.model_name = model_name or settings.MODEL_DEFAULT
        self.base_url = base_url or settings.LLM_BASE_URL
        self.api_key = api_key or settings.LLM_API_KEY
        self._client: AsyncOpenAI | None = None

    @property
    def client(self) -> AsyncOpenAI:
        # Built on first use so missing credentials surface as a provider error of the call.
        if self._client is None:
            self._client = AsyncOpenAI(base_url=self.base_url, api_key=self.api_key)
        return self._client

    async def complete(
        self, user_prompt: str, *, max_tokens: int, temperature: float
    ) -> dict[str, Any]:
        """
        Send a single user turn and return the provider's response envelope as a dict.
        Only fields the provider actually sent are included. No retries: any
        provider error propagates to the caller.
        """
        logger.info("Issuing completion request to model %s...", self.model_name)
        response = await self.client.chat.completions.create(
            model=self.model_name,
            messages=[{"role": "user", "content": user_prompt}],
            max_tokens=max_tokens,
            temperature=temperature,
        )
        logger.info("Received completion response from %s.", self.model_name)
        return response.model_dump(exclude_unset=True)
