import logging
from typing import Optional

from autogen_agentchat.agents import AssistantAgent
from autogen_core.models import ChatCompletionClient
from autogen_ext.models.openai import AzureOpenAIChatCompletionClient, OpenAIChatCompletionClient

from shared.config import settings

logger = logging.getLogger(__name__)

def _model_client() -> ChatCompletionClient:
    if settings.az_endpoint:
        return AzureOpenAIChatCompletionClient(
            azure_deployment=settings.az_deployment,
            model=settings.openai_model,
            api_version=settings.az_api_version,
            azure_endpoint=settings.az_endpoint,
            api_key=settings.az_api_key,
        )
    return OpenAIChatCompletionClient(
        model=settings.openai_model,
        api_key=settings.openai_api_key,
    )

class AgentRegistry:
    """Holds the shared model client and hands out single-use agents.

    An AssistantAgent keeps its conversation history between runs, so every
    request gets a fresh agent on top of the one shared client.
    """

    def __init__(self):
        self._client: Optional[ChatCompletionClient] = None

    async def init(self):
        if self._client is not None: return
        self._client = _model_client()
        logger.info(f"LLM client ready: model={settings.openai_model} azure={bool(settings.az_endpoint)}")

    async def build(self, name: str, system_message: str) -> AssistantAgent:
        await self.init()
        return AssistantAgent(
            name=name,
            model_client=self._client,
            system_message=system_message,
            tools=[],
            reflect_on_tool_use=False,
            model_client_stream=False,
        )

    async def close(self):
        if self._client is None: return
        await self._client.close()
        self._client = None

agent_registry = AgentRegistry()
