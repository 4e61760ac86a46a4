from ollama import Client
from ollama import ChatResponse as OllamaChatResponseType
from typing import Any, Dict, List, Optional, Union
from app.core.config import settings
from app.core.exceptions import AdvisoryServiceError
import asyncio
import logging

logger = logging.getLogger(__name__)

class LLMProviderService:
    def __init__(self, client: Optional[Client] = None):
        """Initializes the LLMProviderService.

        Sets up the Ollama client from application settings. When an
        ``ADVISORY_API_KEY`` is configured it is sent as a bearer token so the
        same client can talk to a hosted, authenticated endpoint.

        Args:
            client (Client, optional): A preconfigured client, mainly for tests.
        """
        headers = {}
        if settings.ADVISORY_API_KEY:
            headers["Authorization"] = f"Bearer {settings.ADVISORY_API_KEY}"
        self.client = client or Client(
            host=settings.OLLAMA_HOST,
            timeout=settings.ADVISORY_TIMEOUT_SECONDS,
            headers=headers,
        )
        self.model_name = settings.LLM_MODEL
        logger.info("LLMProviderService initialized with model: %s on host: %s", self.model_name, settings.OLLAMA_HOST)

    async def chat(
        self,
        messages: List[Dict[str, str]],
        format_type: Optional[Union[str, Dict[str, Any]]] = None,
    ) -> OllamaChatResponseType:
        """Makes a direct, low-level call to the Ollama chat client.

        The blocking client call runs in a worker thread so the event loop
        keeps serving other requests while the model is answering.

        Args:
            messages (List[Dict[str, str]]): A list of message dictionaries.
            format_type (str | dict, optional): ``"json"`` or a JSON schema the
                reply must conform to.

        Returns:
            OllamaChatResponseType: The response object from the Ollama client.

        Raises:
            AdvisoryServiceError: On any transport, authentication or model error.
        """
        chat_kwargs = {
            "model": self.model_name,
            "messages": messages,
        }
        if format_type:
            chat_kwargs["format"] = format_type

        logger.debug("LLM call with model: %s (structured: %s)", self.model_name, bool(format_type))
        try:
            return await asyncio.to_thread(self.client.chat, **chat_kwargs)
        except Exception as e:
            logger.error("Error communicating with LLM (%s): %s", self.model_name, e)
            raise AdvisoryServiceError(f"LLM communication error: {e}") from e

    async def generate_response(
        self,
        prompt: str,
        response_schema: Optional[Dict[str, Any]] = None,
    ) -> str:
        """Generates a complete, non-streamed response from the LLM.

        Args:
            prompt (str): The user's prompt.
            response_schema (dict, optional): JSON schema for a structured reply.

        Returns:
            str: The content of the LLM's response.

        Raises:
            AdvisoryServiceError: If the call fails or the reply has no text content.
        """
        messages_for_llm = [{"role": "user", "content": prompt}]

        response_obj = await self.chat(messages_for_llm, format_type=response_schema)

        message = getattr(response_obj, "message", None)
        content = getattr(message, "content", None)
        if not isinstance(content, str) or not content.strip():
            logger.error("LLM response had an unexpected structure: %r", response_obj)
            raise AdvisoryServiceError("LLM response was received but had no text content.")
        return content

llm_service = LLMProviderService()
