"""Unified LLM client - tries OpenAI first, falls back to Anthropic."""

import json
import logging

from openai import AsyncOpenAI
import anthropic

from stayplanner.config import settings

logger = logging.getLogger(__name__)


class LLMClient:
    """Unified async LLM client with OpenAI primary + Anthropic fallback."""

    def __init__(self):
        self._openai = None
        self._anthropic = None

        if settings.openai_api_key:
            self._openai = AsyncOpenAI(api_key=settings.openai_api_key)
        if settings.anthropic_api_key:
            self._anthropic = anthropic.AsyncAnthropic(api_key=settings.anthropic_api_key)

    @property
    def available(self) -> bool:
        return self._openai is not None or self._anthropic is not None

    async def complete(
        self,
        system: str,
        user: str,
        *,
        max_tokens: int | None = None,
        temperature: float | None = None,
        json_mode: bool = False,
        json_schema: dict | None = None,
        schema_name: str = "response",
    ) -> str:
        """Get a completion from the best available LLM.

        Args:
            system: System prompt
            user: User message
            max_tokens: Max output tokens (defaults to settings)
            temperature: Sampling temperature (defaults to settings)
            json_mode: If True, force a JSON object (OpenAI response_format)
            json_schema: Constrain output to this JSON schema. OpenAI receives it as
                a json_schema response_format, Anthropic inside the system prompt.
            schema_name: Name reported to OpenAI for the schema

        Returns:
            Raw text response from the LLM.

        Raises:
            RuntimeError if every configured provider fails, or none is configured.
        """
        errors = []
        max_tokens = max_tokens or settings.llm_max_tokens
        if temperature is None:
            temperature = settings.llm_temperature

        chat_messages = [{"role": "user", "content": user}]

        # Try OpenAI first
        if self._openai:
            try:
                openai_messages = [{"role": "system", "content": system}] + chat_messages
                kwargs: dict = {
                    "model": settings.llm_model_primary,
                    "max_tokens": max_tokens,
                    "temperature": temperature,
                    "messages": openai_messages,
                }
                if json_schema is not None:
                    kwargs["response_format"] = {
                        "type": "json_schema",
                        "json_schema": {"name": schema_name, "schema": json_schema},
                    }
                elif json_mode:
                    kwargs["response_format"] = {"type": "json_object"}
                response = await self._openai.chat.completions.create(**kwargs)
                content = response.choices[0].message.content
                if not content:
                    raise ValueError("empty completion")
                return content.strip()
            except Exception as e:
                errors.append(f"OpenAI: {e}")
                logger.warning(f"OpenAI failed, trying Anthropic: {e}")

        # Fallback to Anthropic
        if self._anthropic:
            try:
                anthropic_system = system
                if json_schema is not None:
                    anthropic_system += (
                        "\n\nRespond ONLY with a JSON document matching this schema:\n"
                        f"{json.dumps(json_schema)}"
                    )
                response = await self._anthropic.messages.create(
                    model=settings.llm_model_fallback,
                    max_tokens=max_tokens,
                    temperature=temperature,
                    system=anthropic_system,
                    messages=chat_messages,
                )
                return response.content[0].text.strip()
            except Exception as e:
                errors.append(f"Anthropic: {e}")
                logger.warning(f"Anthropic also failed: {e}")

        if not errors:
            raise RuntimeError("No LLM provider configured")
        raise RuntimeError(f"All LLM providers failed: {'; '.join(errors)}")


# Singleton
llm_client = LLMClient()
