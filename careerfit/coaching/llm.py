"""Text-generation backends for coaching content.

Uses LiteLLM to reach the configured provider. Other backends only need to
implement the ``TextGenerator`` protocol.
"""

from __future__ import annotations

import logging
import os
import time
from typing import Any, Protocol, runtime_checkable

from careerfit.coaching.config import CoachingConfig, get_coaching_config

logger = logging.getLogger(__name__)


# LiteLLM loads `.env` into process environment by default (DEV mode).
# Default to PRODUCTION unless the user explicitly opted into DEV.
os.environ.setdefault("LITELLM_MODE", "PRODUCTION")


class CoachingLLMError(Exception):
    """Exception raised when coaching text generation fails."""

    def __init__(self, message: str, original_error: Exception | None = None):
        super().__init__(message)
        self.original_error = original_error


@runtime_checkable
class TextGenerator(Protocol):
    """Capability: generate semi-structured text from a prompt."""

    def generate(
        self,
        *,
        prompt: str,
        system_prompt: str | None = None,
        max_tokens: int | None = None,
    ) -> str: ...


class CoachingLLM:
    """LiteLLM-backed TextGenerator."""

    def __init__(self, config: CoachingConfig | None = None) -> None:
        self.config = config or get_coaching_config()
        self._setup_provider_env()

    def _setup_provider_env(self) -> None:
        """Set up provider-specific environment variables."""
        if self.config.llm_base_url and self.config.llm_provider == "anthropic":
            base_url = self.config.llm_base_url.rstrip("/")
            if base_url.endswith("/v1"):
                base_url = base_url[:-3]
            os.environ["ANTHROPIC_BASE_URL"] = base_url
            if self.config.llm_api_key:
                os.environ["ANTHROPIC_API_KEY"] = self.config.llm_api_key

    def _get_model_name(self) -> str:
        """Return provider-qualified model name for LiteLLM routing."""
        if "/" in self.config.llm_model:
            return self.config.llm_model

        if self.config.llm_provider == "anthropic":
            return f"anthropic/{self.config.llm_model}"

        if self.config.llm_base_url:
            return f"openai/{self.config.llm_model}"

        if self.config.llm_provider == "openai":
            return self.config.llm_model

        return f"{self.config.llm_provider}/{self.config.llm_model}"

    def generate(
        self,
        *,
        prompt: str,
        system_prompt: str | None = None,
        max_tokens: int | None = None,
    ) -> str:
        """Generate free text, retrying transient failures with backoff."""
        from litellm.exceptions import AuthenticationError, Timeout

        messages: list[dict[str, str]] = []
        if system_prompt:
            messages.append({"role": "system", "content": system_prompt})
        messages.append({"role": "user", "content": prompt})

        last_error: Exception | None = None
        for attempt in range(self.config.llm_max_retries + 1):
            try:
                response = self._call_completion(
                    messages=messages,
                    max_tokens=max_tokens or self.config.llm_max_tokens,
                )
                return self._extract_text(response)

            except CoachingLLMError:
                raise

            except AuthenticationError as e:
                raise CoachingLLMError(
                    "LLM authentication failed. Check COACHING_LLM_API_KEY.", e
                ) from e

            except Timeout as e:
                raise CoachingLLMError(
                    "LLM request timed out. "
                    f"Increase COACHING_LLM_TIMEOUT (timeout={self.config.llm_timeout}s).",
                    e,
                ) from e

            except Exception as e:
                last_error = e
                if attempt < self.config.llm_max_retries:
                    delay = min(0.5 * (2**attempt), 8.0)
                    logger.warning(
                        "LLM call failed (attempt %s), retrying in %.1fs: %s",
                        attempt + 1,
                        delay,
                        e,
                    )
                    time.sleep(delay)
                    continue
                raise CoachingLLMError(f"LLM call failed after retries: {e}", e) from e

        raise CoachingLLMError(f"LLM call failed: {last_error}", last_error)

    def _call_completion(self, *, messages: list[dict[str, str]], max_tokens: int):
        from litellm import completion

        kwargs: dict[str, Any] = {
            "model": self._get_model_name(),
            "messages": messages,
            "timeout": self.config.llm_timeout,
            "temperature": self.config.llm_temperature,
            "max_tokens": max_tokens,
        }

        if self.config.llm_api_key:
            kwargs["api_key"] = self.config.llm_api_key

        if self.config.llm_base_url and self.config.llm_provider != "anthropic":
            kwargs["base_url"] = self.config.llm_base_url

        return completion(**kwargs)

    def _extract_text(self, response) -> str:
        choices = getattr(response, "choices", None) or []
        if not choices:
            raise CoachingLLMError("LLM returned no choices.")

        content = getattr(choices[0].message, "content", None)
        if content is None or not str(content).strip():
            raise CoachingLLMError("LLM returned no content.")
        return str(content)
