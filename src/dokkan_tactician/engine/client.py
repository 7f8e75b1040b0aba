"""Generative-text client for roster generation and synergy analysis.

The client speaks the OpenAI chat-completions protocol (OpenRouter by
default) in two modes:

- grounded: live web search is enabled through the OpenRouter ``web``
  plugin and the citation URLs attached to the reply are returned with
  the text;
- structured: the reply is constrained by a declared JSON schema, so the
  body is guaranteed to be parseable.

Transport failures are mapped onto the AIControlError hierarchy; callers
decide whether a failure means "try the next phase" or "give up".
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Protocol

from openai import APIConnectionError, APIStatusError, OpenAI, RateLimitError

from dokkan_tactician.core.config import get_settings
from dokkan_tactician.core.exceptions import (
    AIConnectionError,
    AIControlError,
    AIRateLimitError,
    AIResponseError,
)
from dokkan_tactician.core.logging import get_logger


if TYPE_CHECKING:
    from openai.types.chat import ChatCompletion

logger = get_logger(__name__)

PROVIDER = "openrouter"

WEB_SEARCH_PLUGIN = {"id": "web", "max_results": 5}


# =============================================================================
# Response Types
# =============================================================================


@dataclass
class GroundedResponse:
    """Text of a grounded reply and the web sources it cites.

    Attributes:
        text: Raw message content.
        sources: Citation URLs, deduplicated, in first-occurrence order.
    """

    text: str
    sources: list[str] = field(default_factory=list)


class GenerationClient(Protocol):
    """Interface the pipeline and the analyzer depend on."""

    def generate_grounded(self, prompt: str, *, system_instruction: str) -> GroundedResponse:
        ...

    def generate_structured(
        self,
        prompt: str,
        *,
        schema: dict[str, Any],
        schema_name: str,
        system_instruction: str | None = None,
    ) -> str:
        ...


# =============================================================================
# Citation Handling
# =============================================================================


def _read(obj: Any, name: str) -> Any:
    if isinstance(obj, dict):
        return obj.get(name)
    return getattr(obj, name, None)


def extract_citation_urls(annotations: Any) -> list[str]:
    """Collect citation URLs from message annotations.

    Annotations may be SDK objects or plain dicts depending on whether the
    SDK recognises them. Duplicates are dropped by exact match, keeping the
    first occurrence.

    Args:
        annotations: The ``annotations`` attribute of a chat message.

    Returns:
        Ordered list of unique URLs.
    """
    if not annotations:
        return []

    urls: list[str] = []
    for annotation in annotations:
        if _read(annotation, "type") != "url_citation":
            continue
        url = _read(_read(annotation, "url_citation"), "url")
        if url:
            urls.append(str(url))
    return list(dict.fromkeys(urls))


def _retry_after(exc: APIStatusError) -> float | None:
    """Seconds from a ``retry-after`` header, if the provider sent one."""
    value = exc.response.headers.get("retry-after")
    try:
        return float(value) if value is not None else None
    except ValueError:
        return None


# =============================================================================
# OpenRouter Client
# =============================================================================


class OpenRouterClient:
    """Chat-completions client used for every model call.

    Attributes:
        model: Model identifier.
        temperature: Sampling temperature.
        max_tokens: Completion token cap.
    """

    def __init__(
        self,
        *,
        api_key: str | None = None,
        model: str | None = None,
        base_url: str | None = None,
        timeout: float | None = None,
        temperature: float | None = None,
        max_tokens: int | None = None,
        client: OpenAI | None = None,
    ) -> None:
        """Initialize the client, filling unset options from settings.

        Args:
            api_key: API key; defaults to the configured OpenRouter key.
            model: Model identifier.
            base_url: OpenAI-compatible endpoint.
            timeout: Request timeout in seconds.
            temperature: Sampling temperature.
            max_tokens: Completion token cap.
            client: Pre-built OpenAI client (mostly for tests).
        """
        ai_settings = get_settings().ai

        if api_key is None and ai_settings.openrouter_api_key:
            api_key = ai_settings.openrouter_api_key.get_secret_value()

        self.api_key = api_key
        self.model = model or ai_settings.model
        self.base_url = base_url or ai_settings.base_url
        self.timeout = timeout or ai_settings.timeout_seconds
        self.temperature = ai_settings.temperature if temperature is None else temperature
        self.max_tokens = max_tokens or ai_settings.max_tokens
        self._client = client

        logger.info("Generation client initialized", model=self.model, base_url=self.base_url)

    def _get_client(self) -> OpenAI:
        """Get or create the OpenAI client."""
        if self._client is None:
            if not self.api_key:
                raise AIConnectionError(
                    "No API key configured; set DOKKAN_TACTICIAN_OPENROUTER_API_KEY",
                    model=self.model,
                    provider=PROVIDER,
                )
            self._client = OpenAI(
                api_key=self.api_key,
                base_url=self.base_url,
                timeout=self.timeout,
                default_headers={
                    "HTTP-Referer": "https://github.com/dokkan-tactician",
                    "X-Title": "Dokkan Tactician",
                },
            )
        return self._client

    def _complete(self, messages: list[dict[str, Any]], **kwargs: Any) -> ChatCompletion:
        """Send one chat-completions request.

        Raises:
            AIRateLimitError: If the provider throttles the request.
            AIConnectionError: If the provider cannot be reached.
            AIControlError: For any other non-2xx answer.
        """
        client = self._get_client()
        try:
            return client.chat.completions.create(
                model=self.model,
                messages=messages,
                temperature=self.temperature,
                max_tokens=self.max_tokens,
                **kwargs,
            )
        except RateLimitError as exc:
            raise AIRateLimitError(
                f"Rate limit exceeded: {exc}",
                retry_after_seconds=_retry_after(exc),
                model=self.model,
                provider=PROVIDER,
            ) from exc
        except APIConnectionError as exc:
            raise AIConnectionError(
                f"Failed to connect to the model provider: {exc}",
                model=self.model,
                provider=PROVIDER,
            ) from exc
        except APIStatusError as exc:
            raise AIControlError(
                f"Model provider returned an error: {exc}",
                model=self.model,
                provider=PROVIDER,
                details={"status_code": exc.status_code},
            ) from exc

    def _content(self, response: ChatCompletion) -> str:
        if not response.choices:
            raise AIResponseError("Model returned no choices", model=self.model, provider=PROVIDER)
        return response.choices[0].message.content or ""

    @staticmethod
    def _messages(prompt: str, system_instruction: str | None) -> list[dict[str, Any]]:
        messages: list[dict[str, Any]] = []
        if system_instruction:
            messages.append({"role": "system", "content": system_instruction})
        messages.append({"role": "user", "content": prompt})
        return messages

    def generate_grounded(self, prompt: str, *, system_instruction: str) -> GroundedResponse:
        """Generate free text with live web search enabled.

        Args:
            prompt: User prompt.
            system_instruction: System prompt steering format and language.

        Returns:
            The reply text and its citation URLs.
        """
        response = self._complete(
            self._messages(prompt, system_instruction),
            extra_body={"plugins": [WEB_SEARCH_PLUGIN]},
        )
        text = self._content(response)
        sources = extract_citation_urls(_read(response.choices[0].message, "annotations"))

        logger.debug(
            "Grounded response received",
            model=self.model,
            response_length=len(text),
            sources=len(sources),
        )
        return GroundedResponse(text=text, sources=sources)

    def generate_structured(
        self,
        prompt: str,
        *,
        schema: dict[str, Any],
        schema_name: str,
        system_instruction: str | None = None,
    ) -> str:
        """Generate a reply constrained to ``schema``.

        Args:
            prompt: User prompt.
            schema: JSON schema of the expected object.
            schema_name: Name reported to the provider.
            system_instruction: Optional system prompt.

        Returns:
            The raw JSON text of the reply.

        Raises:
            AIResponseError: If the reply is empty.
        """
        response = self._complete(
            self._messages(prompt, system_instruction),
            response_format={
                "type": "json_schema",
                "json_schema": {"name": schema_name, "strict": True, "schema": schema},
            },
        )
        text = self._content(response)
        if not text.strip():
            raise AIResponseError(
                "Model returned an empty structured response",
                model=self.model,
                provider=PROVIDER,
                details={"schema": schema_name},
            )

        logger.debug(
            "Structured response received",
            model=self.model,
            schema=schema_name,
            response_length=len(text),
        )
        return text


__all__ = [
    "GroundedResponse",
    "GenerationClient",
    "OpenRouterClient",
    "extract_citation_urls",
    "WEB_SEARCH_PLUGIN",
]
