import json
import logging

import httpx
from openai import APIConnectionError, APIStatusError, AsyncOpenAI, OpenAIError

from ..config import settings
from ..errors import CreditsExhaustedError, GatewayError, RateLimitedError

logger = logging.getLogger(__name__)

_client: AsyncOpenAI | None = None


def build_client(http_client: httpx.AsyncClient | None = None) -> AsyncOpenAI:
    # Failed calls surface to the user as-is; the SDK must not retry them.
    return AsyncOpenAI(
        api_key=settings.gateway_api_key,
        base_url=settings.gateway_base_url,
        max_retries=0,
        http_client=http_client,
    )


def _get_client() -> AsyncOpenAI:
    global _client
    if _client is None:
        if not settings.gateway_api_key:
            raise GatewayError("Inference gateway API key is not configured")
        _client = build_client()
    return _client


async def chat_completion(system_prompt: str, messages: list[dict]) -> str:
    """Single non-streaming LLM call that returns the raw completion text."""
    client = _get_client()
    try:
        response = await client.chat.completions.create(
            model=settings.gateway_model,
            messages=[
                {"role": "system", "content": system_prompt},
                *messages,
            ],
            temperature=settings.gateway_temperature,
        )
    except APIStatusError as e:
        logger.error("AI gateway error: %s %s", e.status_code, str(e)[:500])
        if e.status_code == 429:
            raise RateLimitedError() from e
        if e.status_code == 402:
            raise CreditsExhaustedError() from e
        raise GatewayError(f"AI gateway error: {e.status_code}") from e
    except APIConnectionError as e:
        logger.error("AI gateway unreachable: %s", e)
        raise GatewayError() from e
    except OpenAIError as e:
        logger.error("AI gateway call failed: %s", e)
        raise GatewayError() from e

    if not response.choices:
        return ""
    return response.choices[0].message.content or ""


def strip_code_fence(content: str) -> str:
    """Remove a surrounding ```json ... ``` (or bare ```) fence."""
    clean = content.strip()
    if clean.startswith("```json"):
        clean = clean[7:]
    if clean.startswith("```"):
        clean = clean[3:]
    if clean.endswith("```"):
        clean = clean[:-3]
    return clean.strip()


def parse_json_content(content: str | None) -> dict | None:
    """Parse a completion as a JSON object, or None if it isn't one."""
    if not content:
        logger.error("LLM returned an empty response")
        return None
    try:
        parsed = json.loads(strip_code_fence(content))
    except json.JSONDecodeError:
        logger.error("LLM returned invalid JSON: %s", content[:500])
        return None
    if not isinstance(parsed, dict):
        logger.error("LLM returned JSON that is not an object: %s", content[:500])
        return None
    return parsed


async def chat_json(system_prompt: str, messages: list[dict]) -> tuple[dict | None, str]:
    """Single LLM call; returns (parsed object or None, raw content)."""
    raw = await chat_completion(system_prompt, messages)
    logger.info("AI response received: %s", raw[:200])
    return parse_json_content(raw), raw
