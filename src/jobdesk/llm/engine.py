"""One-shot text completions through pydantic-ai.

Every generation route asks for a single plain-text answer, so there is no
conversation state and no structured output here.  Tests pass a
``TestModel`` or ``FunctionModel`` as ``_model_override``.
"""

from __future__ import annotations

import logging

from pydantic_ai import Agent
from pydantic_ai.models import Model
from pydantic_ai.models.openai import OpenAIChatModel
from pydantic_ai.providers.openai import OpenAIProvider
from pydantic_ai.settings import ModelSettings

from jobdesk.core.errors import GenerationError
from jobdesk.llm.config import get_api_key, get_default_model

logger = logging.getLogger(__name__)


def _build_model(model: str | None = None) -> Model:
    """Create an OpenAI chat model using the configured API key."""
    return OpenAIChatModel(
        model or get_default_model(),
        provider=OpenAIProvider(api_key=get_api_key()),
    )


async def complete(
    prompt: str,
    *,
    system_prompt: str | None = None,
    temperature: float | None = None,
    model: str | None = None,
    _model_override: Model | None = None,
) -> str:
    """Send a prompt, get the trimmed text response.

    Parameters
    ----------
    prompt:
        The user prompt to send to the model.
    system_prompt:
        Optional system instructions for this call.
    temperature:
        Sampling temperature; provider default when *None*.
    model:
        Model name (e.g. ``"gpt-4o-mini"``).  Falls back to the configured
        default when *None*.
    _model_override:
        Inject a Pydantic-AI ``Model`` instance directly (used by tests to
        supply ``TestModel`` / ``FunctionModel`` without needing an API key).

    Raises ``GenerationError`` when the model returns only whitespace.
    """
    llm = _model_override or _build_model(model)
    logger.debug("LLM call (text): model=%s, prompt_len=%d", llm, len(prompt))
    agent: Agent[None, str] = Agent(
        llm,
        output_type=str,
        system_prompt=system_prompt or (),
    )
    settings: ModelSettings | None = None
    if temperature is not None:
        settings = ModelSettings(temperature=temperature)
    result = await agent.run(prompt, model_settings=settings)
    text = (result.output or "").strip()
    if not text:
        raise GenerationError("Empty AI response")
    return text
