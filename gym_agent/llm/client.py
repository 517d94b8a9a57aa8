"""
LLM client factory

Creates the chat model for the reasoning step based on provider configuration.
"""

from typing import Optional
from loguru import logger

from gym_agent.config.settings import settings


def _validate_ollama_model(model_to_use: str):
    """Check the Ollama server is reachable and has the model pulled."""
    import httpx

    try:
        response = httpx.get(f"{settings.ollama_base_url}/api/tags", timeout=3.0)
        response.raise_for_status()
        models_data = response.json()
        available_models = [m.get("name", "").split(":")[0] for m in models_data.get("models", [])]
    except httpx.RequestError as e:
        error_msg = (
            f"Could not connect to Ollama server at {settings.ollama_base_url}. "
            f"Make sure Ollama is running. Error: {e}"
        )
        logger.error(f"❌ {error_msg}")
        raise ConnectionError(error_msg) from e

    # Handle both "llama3" and "llama3:latest"
    if model_to_use.split(":")[0] not in available_models:
        error_msg = (
            f"Ollama model '{model_to_use}' is not available on the server. "
            f"Available models: {', '.join(available_models) if available_models else 'None'}. "
            f"To install: ollama pull {model_to_use}"
        )
        logger.error(f"❌ {error_msg}")
        raise ValueError(error_msg)


def create_llm(
    temperature: Optional[float] = None,
    max_completion_tokens: Optional[int] = None,
    model: Optional[str] = None,
):
    """
    Factory function to create the chat model based on provider configuration.

    Streaming is always enabled so the relay can forward tokens while the
    reasoning step awaits a single-shot response.

    Args:
        temperature: Generation temperature (defaults to settings.openai_temperature)
        max_completion_tokens: Max tokens for completion (defaults to settings.max_output_tokens)
        model: Model name (defaults to provider-specific model)

    Returns:
        LangChain ChatModel instance (ChatOpenAI or ChatOllama)
    """
    provider = settings.llm_provider.lower()
    max_tokens = max_completion_tokens or settings.max_output_tokens
    temperature = temperature if temperature is not None else settings.openai_temperature

    if provider == "openai":
        from langchain_openai import ChatOpenAI

        if not settings.openai_api_key:
            raise ValueError("OPENAI_API_KEY is required when LLM_PROVIDER=openai")

        logger.info(f"✅ LLM Provider: OpenAI | Model: {model or settings.openai_model}")
        return ChatOpenAI(
            model=model or settings.openai_model,
            api_key=settings.openai_api_key,
            temperature=temperature,
            max_completion_tokens=max_tokens,
            streaming=True,
        )

    elif provider == "ollama":
        from langchain_ollama import ChatOllama

        model_to_use = model or settings.ollama_model
        _validate_ollama_model(model_to_use)

        logger.info(f"✅ LLM Provider: Ollama | Base URL: {settings.ollama_base_url} | Model: {model_to_use}")
        return ChatOllama(
            model=model_to_use,
            base_url=settings.ollama_base_url,
            temperature=temperature,
            num_predict=max_tokens,  # Ollama uses num_predict instead of max_completion_tokens
        )

    else:
        raise ValueError(f"Unsupported LLM provider: {provider}. Supported: 'openai', 'ollama'")
