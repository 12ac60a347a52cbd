import os
import logging
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional, Tuple

logger = logging.getLogger(__name__)


def get_port_from_env() -> int:
    """
    Get port from environment.

    Priority: PORT > API_PORT > default 8080
    """
    port_str = os.environ.get("PORT") or os.environ.get("API_PORT") or "8080"
    try:
        return int(port_str)
    except ValueError:
        return 8080


def get_openai_api_key() -> Tuple[Optional[str], Optional[str]]:
    """
    Get OpenAI API key from environment variables.

    Checks in order: API_OPENAI_API_KEY, OPENAI_API_KEY, AI_INTEGRATIONS_OPENAI_API_KEY

    Returns:
        Tuple of (api_key, source_env_var_name) or (None, None) if not found
    """
    env_vars = [
        "API_OPENAI_API_KEY",
        "OPENAI_API_KEY",
        "AI_INTEGRATIONS_OPENAI_API_KEY",
    ]

    for var_name in env_vars:
        key = os.environ.get(var_name)
        if key and len(key.strip()) > 0:
            return key.strip(), var_name

    return None, None


class APIConfig(BaseSettings):
    """Configuration for the API service."""

    model_config = SettingsConfigDict(env_prefix="API_", env_file=".env", extra="ignore")

    # Server configuration
    host: str = "0.0.0.0"
    port: int = 8080
    debug: bool = False

    # CORS configuration
    cors_origins: str = "*"

    # Summary model
    openai_model: str = "gpt-4o"
    openai_base_url: Optional[str] = None
    summary_max_tokens: int = 500

    @property
    def openai_api_key(self) -> Optional[str]:
        """Get OpenAI API key from environment (supports multiple var names)."""
        key, _ = get_openai_api_key()
        return key

    @property
    def openai_key_loaded(self) -> bool:
        """Check if OpenAI API key is available."""
        key, _ = get_openai_api_key()
        return key is not None

    @property
    def openai_env_source(self) -> Optional[str]:
        """Get the env var name that provided the OpenAI key."""
        _, source = get_openai_api_key()
        return source

    @property
    def resolved_openai_base_url(self) -> Optional[str]:
        return self.openai_base_url or os.environ.get("AI_INTEGRATIONS_OPENAI_BASE_URL") or None


def get_config() -> APIConfig:
    """Get API configuration from environment."""
    config = APIConfig()
    # PORT (set by most hosts) wins over API_PORT
    return config.model_copy(update={"port": get_port_from_env()})


def log_openai_key_status():
    """Log OpenAI API key status at startup (does NOT log the key itself)."""
    key, source = get_openai_api_key()
    if key:
        masked = f"{key[:4]}...{key[-4:]}" if len(key) > 8 else "***"
        logger.info(f"OpenAI API key FOUND from {source} (masked: {masked})")
    else:
        logger.warning("OpenAI API key NOT FOUND - checked: API_OPENAI_API_KEY, OPENAI_API_KEY, AI_INTEGRATIONS_OPENAI_API_KEY")
