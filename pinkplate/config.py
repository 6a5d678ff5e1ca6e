"""Configuration management for the application."""
import os
from dotenv import load_dotenv

load_dotenv()


class Config:
    """Application configuration."""

    # LLM Provider Configuration
    LLM_PROVIDER: str = os.getenv("LLM_PROVIDER", "gemini").lower()  # "gemini" or "openai"

    # Gemini Configuration
    GEMINI_API_KEY: str = os.getenv("GEMINI_API_KEY", "")
    GEMINI_MODEL: str = os.getenv("GEMINI_MODEL", "gemini-3-flash-preview")

    # OpenAI Configuration (required if LLM_PROVIDER=openai)
    OPENAI_API_KEY: str = os.getenv("OPENAI_API_KEY", "")
    OPENAI_MODEL: str = os.getenv("OPENAI_MODEL", "gpt-4o-mini")

    LLM_TEMPERATURE: float = float(os.getenv("LLM_TEMPERATURE", "0.7"))

    # Planner behaviour
    LOADING_MESSAGE_INTERVAL: float = float(os.getenv("LOADING_MESSAGE_INTERVAL", "2.5"))  # seconds
    GENERATE_RATE_LIMIT: int = int(os.getenv("GENERATE_RATE_LIMIT", "10"))
    GENERATE_RATE_WINDOW: int = int(os.getenv("GENERATE_RATE_WINDOW", "60"))  # seconds

    # API Configuration
    API_TITLE: str = os.getenv("API_TITLE", "PinkPlate Meal Planner API")
    API_VERSION: str = os.getenv("API_VERSION", "1.0.0")
    API_DESCRIPTION: str = os.getenv(
        "API_DESCRIPTION",
        "Budget-aware Indian student meal planning powered by generative AI"
    )
    PORT: int = int(os.getenv("PORT", "8000"))
    HOST: str = os.getenv("HOST", "0.0.0.0")

    @classmethod
    def validate(cls) -> None:
        """Validate that all required configuration is present."""
        if cls.LLM_PROVIDER == "openai":
            if not cls.OPENAI_API_KEY:
                raise ValueError("Missing OPENAI_API_KEY (required when LLM_PROVIDER=openai)")
        elif cls.LLM_PROVIDER == "gemini":
            if not cls.GEMINI_API_KEY:
                raise ValueError("Missing GEMINI_API_KEY (required when LLM_PROVIDER=gemini)")
        else:
            raise ValueError(f"Invalid LLM_PROVIDER: {cls.LLM_PROVIDER}. Must be 'gemini' or 'openai'")

        if cls.LOADING_MESSAGE_INTERVAL <= 0:
            raise ValueError("LOADING_MESSAGE_INTERVAL must be positive")


config = Config()
