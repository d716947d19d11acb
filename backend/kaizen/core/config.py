"""
Application configuration and environment variables
"""
import os
from dotenv import load_dotenv

# Load environment variables
load_dotenv()


class Settings:
    """Application settings loaded from environment variables"""

    # Database
    SUPABASE_URL: str = os.getenv("SUPABASE_URL", "")
    SUPABASE_KEY: str = os.getenv("SUPABASE_KEY", "")

    # AI
    OPENAI_API_KEY: str = os.getenv("OPENAI_API_KEY", "")

    # Calendar
    TIMEZONE: str = os.getenv("KAIZEN_TIMEZONE", "America/Los_Angeles")

    # Life report scoring window
    SCORING_PERIOD_DAYS: int = int(os.getenv("SCORING_PERIOD_DAYS", "30"))


# Create a global settings instance
settings = Settings()
