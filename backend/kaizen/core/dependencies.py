"""
Dependency injection for shared clients and resources
"""
from functools import lru_cache
from typing import Optional

from fastapi import Header, HTTPException
from openai import OpenAI
from supabase import create_client, Client

from kaizen.core.config import settings


@lru_cache(maxsize=1)
def get_supabase_client() -> Client:
    """Get Supabase client instance (created on first use)"""
    return create_client(settings.SUPABASE_URL, settings.SUPABASE_KEY)


@lru_cache(maxsize=1)
def get_openai_client() -> OpenAI:
    """Get OpenAI client instance (created on first use)"""
    return OpenAI(api_key=settings.OPENAI_API_KEY)


def is_openai_configured() -> bool:
    """Check if an OpenAI API key is set"""
    key = settings.OPENAI_API_KEY
    return bool(key) and key != "your-openai-api-key-here"


async def get_current_user_id(x_user_id: Optional[str] = Header(default=None)) -> str:
    """Read the acting user from the X-User-Id header"""
    if not x_user_id:
        raise HTTPException(status_code=401, detail="Missing X-User-Id header")
    return x_user_id
