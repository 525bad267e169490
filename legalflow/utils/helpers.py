"""
Helper functions for the LegalFlow client.
"""

import time
import asyncio
import hashlib
import logging
from functools import partial
from typing import Any, Callable, Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s:%(lineno)d - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

def setup_logging(level: str = "INFO") -> None:
    """
    Configure root logging for a host process.
    
    Args:
        level: Log level name
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT
    )

def create_document_id(prefix: str = "doc", timestamp_ms: Optional[int] = None) -> str:
    """
    Create a document identifier from the current time.
    
    Args:
        prefix: Identifier prefix
        timestamp_ms: Milliseconds since the epoch (defaults to now)
        
    Returns:
        Identifier such as ``doc-1718000000000``
    """
    if timestamp_ms is None:
        timestamp_ms = int(time.time() * 1000)
    return f"{prefix}-{timestamp_ms}"

def hash_text(text: str) -> str:
    """Return the SHA-256 hex digest of text."""
    return hashlib.sha256(text.encode("utf-8")).hexdigest()

def truncate_text(text: str, max_length: int = 100, add_ellipsis: bool = True) -> str:
    """
    Truncate text to specified length.
    
    Args:
        text: Text to truncate
        max_length: Maximum length
        add_ellipsis: Whether to add '...' when truncated
        
    Returns:
        Truncated text
    """
    if not text or len(text) <= max_length:
        return text
    
    truncated = text[:max_length].rstrip()
    if add_ellipsis:
        truncated += "..."
    
    return truncated

async def run_blocking(func: Callable[..., Any], *args, **kwargs) -> Any:
    """
    Run blocking I/O in the default executor so the event loop stays free.
    
    Args:
        func: Blocking callable
        
    Returns:
        Whatever ``func`` returns; exceptions propagate unchanged
    """
    loop = asyncio.get_event_loop()
    return await loop.run_in_executor(None, partial(func, *args, **kwargs))
