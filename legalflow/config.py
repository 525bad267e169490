"""
Configuration settings for the LegalFlow client.
"""

import os
from dataclasses import dataclass, field
from typing import Optional

BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
RESULT_STRATEGIES = ("remote", "local")

@dataclass
class Config:
    """Configuration settings for the client workflow."""
    
    # Version
    VERSION: str = "1.0.0"
    
    # Paths
    CACHE_DIR: str = field(default_factory=lambda: os.getenv("LEGALFLOW_CACHE_DIR", os.path.join(BASE_DIR, "cache")))
    
    # Analysis engine
    API_BASE_URL: str = field(default_factory=lambda: os.getenv("LEGALFLOW_API_URL", "http://localhost:8000"))
    REQUEST_TIMEOUT_SECONDS: float = field(default_factory=lambda: float(os.getenv("LEGALFLOW_REQUEST_TIMEOUT", "30")))
    
    # "remote" talks to the analysis engine, "local" uses the result cache
    RESULT_STRATEGY: str = field(default_factory=lambda: os.getenv("LEGALFLOW_RESULT_STRATEGY", "remote"))
    
    # Local demonstration strategy
    DEMO_ANALYSIS_DELAY_SECONDS: float = field(default_factory=lambda: float(os.getenv("LEGALFLOW_DEMO_DELAY", "2.0")))
    CACHE_ENCRYPTION_KEY: Optional[str] = field(default_factory=lambda: os.getenv("LEGALFLOW_CACHE_KEY"))
    
    # Upload settings
    ACCEPTED_MEDIA_TYPE: str = "application/pdf"
    MAX_UPLOAD_SIZE_MB: int = 25
    
    # Presentation
    EXCERPT_LENGTH: int = 160
    
    # Logging
    LOG_LEVEL: str = field(default_factory=lambda: os.getenv("LEGALFLOW_LOG_LEVEL", "INFO"))
    
    def __post_init__(self) -> None:
        """Validate the strategy and create the cache directory when needed."""
        self.RESULT_STRATEGY = self.RESULT_STRATEGY.strip().lower()
        if self.RESULT_STRATEGY not in RESULT_STRATEGIES:
            raise ValueError(
                f"Unknown result strategy '{self.RESULT_STRATEGY}', "
                f"expected one of {', '.join(RESULT_STRATEGIES)}"
            )
        if self.RESULT_STRATEGY == "local":
            os.makedirs(self.CACHE_DIR, exist_ok=True)
    
    @property
    def use_local_results(self) -> bool:
        return self.RESULT_STRATEGY == "local"
