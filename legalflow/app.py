"""
Factory that wires a navigation flow for one deployment.
"""

import logging
from typing import Optional

import requests

from legalflow.config import Config
from legalflow.api.client import AnalysisClient
from legalflow.navigation import NavigationFlow
from legalflow.storage.result_cache import LocalResultCache
from legalflow.storage.sources import (
    LocalClauseSource,
    LocalDemoSubmitter,
    LocalResultSource,
    RemoteClauseSource,
    RemoteResultSource,
    RemoteSubmitter,
)
from legalflow.utils.helpers import setup_logging

logger = logging.getLogger(__name__)

def create_flow(config: Optional[Config] = None, session: Optional[requests.Session] = None) -> NavigationFlow:
    """
    Create and configure the navigation flow.
    
    Exactly one strategy is active: the remote analysis engine, or the local
    result cache filled by demonstration submissions.
    
    Args:
        config: Configuration settings
        session: HTTP session for the remote strategy
        
    Returns:
        Navigation flow on the selection screen
    """
    if config is None:
        config = Config()
    
    setup_logging(config.LOG_LEVEL)
    
    if config.use_local_results:
        cache = LocalResultCache(config.CACHE_DIR, config.CACHE_ENCRYPTION_KEY)
        flow = NavigationFlow(
            submitter=LocalDemoSubmitter(cache, config.DEMO_ANALYSIS_DELAY_SECONDS),
            result_source=LocalResultSource(cache),
            clause_source=LocalClauseSource(cache),
            config=config,
        )
    else:
        client = AnalysisClient(config, session=session)
        flow = NavigationFlow(
            submitter=RemoteSubmitter(client),
            result_source=RemoteResultSource(client),
            clause_source=RemoteClauseSource(client),
            config=config,
        )
    
    logger.info(f"LegalFlow {config.VERSION} using the {config.RESULT_STRATEGY} result strategy")
    return flow
