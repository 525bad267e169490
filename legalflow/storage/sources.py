"""
Submission and retrieval strategies.

A deployment runs either against the remote analysis engine or against the
local result cache. Controllers only see these interfaces, so their contract
is the same for both.
"""

import time
import asyncio
import logging
from typing import Set

from legalflow.analysis import Clause, DocumentAnalysisResult, SelectedFile
from legalflow.api.client import AnalysisClient
from legalflow.patterns.sample_analysis import build_sample_analysis
from legalflow.storage.result_cache import LocalResultCache
from legalflow.utils.helpers import create_document_id, run_blocking

logger = logging.getLogger(__name__)

class Submitter:
    """Sends a validated file for analysis and returns its document id."""
    
    async def submit(self, file: SelectedFile) -> str:
        raise NotImplementedError("Subclasses must implement submit()")

class ResultSource:
    """Resolves a document id to its analysis result."""
    
    async def fetch(self, document_id: str) -> DocumentAnalysisResult:
        raise NotImplementedError("Subclasses must implement fetch()")

class ClauseSource:
    """Resolves a clause id to its clause record."""
    
    async def fetch(self, clause_id: str) -> Clause:
        raise NotImplementedError("Subclasses must implement fetch()")

class RemoteSubmitter(Submitter):
    
    def __init__(self, client: AnalysisClient):
        self.client = client
    
    async def submit(self, file: SelectedFile) -> str:
        return await self.client.upload(file)

class RemoteResultSource(ResultSource):
    
    def __init__(self, client: AnalysisClient):
        self.client = client
    
    async def fetch(self, document_id: str) -> DocumentAnalysisResult:
        return await self.client.fetch_result(document_id)

class RemoteClauseSource(ClauseSource):
    
    def __init__(self, client: AnalysisClient):
        self.client = client
    
    async def fetch(self, clause_id: str) -> Clause:
        return await self.client.fetch_clause(clause_id)

class LocalDemoSubmitter(Submitter):
    """
    Fabricates a demonstration analysis and stores it in the local cache.
    
    The file content is not inspected. The delay stands in for engine
    processing time.
    """
    
    def __init__(self, cache: LocalResultCache, delay_seconds: float = 2.0):
        self.cache = cache
        self.delay_seconds = delay_seconds
        self.issued_ids: Set[str] = set()
    
    async def submit(self, file: SelectedFile) -> str:
        if self.delay_seconds > 0:
            await asyncio.sleep(self.delay_seconds)
        
        timestamp_ms = int(time.time() * 1000)
        document_id = create_document_id(timestamp_ms=timestamp_ms)
        while document_id in self.issued_ids or self.cache.contains(document_id):
            timestamp_ms += 1
            document_id = create_document_id(timestamp_ms=timestamp_ms)
        # Reserve the id before awaiting the save
        self.issued_ids.add(document_id)
        
        result = build_sample_analysis(document_id)
        await run_blocking(self.cache.save, result)
        logger.info(f"Stored demonstration analysis for {file.name} as {document_id}")
        return document_id

class LocalResultSource(ResultSource):
    
    def __init__(self, cache: LocalResultCache):
        self.cache = cache
    
    async def fetch(self, document_id: str) -> DocumentAnalysisResult:
        return await run_blocking(self.cache.load, document_id)

class LocalClauseSource(ClauseSource):
    
    def __init__(self, cache: LocalResultCache):
        self.cache = cache
    
    async def fetch(self, clause_id: str) -> Clause:
        return await run_blocking(self.cache.find_clause, clause_id)
