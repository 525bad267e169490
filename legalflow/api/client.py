"""
HTTP client for the external contract analysis engine.
"""

import logging
from typing import Any, Optional
from urllib.parse import quote

import requests

from legalflow.config import Config
from legalflow.analysis import Clause, DocumentAnalysisResult, SelectedFile
from legalflow.api.models import parse_clause, parse_result, parse_upload
from legalflow.errors import ContractViolation, NotFound, ServerError, TransportError
from legalflow.utils.helpers import run_blocking

logger = logging.getLogger(__name__)

class AnalysisClient:
    """Client for the upload, results and clause endpoints."""
    
    def __init__(self, config: Optional[Config] = None, session: Optional[requests.Session] = None):
        """
        Initialize the client.
        
        Args:
            config: Configuration settings, or use defaults
            session: HTTP session to reuse; a new one is created if omitted
        """
        self.config = config or Config()
        self.base_url = self.config.API_BASE_URL.rstrip('/')
        self.timeout = self.config.REQUEST_TIMEOUT_SECONDS
        self.session = session or requests.Session()
    
    async def upload(self, file: SelectedFile) -> str:
        """
        Submit a contract for analysis.
        
        Args:
            file: Validated file selection
            
        Returns:
            The document id assigned by the engine
        """
        files = {"file": (file.name, file.content, file.content_type)}
        data = await run_blocking(self._request, "POST", "/upload", "document", files=files)
        return parse_upload(data)
    
    async def fetch_result(self, document_id: str) -> DocumentAnalysisResult:
        """
        Fetch the full analysis result of a document.
        
        Args:
            document_id: Opaque document identifier
            
        Returns:
            Document analysis result
        """
        path = f"/results/{quote(document_id, safe='')}"
        data = await run_blocking(self._request, "GET", path, "document", document_id)
        return parse_result(data, document_id)
    
    async def fetch_clause(self, clause_id: str) -> Clause:
        """
        Fetch a single clause record.
        
        Args:
            clause_id: Opaque clause identifier
            
        Returns:
            Clause with its owning document id
        """
        path = f"/clause/{quote(clause_id, safe='')}"
        data = await run_blocking(self._request, "GET", path, "clause", clause_id)
        return parse_clause(data, clause_id)
    
    def close(self) -> None:
        self.session.close()
    
    def _request(self, method: str, path: str, noun: str,
                 identifier: Optional[str] = None, **kwargs) -> Any:
        """
        Send one request and return its decoded JSON body.
        
        Args:
            method: HTTP method
            path: Path relative to the engine base URL
            noun: Kind of record requested, shown to the user
            identifier: Identifier requested, kept out of user messages
            
        Returns:
            Decoded JSON body
        """
        url = f"{self.base_url}{path}"
        logger.info(f"{method} {url}")
        
        try:
            response = self.session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.exceptions.RequestException as e:
            logger.warning(f"Request to {url} failed: {e}")
            raise TransportError(
                f"{method} {url} failed: {e}",
                user_message="Could not reach the analysis service. Check your connection and try again."
            ) from e
        
        if response.status_code == 404 and method == "GET":
            raise NotFound(f"{noun} {identifier} not found", user_message=f"{noun.capitalize()} not found")
        if not response.ok:
            logger.error(f"{method} {url} returned {response.status_code}")
            raise ServerError(
                f"{method} {url} returned {response.status_code}",
                user_message=f"Failed to load {noun}" if method == "GET" else "Processing failed",
                status_code=response.status_code
            )
        
        try:
            return response.json()
        except ValueError as e:
            raise ContractViolation(f"{method} {url} returned a non-JSON body") from e
