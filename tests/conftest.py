"""
Fixtures for LegalFlow tests.
"""

import json
import asyncio
import threading
import pytest
import requests
from typing import Any, Dict, List, Optional, Tuple
from urllib.parse import urlsplit

from legalflow.config import Config
from legalflow.analysis import SelectedFile
from legalflow.api.client import AnalysisClient
from legalflow.navigation import NavigationFlow
from legalflow.storage.sources import RemoteClauseSource, RemoteResultSource, RemoteSubmitter

API_URL = "http://analysis.test"

def sample_result_payload(document_id: str = "doc-123") -> Dict[str, Any]:
    """Results body as the analysis engine returns it (clauses without documentId)."""
    return {
        "summary": "Two clauses reviewed. Overall risk: HIGH.",
        "clauses": [
            {
                "clauseId": f"clause-1-{document_id}",
                "type": "Limitation of Liability",
                "riskLevel": "high",
                "text": "Neither party shall be liable for indirect damages.\nExcept as stated.",
                "explanation": "The exclusion is very broad and may limit recovery.",
            },
            {
                "clauseId": f"clause-2-{document_id}",
                "type": "Payment Terms",
                "riskLevel": "low",
                "text": "Payment shall be made within 30 days of invoice receipt.",
                "explanation": "Net-30 terms are industry standard.",
            },
        ],
    }

def sample_clause_payload(clause_id: str = "clause-1-doc-123", document_id: str = "doc-123") -> Dict[str, Any]:
    clause = dict(sample_result_payload(document_id)["clauses"][0])
    clause["clauseId"] = clause_id
    clause["documentId"] = document_id
    return clause

class FakeSession:
    """Stands in for ``requests.Session`` and records every request."""
    
    def __init__(self):
        self.routes: Dict[Tuple[str, str], Dict[str, Any]] = {}
        self.calls: List[Dict[str, Any]] = []
    
    def add(self, method: str, path: str, status: int = 200, json_body: Any = None,
            body: Optional[bytes] = None, exc: Optional[Exception] = None,
            gate: Optional[threading.Event] = None) -> None:
        self.routes[(method, path)] = {
            "status": status, "json": json_body, "body": body, "exc": exc, "gate": gate
        }
    
    def request(self, method, url, timeout=None, **kwargs):
        path = urlsplit(url).path
        self.calls.append({"method": method, "url": url, "path": path, "timeout": timeout, **kwargs})
        
        route = self.routes.get((method, path))
        if route is None:
            return self._response(url, 404, b'{"detail": "Not Found"}')
        if route["gate"] is not None:
            route["gate"].wait(5)
        if route["exc"] is not None:
            raise route["exc"]
        body = route["body"] if route["body"] is not None else json.dumps(route["json"]).encode()
        return self._response(url, route["status"], body)
    
    def close(self):
        pass
    
    def _response(self, url: str, status: int, body: bytes) -> requests.Response:
        response = requests.Response()
        response.status_code = status
        response._content = body
        response.url = url
        response.reason = "OK" if status < 400 else "Error"
        response.headers["Content-Type"] = "application/json"
        return response

class GatedSource:
    """Async source whose responses are released by the test."""
    
    def __init__(self, responses: Dict[str, Any]):
        self.responses = responses
        self.gates: Dict[str, asyncio.Event] = {}
        self.requested: List[str] = []
    
    def gate(self, identifier: str) -> asyncio.Event:
        return self.gates.setdefault(identifier, asyncio.Event())
    
    async def fetch(self, identifier: str):
        self.requested.append(identifier)
        await self.gate(identifier).wait()
        response = self.responses[identifier]
        if isinstance(response, Exception):
            raise response
        return response

@pytest.fixture
def config(tmp_path):
    """Fixture for a remote-strategy Config."""
    return Config(
        API_BASE_URL=API_URL,
        RESULT_STRATEGY="remote",
        CACHE_DIR=str(tmp_path / "cache"),
        DEMO_ANALYSIS_DELAY_SECONDS=0,
        CACHE_ENCRYPTION_KEY=None,
    )

@pytest.fixture
def local_config(tmp_path):
    """Fixture for a local-strategy Config."""
    return Config(
        API_BASE_URL=API_URL,
        RESULT_STRATEGY="local",
        CACHE_DIR=str(tmp_path / "cache"),
        DEMO_ANALYSIS_DELAY_SECONDS=0,
        CACHE_ENCRYPTION_KEY=None,
    )

@pytest.fixture
def session():
    """Fake session with the engine's endpoints for doc-123."""
    fake = FakeSession()
    fake.add("POST", "/upload", json_body={"documentId": "doc-123"})
    fake.add("GET", "/results/doc-123", json_body=sample_result_payload("doc-123"))
    fake.add("GET", "/clause/clause-1-doc-123", json_body=sample_clause_payload())
    return fake

@pytest.fixture
def client(config, session):
    return AnalysisClient(config, session=session)

@pytest.fixture
def flow(config, client):
    return NavigationFlow(
        submitter=RemoteSubmitter(client),
        result_source=RemoteResultSource(client),
        clause_source=RemoteClauseSource(client),
        config=config,
    )

@pytest.fixture
def pdf_file():
    return SelectedFile(name="contract.pdf", content_type="application/pdf", content=b"%PDF-1.4 sample")

@pytest.fixture
def docx_file():
    return SelectedFile(
        name="contract.docx",
        content_type="application/vnd.openxmlformats-officedocument.wordprocessingml.document",
        content=b"PK\x03\x04"
    )
