"""
Tests for the result and clause retrieval controllers.
"""

import asyncio
import pytest

from legalflow.api.client import AnalysisClient
from legalflow.api.models import parse_clause, parse_result
from legalflow.controllers import ClauseController, LoadState, ResultController
from legalflow.errors import ContractViolation, NotFound, ServerError
from legalflow.presentation.views import ClauseDetailView, ErrorView, LoadingView, ResultsView
from legalflow.storage.sources import RemoteClauseSource, RemoteResultSource
from tests.conftest import FakeSession, GatedSource, sample_clause_payload, sample_result_payload

@pytest.mark.asyncio
async def test_result_controller_loads(client, session):
    controller = ResultController("doc-123", RemoteResultSource(client))
    assert controller.state is LoadState.IDLE
    assert isinstance(controller.view(), LoadingView)
    
    assert await controller.load()
    
    assert controller.state is LoadState.READY
    assert controller.result.document_id == "doc-123"
    assert session.calls[0]["path"] == "/results/doc-123"
    
    view = controller.view()
    assert isinstance(view, ResultsView)
    assert [row.clause_id for row in view.rows] == ["clause-1-doc-123", "clause-2-doc-123"]
    assert view.rows[0].risk_label == "High Risk"
    assert view.rows[0].path == "/clause/clause-1-doc-123"
    assert view.risk_counts == {"low": 1, "medium": 0, "high": 1}

@pytest.mark.asyncio
async def test_retrieval_is_idempotent(client):
    first = ResultController("doc-123", RemoteResultSource(client))
    second = ResultController("doc-123", RemoteResultSource(client))
    await first.load()
    await second.load()
    
    assert first.result == second.result
    assert first.result is not second.result

@pytest.mark.asyncio
async def test_load_same_id_does_not_refetch(client, session):
    controller = ResultController("doc-123", RemoteResultSource(client))
    await controller.load()
    
    assert await controller.load("doc-123")
    assert len(session.calls) == 1

@pytest.mark.asyncio
async def test_retry_refetches(client, session):
    controller = ResultController("doc-123", RemoteResultSource(client))
    await controller.load()
    
    assert await controller.retry()
    assert len(session.calls) == 2

@pytest.mark.asyncio
async def test_unknown_document_renders_go_back(client):
    controller = ResultController("doc-unknown", RemoteResultSource(client))
    
    assert not await controller.load()
    
    assert controller.state is LoadState.FAILED
    assert isinstance(controller.error, NotFound)
    view = controller.view()
    assert isinstance(view, ErrorView)
    assert view.message == "Document not found"
    assert view.action_label == "Go Back"

@pytest.mark.asyncio
async def test_failure_then_retry_succeeds(config):
    session = FakeSession()
    session.add("GET", "/results/doc-1", status=502, json_body={})
    controller = ResultController("doc-1", RemoteResultSource(AnalysisClient(config, session=session)))
    
    await controller.load()
    assert isinstance(controller.error, ServerError)
    
    session.add("GET", "/results/doc-1", json_body=sample_result_payload("doc-1"))
    assert await controller.retry()
    assert controller.error is None
    assert controller.result.document_id == "doc-1"

@pytest.mark.asyncio
async def test_invalid_risk_level_fails_with_contract_violation(config):
    payload = sample_result_payload("doc-1")
    payload["clauses"][0]["riskLevel"] = "severe"
    session = FakeSession()
    session.add("GET", "/results/doc-1", json_body=payload)
    controller = ResultController("doc-1", RemoteResultSource(AnalysisClient(config, session=session)))
    
    await controller.load()
    
    assert controller.state is LoadState.FAILED
    assert isinstance(controller.error, ContractViolation)
    assert not isinstance(controller.error, ServerError)
    assert controller.result is None

@pytest.mark.asyncio
async def test_stale_response_for_previous_id_is_discarded():
    source = GatedSource({
        "doc-a": parse_result(sample_result_payload("doc-a"), "doc-a"),
        "doc-b": parse_result(sample_result_payload("doc-b"), "doc-b"),
    })
    controller = ResultController("doc-a", source)
    
    first = asyncio.create_task(controller.load())
    await asyncio.sleep(0)
    second = asyncio.create_task(controller.load("doc-b"))
    await asyncio.sleep(0)
    
    source.gate("doc-b").set()
    assert await second
    source.gate("doc-a").set()
    assert not await first
    
    assert controller.document_id == "doc-b"
    assert controller.result.document_id == "doc-b"

@pytest.mark.asyncio
async def test_stale_failure_is_discarded():
    source = GatedSource({
        "doc-a": NotFound("gone"),
        "doc-b": parse_result(sample_result_payload("doc-b"), "doc-b"),
    })
    controller = ResultController("doc-a", source)
    
    first = asyncio.create_task(controller.load())
    await asyncio.sleep(0)
    source.gate("doc-b").set()
    await controller.load("doc-b")
    source.gate("doc-a").set()
    await first
    
    assert controller.state is LoadState.READY
    assert controller.error is None

@pytest.mark.asyncio
async def test_disposed_controller_discards_response():
    source = GatedSource({"doc-a": parse_result(sample_result_payload("doc-a"), "doc-a")})
    controller = ResultController("doc-a", source)
    
    task = asyncio.create_task(controller.load())
    await asyncio.sleep(0)
    generation = controller.generation
    controller.dispose()
    source.gate("doc-a").set()
    
    assert not await task
    assert not controller.is_current(generation)
    assert controller.result is None
    assert controller.state is LoadState.LOADING

@pytest.mark.asyncio
async def test_load_while_loading_is_noop():
    source = GatedSource({"doc-a": parse_result(sample_result_payload("doc-a"), "doc-a")})
    controller = ResultController("doc-a", source)
    
    task = asyncio.create_task(controller.load())
    await asyncio.sleep(0)
    assert not await controller.load()
    assert not await controller.retry()
    source.gate("doc-a").set()
    
    assert await task
    assert source.requested == ["doc-a"]

@pytest.mark.asyncio
async def test_clause_controller_loads(client, session):
    controller = ClauseController("clause-1-doc-123", RemoteClauseSource(client))
    
    assert controller.document_id is None
    assert await controller.load()
    
    assert controller.document_id == "doc-123"
    assert [call["path"] for call in session.calls] == ["/clause/clause-1-doc-123"]
    view = controller.view()
    assert isinstance(view, ClauseDetailView)
    assert view.title == "Limitation of Liability"
    assert view.risk_label == "High Risk"
    assert view.text == sample_clause_payload()["text"]
    assert view.explanation == sample_clause_payload()["explanation"]
    assert view.back_path == "/results/doc-123"

@pytest.mark.asyncio
async def test_clause_not_found(client):
    controller = ClauseController("clause-404", RemoteClauseSource(client))
    
    await controller.load()
    
    assert isinstance(controller.error, NotFound)
    assert controller.view().message == "Clause not found"

@pytest.mark.asyncio
async def test_clause_stale_response_is_discarded():
    source = GatedSource({
        "c-1": parse_clause(sample_clause_payload("c-1"), "c-1"),
        "c-2": parse_clause(sample_clause_payload("c-2"), "c-2"),
    })
    controller = ClauseController("c-1", source)
    
    first = asyncio.create_task(controller.load())
    await asyncio.sleep(0)
    source.gate("c-2").set()
    await controller.load("c-2")
    source.gate("c-1").set()
    await first
    
    assert controller.clause.clause_id == "c-2"
