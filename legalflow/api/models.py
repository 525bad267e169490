"""
Pydantic models for analysis engine responses.
"""

from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from legalflow.analysis import Clause, DocumentAnalysisResult, RiskLevel
from legalflow.errors import ContractViolation

class WireModel(BaseModel):
    """Base for camelCase JSON payloads."""
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

class UploadResponse(WireModel):
    """Response of ``POST /upload``."""
    document_id: str = Field(alias="documentId")
    
    @field_validator("document_id")
    @classmethod
    def document_id_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("documentId must not be empty")
        return value

class ClausePayload(WireModel):
    """Clause as it appears inside a results response."""
    clause_id: str = Field(alias="clauseId", min_length=1)
    type: str
    risk_level: RiskLevel = Field(alias="riskLevel")
    text: str
    explanation: str
    document_id: Optional[str] = Field(default=None, alias="documentId")
    
    def to_domain(self, document_id: str) -> Clause:
        """
        Convert to a domain clause owned by ``document_id``.
        
        Args:
            document_id: Identifier of the result the clause came from
            
        Returns:
            Domain clause
        """
        if self.document_id is not None and self.document_id != document_id:
            raise ContractViolation(
                f"Clause {self.clause_id} belongs to {self.document_id}, expected {document_id}"
            )
        return Clause(
            clause_id=self.clause_id,
            type=self.type,
            risk_level=self.risk_level,
            text=self.text,
            explanation=self.explanation,
            document_id=document_id,
        )

class ClauseResponse(ClausePayload):
    """Response of ``GET /clause/{clauseId}``; must link back to its document."""
    document_id: str = Field(alias="documentId", min_length=1)

class AnalysisResultResponse(WireModel):
    """Response of ``GET /results/{documentId}`` and the cached result format."""
    document_id: Optional[str] = Field(default=None, alias="documentId")
    summary: str
    clauses: List[ClausePayload] = Field(default_factory=list)
    
    def to_domain(self, document_id: str) -> DocumentAnalysisResult:
        """
        Convert to a domain result, enforcing ownership and id uniqueness.
        
        Args:
            document_id: Identifier the result was requested for
            
        Returns:
            Domain analysis result
        """
        if self.document_id is not None and self.document_id != document_id:
            raise ContractViolation(
                f"Result for {self.document_id} returned when {document_id} was requested"
            )
        
        seen = set()
        clauses = []
        for payload in self.clauses:
            if payload.clause_id in seen:
                raise ContractViolation(f"Duplicate clauseId {payload.clause_id} in {document_id}")
            seen.add(payload.clause_id)
            clauses.append(payload.to_domain(document_id))
        
        return DocumentAnalysisResult(document_id=document_id, summary=self.summary, clauses=clauses)
    
    @classmethod
    def from_domain(cls, result: DocumentAnalysisResult) -> "AnalysisResultResponse":
        """Build the wire shape of a domain result."""
        return cls(
            document_id=result.document_id,
            summary=result.summary,
            clauses=[
                ClausePayload(
                    clause_id=clause.clause_id,
                    type=clause.type,
                    risk_level=clause.risk_level,
                    text=clause.text,
                    explanation=clause.explanation,
                    document_id=clause.document_id,
                )
                for clause in result.clauses
            ],
        )

def parse_upload(data: object) -> str:
    """Return the document id of an upload response."""
    try:
        return UploadResponse.model_validate(data).document_id
    except ValidationError as e:
        raise ContractViolation(f"Invalid upload response: {e}") from e

def parse_result(data: object, document_id: str) -> DocumentAnalysisResult:
    """Validate a results payload requested for ``document_id``."""
    try:
        payload = AnalysisResultResponse.model_validate(data)
    except ValidationError as e:
        raise ContractViolation(f"Invalid result for {document_id}: {e}") from e
    return payload.to_domain(document_id)

def parse_clause(data: object, clause_id: str) -> Clause:
    """Validate a clause-detail payload requested for ``clause_id``."""
    try:
        payload = ClauseResponse.model_validate(data)
    except ValidationError as e:
        raise ContractViolation(f"Invalid clause {clause_id}: {e}") from e
    if payload.clause_id != clause_id:
        raise ContractViolation(f"Clause {payload.clause_id} returned when {clause_id} was requested")
    return payload.to_domain(payload.document_id)
