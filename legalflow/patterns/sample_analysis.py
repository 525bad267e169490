"""
Demonstration analysis produced by the local submission strategy.
"""

from typing import List
from dataclasses import dataclass

from legalflow.analysis import Clause, DocumentAnalysisResult, RiskLevel

SAMPLE_SUMMARY = (
    "This contract outlines the terms and conditions between two parties. The agreement "
    "includes key provisions regarding payment terms, liability limitations, and dispute "
    "resolution. Important dates: effective date upon signing, renewal on annual basis. "
    "Overall risk assessment: MEDIUM due to broad indemnification clauses."
)

@dataclass
class SampleClause:
    """Template for one demonstration clause."""
    type: str
    risk_level: RiskLevel
    text: str
    explanation: str

SAMPLE_CLAUSES: List[SampleClause] = [
    SampleClause(
        type="Payment Terms",
        risk_level=RiskLevel.LOW,
        text="Payment shall be made within 30 days of invoice receipt. A 2% early payment "
             "discount is available if payment is received within 10 days.",
        explanation="This clause outlines standard payment expectations. Net-30 terms are "
                    "industry standard and favorable. The early payment discount incentivizes "
                    "faster payment without penalty."
    ),
    SampleClause(
        type="Limitation of Liability",
        risk_level=RiskLevel.HIGH,
        text="Neither party shall be liable for indirect, incidental, special, or consequential "
             "damages arising from this agreement, except in cases of gross negligence or "
             "willful misconduct.",
        explanation="This is a mutual liability cap. While it protects both parties, the "
                    "exclusion is very broad and may limit recovery in significant disputes."
    ),
    SampleClause(
        type="Confidentiality",
        risk_level=RiskLevel.MEDIUM,
        text="All confidential information shared under this agreement shall be kept strictly "
             "confidential for a period of 3 years after contract termination.",
        explanation="Standard confidentiality clause. 3 years post-termination is reasonable. "
                    "Ensure your organization has processes to enforce this."
    ),
]

def build_sample_analysis(document_id: str) -> DocumentAnalysisResult:
    """
    Build the demonstration result for a document.
    
    Clause ids embed the document id so they stay unique across results.
    
    Args:
        document_id: Identifier of the submitted document
        
    Returns:
        Demonstration analysis result
    """
    clauses = [
        Clause(
            clause_id=f"clause-{index}-{document_id}",
            type=sample.type,
            risk_level=sample.risk_level,
            text=sample.text,
            explanation=sample.explanation,
            document_id=document_id,
        )
        for index, sample in enumerate(SAMPLE_CLAUSES, start=1)
    ]
    return DocumentAnalysisResult(document_id=document_id, summary=SAMPLE_SUMMARY, clauses=clauses)
