"""
View models handed to the UI layer.
"""

from typing import Dict, List
from dataclasses import dataclass, field

from legalflow.analysis import Clause, DocumentAnalysisResult, RiskLevel
from legalflow.presentation.risk_display import risk_category
from legalflow.routes import Route
from legalflow.utils.helpers import truncate_text

@dataclass
class LoadingView:
    message: str = "Loading..."

@dataclass
class ErrorView:
    """Error screen with a recovery action."""
    message: str
    title: str = "Error"
    action_label: str = "Go Back"

@dataclass
class ClauseRow:
    """One line of the results list."""
    clause_id: str
    type: str
    risk_label: str
    tone: str
    excerpt: str
    path: str

@dataclass
class ResultsView:
    document_id: str
    summary: str
    rows: List[ClauseRow] = field(default_factory=list)
    risk_counts: Dict[str, int] = field(default_factory=dict)

@dataclass
class ClauseDetailView:
    """Full clause: text and explanation are shown verbatim."""
    clause_id: str
    title: str
    risk_label: str
    tone: str
    text: str
    explanation: str
    back_path: str
    back_label: str = "Back to Results"

def build_results_view(result: DocumentAnalysisResult, excerpt_length: int = 160) -> ResultsView:
    """
    Build the results screen in clause order.
    
    Args:
        result: Analysis result
        excerpt_length: Maximum length of the clause text preview
        
    Returns:
        Results view
    """
    rows = []
    risk_counts = {level.value: 0 for level in RiskLevel}
    for clause in result.clauses:
        category = risk_category(clause.risk_level)
        risk_counts[RiskLevel(clause.risk_level).value] += 1
        rows.append(ClauseRow(
            clause_id=clause.clause_id,
            type=clause.type,
            risk_label=category.label,
            tone=category.tone,
            excerpt=truncate_text(clause.text, excerpt_length),
            path=Route.clause(clause.clause_id).path,
        ))
    return ResultsView(
        document_id=result.document_id,
        summary=result.summary,
        rows=rows,
        risk_counts=risk_counts,
    )

def build_clause_view(clause: Clause) -> ClauseDetailView:
    category = risk_category(clause.risk_level)
    return ClauseDetailView(
        clause_id=clause.clause_id,
        title=clause.type,
        risk_label=category.label,
        tone=category.tone,
        text=clause.text,
        explanation=clause.explanation,
        back_path=Route.results(clause.document_id).path,
    )
