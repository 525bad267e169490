"""
Result retrieval for the results screen.
"""

from typing import Optional

from legalflow.analysis import DocumentAnalysisResult
from legalflow.controllers.base import RetrievalController
from legalflow.presentation.views import ResultsView, build_results_view
from legalflow.storage.sources import ResultSource

class ResultController(RetrievalController):
    """Retrieves the analysis result of one document, atomically."""
    
    subject = "document"
    
    def __init__(self, document_id: str, source: ResultSource, excerpt_length: int = 160):
        super().__init__(document_id, source)
        self.excerpt_length = excerpt_length
    
    @property
    def document_id(self) -> str:
        return self.identifier
    
    @property
    def result(self) -> Optional[DocumentAnalysisResult]:
        return self.data
    
    def build_view(self, data: DocumentAnalysisResult) -> ResultsView:
        return build_results_view(data, self.excerpt_length)
