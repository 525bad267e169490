"""
Clause retrieval for the clause detail screen.
"""

from typing import Optional

from legalflow.analysis import Clause
from legalflow.controllers.base import RetrievalController
from legalflow.presentation.views import ClauseDetailView, build_clause_view
from legalflow.storage.sources import ClauseSource

class ClauseController(RetrievalController):
    """Retrieves one clause by id without touching its parent result."""
    
    subject = "clause"
    
    @property
    def clause_id(self) -> str:
        return self.identifier
    
    @property
    def clause(self) -> Optional[Clause]:
        return self.data
    
    @property
    def document_id(self) -> Optional[str]:
        """Owning document of the loaded clause, for the back link."""
        return self.data.document_id if self.data is not None else None
    
    def build_view(self, data: Clause) -> ClauseDetailView:
        return build_clause_view(data)
