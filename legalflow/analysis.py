"""
Domain objects for contract analysis results.
"""

import os
import mimetypes
from enum import Enum
from typing import List, Optional
from dataclasses import dataclass, field

class RiskLevel(str, Enum):
    """Closed severity enumeration assigned to a clause."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

@dataclass
class Clause:
    """One extracted contractual provision with its risk assessment."""
    clause_id: str
    type: str
    risk_level: RiskLevel
    text: str
    explanation: str
    document_id: str

@dataclass
class DocumentAnalysisResult:
    """Summary plus ordered clauses of one analyzed contract."""
    document_id: str
    summary: str
    clauses: List[Clause] = field(default_factory=list)
    
    def find_clause(self, clause_id: str) -> Optional[Clause]:
        """Return the clause with the given id, if this result holds it."""
        for clause in self.clauses:
            if clause.clause_id == clause_id:
                return clause
        return None

@dataclass
class SelectedFile:
    """A file picked by the user, with the media type it was declared as."""
    name: str
    content_type: str
    content: bytes
    
    @property
    def size_bytes(self) -> int:
        return len(self.content)
    
    @classmethod
    def from_path(cls, path: str, content_type: Optional[str] = None) -> "SelectedFile":
        """
        Read a file from disk, declaring its type from the extension.
        
        Args:
            path: Path to the file
            content_type: Explicit media type, guessed when omitted
            
        Returns:
            Selected file
        """
        if content_type is None:
            content_type = mimetypes.guess_type(path)[0] or "application/octet-stream"
        with open(path, 'rb') as f:
            content = f.read()
        return cls(name=os.path.basename(path), content_type=content_type, content=content)
