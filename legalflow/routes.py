"""
Screen routes. Every route carries at most one opaque identifier.
"""

from enum import Enum
from typing import Optional
from dataclasses import dataclass
from urllib.parse import quote, unquote

class Screen(str, Enum):
    SELECTION = "selection"
    RESULTS = "results"
    CLAUSE_DETAIL = "clause"

@dataclass(frozen=True)
class Route:
    """A screen plus the identifier it is parameterized by."""
    screen: Screen
    identifier: Optional[str] = None
    
    def __post_init__(self):
        if self.screen is Screen.SELECTION and self.identifier is not None:
            raise ValueError("The selection screen takes no identifier")
        if self.screen is not Screen.SELECTION and not self.identifier:
            raise ValueError(f"The {self.screen.value} screen needs an identifier")
    
    @classmethod
    def selection(cls) -> "Route":
        return cls(Screen.SELECTION)
    
    @classmethod
    def results(cls, document_id: str) -> "Route":
        return cls(Screen.RESULTS, document_id)
    
    @classmethod
    def clause(cls, clause_id: str) -> "Route":
        return cls(Screen.CLAUSE_DETAIL, clause_id)
    
    @property
    def path(self) -> str:
        if self.screen is Screen.SELECTION:
            return "/"
        return f"/{self.screen.value}/{quote(self.identifier, safe='')}"
    
    @classmethod
    def parse(cls, path: str) -> "Route":
        """
        Parse a saved link such as ``/results/doc-123``.
        
        Args:
            path: Route path
            
        Returns:
            Parsed route
            
        Raises:
            ValueError: If the path does not name a known screen
        """
        parts = [part for part in path.strip().split('/') if part]
        if not parts:
            return cls.selection()
        if len(parts) == 2:
            for screen in (Screen.RESULTS, Screen.CLAUSE_DETAIL):
                if parts[0] == screen.value:
                    return cls(screen, unquote(parts[1]))
        raise ValueError(f"Unknown route: {path}")
