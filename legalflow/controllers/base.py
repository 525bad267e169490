"""
Base class for screens that retrieve one record by identifier.
"""

import logging
from enum import Enum
from typing import Any, Optional

from legalflow.errors import LegalFlowError
from legalflow.presentation.views import ErrorView, LoadingView

logger = logging.getLogger(__name__)

class LoadState(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    READY = "ready"
    FAILED = "failed"

class RetrievalController:
    """
    Loads one record for a screen and tracks ``loading -> ready | failed``.
    
    Each load takes a new generation number. A response is applied only if
    its generation is still current, so a late response for an identifier
    the screen has moved away from, or for a disposed screen, is dropped.
    """
    
    subject = "record"
    
    def __init__(self, identifier: str, source: Any):
        """
        Initialize the controller.
        
        Args:
            identifier: Opaque identifier of the record to show
            source: Strategy object with an async ``fetch(identifier)``
        """
        self.identifier = identifier
        self.source = source
        self.state = LoadState.IDLE
        self.data: Optional[Any] = None
        self.error: Optional[LegalFlowError] = None
        self.disposed = False
        self._generation = 0
    
    @property
    def error_message(self) -> Optional[str]:
        return self.error.user_message if self.error else None
    
    @property
    def generation(self) -> int:
        return self._generation
    
    def is_current(self, generation: int) -> bool:
        return not self.disposed and generation == self._generation
    
    async def load(self, identifier: Optional[str] = None) -> bool:
        """
        Load the record, or switch to a new identifier and load that.
        
        Loading the identifier that is already loaded, loading or failed does
        nothing; use ``retry()`` to fetch again.
        
        Args:
            identifier: New identifier, or None to keep the current one
            
        Returns:
            True if this call left the controller ready
        """
        if self.disposed:
            logger.debug(f"Ignoring load on disposed {self.subject} screen")
            return False
        
        if identifier is None or identifier == self.identifier:
            if self.state is not LoadState.IDLE:
                return self.state is LoadState.READY
        else:
            self.identifier = identifier
        
        return await self._fetch()
    
    async def retry(self) -> bool:
        """Fetch the current identifier again, after a failure or on request."""
        if self.disposed or self.state is LoadState.LOADING:
            return False
        return await self._fetch()
    
    def dispose(self) -> None:
        """Mark the screen as left; pending responses will be discarded."""
        self.disposed = True
        self._generation += 1
    
    def view(self):
        if self.state is LoadState.READY:
            return self.build_view(self.data)
        if self.state is LoadState.FAILED:
            return ErrorView(message=self.error_message)
        return LoadingView()
    
    def build_view(self, data: Any):
        raise NotImplementedError("Subclasses must implement build_view()")
    
    async def _fetch(self) -> bool:
        self._generation += 1
        generation = self._generation
        identifier = self.identifier
        
        self.state = LoadState.LOADING
        self.data = None
        self.error = None
        logger.info(f"Loading {self.subject} {identifier}")
        
        try:
            data = await self.source.fetch(identifier)
        except LegalFlowError as e:
            if not self.is_current(generation):
                logger.debug(f"Discarding stale failure for {self.subject} {identifier}")
                return False
            logger.warning(f"Failed to load {self.subject} {identifier}: {e.message}")
            self.state = LoadState.FAILED
            self.error = e
            return False
        
        if not self.is_current(generation):
            logger.debug(f"Discarding stale response for {self.subject} {identifier}")
            return False
        
        self.data = data
        self.state = LoadState.READY
        logger.info(f"Loaded {self.subject} {identifier}")
        return True
