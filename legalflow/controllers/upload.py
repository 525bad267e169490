"""
Upload submission controller for the selection screen.
"""

import logging
from enum import Enum
from typing import Optional

from legalflow.config import Config
from legalflow.analysis import SelectedFile
from legalflow.errors import LegalFlowError, ValidationError
from legalflow.storage.sources import Submitter

logger = logging.getLogger(__name__)

class UploadState(str, Enum):
    IDLE = "idle"
    READY = "ready"
    SUBMITTING = "submitting"
    SUBMITTED = "submitted"
    FAILED = "failed"

class UploadController:
    """
    Owns one file selection and its submission for analysis.
    
    States: ``idle -> ready -> submitting -> submitted | failed``. A failed
    submission keeps the file, so ``submit()`` can be called again without
    selecting it anew. Only one submission is in flight at a time.
    """
    
    def __init__(self, submitter: Submitter, config: Optional[Config] = None):
        """
        Initialize the controller.
        
        Args:
            submitter: Strategy that sends the file and returns a document id
            config: Configuration settings, or use defaults
        """
        self.submitter = submitter
        self.config = config or Config()
        self.state = UploadState.IDLE
        self.file: Optional[SelectedFile] = None
        self.document_id: Optional[str] = None
        self.error: Optional[LegalFlowError] = None
        self.disposed = False
    
    @property
    def error_message(self) -> Optional[str]:
        return self.error.user_message if self.error else None
    
    @property
    def can_submit(self) -> bool:
        return self.state in (UploadState.READY, UploadState.FAILED)
    
    def validate(self, file: SelectedFile) -> None:
        """
        Check a selection locally.
        
        Args:
            file: Candidate selection
            
        Raises:
            ValidationError: If the declared type is not PDF or the file is too large
        """
        declared = (file.content_type or "").split(';')[0].strip().lower()
        if declared != self.config.ACCEPTED_MEDIA_TYPE:
            raise ValidationError(f"Rejected {file.name}: declared type {file.content_type!r}")
        
        max_bytes = self.config.MAX_UPLOAD_SIZE_MB * 1024 * 1024
        if file.size_bytes > max_bytes:
            raise ValidationError(
                f"Rejected {file.name}: {file.size_bytes} bytes",
                user_message=f"File exceeds maximum size of {self.config.MAX_UPLOAD_SIZE_MB}MB"
            )
    
    def select_file(self, file: SelectedFile) -> bool:
        """
        Select a file for submission.
        
        An invalid file is rejected with a visible message and any earlier
        valid selection is kept. Ignored while a submission is in flight.
        
        Args:
            file: File picked by the user
            
        Returns:
            True if the file is now the selection
        """
        if self.state is UploadState.SUBMITTING:
            return False
        
        try:
            self.validate(file)
        except ValidationError as e:
            logger.info(e.message)
            self.error = e
            return False
        
        self.file = file
        self.document_id = None
        self.error = None
        self.state = UploadState.READY
        logger.info(f"Selected {file.name} ({file.size_bytes} bytes)")
        return True
    
    def dispose(self) -> None:
        """Mark the screen as left; a pending submission result will be discarded."""
        self.disposed = True
    
    def reset(self) -> None:
        """Clear the selection. Ignored while a submission is in flight."""
        if self.state is UploadState.SUBMITTING:
            return
        self.file = None
        self.document_id = None
        self.error = None
        self.state = UploadState.IDLE
    
    async def submit(self) -> Optional[str]:
        """
        Submit the selected file.
        
        No-op when nothing is selected, while submitting, or once submitted.
        
        Returns:
            The document id on success, otherwise None
        """
        if self.disposed or not self.can_submit:
            return None
        
        file = self.file
        self.state = UploadState.SUBMITTING
        self.error = None
        logger.info(f"Submitting {file.name}")
        
        try:
            document_id = await self.submitter.submit(file)
        except LegalFlowError as e:
            if self.disposed:
                logger.debug(f"Discarding failed submission of {file.name} for a left screen")
                return None
            logger.warning(f"Submission of {file.name} failed: {e.message}")
            self.error = e
            self.state = UploadState.FAILED
            return None
        
        if self.disposed:
            logger.debug(f"Discarding submission result {document_id} for a left screen")
            return None
        
        self.document_id = document_id
        self.state = UploadState.SUBMITTED
        logger.info(f"Submitted {file.name} as {document_id}")
        return document_id
