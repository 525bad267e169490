"""
Error taxonomy for the client workflow.

Every error carries a ``user_message`` that controllers show on screen.
Errors are raised by the client and storage layers and caught only at the
controller boundary.
"""

from typing import Optional

class LegalFlowError(Exception):
    """Base class for all workflow errors."""
    
    default_message = "An error occurred"
    
    def __init__(self, message: Optional[str] = None, user_message: Optional[str] = None):
        self.message = message or self.default_message
        self.user_message = user_message or self.default_message
        super().__init__(self.message)

class ValidationError(LegalFlowError):
    """Local rejection of a selected file. No network call was made."""
    
    default_message = "Please upload a PDF file"

class TransportError(LegalFlowError):
    """The analysis engine could not be reached."""
    
    default_message = "Could not reach the analysis service"

class ServerError(LegalFlowError):
    """The analysis engine answered with a non-2xx status."""
    
    default_message = "The analysis service returned an error"
    
    def __init__(self, message: Optional[str] = None, user_message: Optional[str] = None,
                 status_code: Optional[int] = None):
        super().__init__(message, user_message)
        self.status_code = status_code

class ContractViolation(LegalFlowError):
    """A well-formed response that breaks the data contract."""
    
    default_message = "The analysis service returned an unexpected response"

class NotFound(LegalFlowError):
    """An identifier that does not resolve to any record."""
    
    default_message = "Not found"
