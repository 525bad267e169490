from legalflow.controllers.base import LoadState, RetrievalController
from legalflow.controllers.upload import UploadController, UploadState
from legalflow.controllers.results import ResultController
from legalflow.controllers.clause import ClauseController

__all__ = [
    "LoadState",
    "RetrievalController",
    "UploadController",
    "UploadState",
    "ResultController",
    "ClauseController",
]
