from legalflow.utils.helpers import create_document_id, hash_text, run_blocking, setup_logging, truncate_text

__all__ = ["create_document_id", "hash_text", "run_blocking", "setup_logging", "truncate_text"]
