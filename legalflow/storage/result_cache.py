"""
Local cache of analysis results keyed by document id.
"""

import os
import json
import logging
from typing import Iterator, Optional, Union

from cryptography.fernet import Fernet, InvalidToken

from legalflow.analysis import Clause, DocumentAnalysisResult
from legalflow.api.models import AnalysisResultResponse, parse_result
from legalflow.errors import ContractViolation, NotFound
from legalflow.utils.helpers import hash_text

logger = logging.getLogger(__name__)

class LocalResultCache:
    """
    Stores results as JSON files in the same shape the engine returns.
    
    File names are derived from a hash of the document id, so any opaque
    identifier maps to a safe path. When an encryption key is given the
    file body is a Fernet token instead of plain JSON.
    """
    
    def __init__(self, cache_dir: str, encryption_key: Optional[Union[str, bytes]] = None):
        """
        Initialize the cache.
        
        Args:
            cache_dir: Directory holding cached results
            encryption_key: Optional Fernet key for encrypting cached results
        """
        self.cache_dir = cache_dir
        self.cipher_suite = Fernet(encryption_key) if encryption_key else None
        os.makedirs(self.cache_dir, exist_ok=True)
    
    def path_for(self, document_id: str) -> str:
        return os.path.join(self.cache_dir, f"document-{hash_text(document_id)}.json")
    
    def save(self, result: DocumentAnalysisResult) -> str:
        """
        Persist a result.
        
        Args:
            result: Analysis result to store
            
        Returns:
            Path of the written file
        """
        payload = AnalysisResultResponse.from_domain(result).model_dump(by_alias=True, mode="json")
        body = json.dumps(payload, indent=2)
        if self.cipher_suite:
            body = self.cipher_suite.encrypt(body.encode()).decode()
        
        path = self.path_for(result.document_id)
        with open(path, 'w', encoding='utf-8') as f:
            f.write(body)
        logger.info(f"Cached result for {result.document_id} at {path}")
        return path
    
    def load(self, document_id: str) -> DocumentAnalysisResult:
        """
        Read a cached result.
        
        Args:
            document_id: Document identifier
            
        Returns:
            Cached analysis result
        """
        path = self.path_for(document_id)
        if not os.path.exists(path):
            raise NotFound(f"No cached result for {document_id}", user_message="Document not found")
        return parse_result(self._read(path), document_id)
    
    def contains(self, document_id: str) -> bool:
        return os.path.exists(self.path_for(document_id))
    
    def find_clause(self, clause_id: str) -> Clause:
        """
        Resolve a clause id by scanning cached results.
        
        Args:
            clause_id: Clause identifier
            
        Returns:
            The matching clause
        """
        for data in self._iter_payloads():
            document_id = data.get("documentId") if isinstance(data, dict) else None
            clauses = data.get("clauses") if document_id else None
            if not isinstance(clauses, list):
                continue
            for clause in clauses:
                if isinstance(clause, dict) and clause.get("clauseId") == clause_id:
                    result = parse_result(data, document_id)
                    return result.find_clause(clause_id)
        raise NotFound(f"No cached clause {clause_id}", user_message="Clause not found")
    
    def _iter_payloads(self) -> Iterator[dict]:
        for name in sorted(os.listdir(self.cache_dir)):
            if name.startswith("document-") and name.endswith(".json"):
                path = os.path.join(self.cache_dir, name)
                try:
                    data = self._read(path)
                except ContractViolation as e:
                    logger.warning(f"Skipping unreadable cached result: {e}")
                    continue
                yield data
    
    def _read(self, path: str) -> dict:
        try:
            with open(path, 'r', encoding='utf-8') as f:
                body = f.read()
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Could not read cached result {path}: {e}")
            raise ContractViolation(f"Cached result {path} could not be read") from e
        
        if self.cipher_suite:
            try:
                body = self.cipher_suite.decrypt(body.encode()).decode()
            except InvalidToken as e:
                logger.error(f"Could not decrypt cached result {path}")
                raise ContractViolation(f"Cached result {path} could not be decrypted") from e
        
        try:
            return json.loads(body)
        except json.JSONDecodeError as e:
            raise ContractViolation(f"Cached result {path} is not valid JSON") from e
