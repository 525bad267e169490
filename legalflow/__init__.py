"""
LegalFlow Light: client workflow for contract clause risk analysis.
"""

__version__ = "1.0.0"
