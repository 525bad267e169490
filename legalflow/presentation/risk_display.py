"""
Mapping from risk level to presentation category.
"""

from typing import Dict, Union
from dataclasses import dataclass

from legalflow.analysis import RiskLevel
from legalflow.errors import ContractViolation

@dataclass(frozen=True)
class RiskCategory:
    """How a risk level is presented: a label and a tone for the UI to style."""
    label: str
    tone: str

RISK_CATEGORIES: Dict[RiskLevel, RiskCategory] = {
    RiskLevel.LOW: RiskCategory(label="Low Risk", tone="success"),
    RiskLevel.MEDIUM: RiskCategory(label="Medium Risk", tone="warning"),
    RiskLevel.HIGH: RiskCategory(label="High Risk", tone="danger"),
}

def risk_category(risk_level: Union[RiskLevel, str]) -> RiskCategory:
    """
    Return the presentation category of a risk level.
    
    There is no fallback style: a value outside the enumeration means the
    analysis engine broke its contract.
    
    Args:
        risk_level: Risk level, as enum member or raw string
        
    Returns:
        Presentation category
        
    Raises:
        ContractViolation: If the value is not a known risk level
    """
    try:
        level = RiskLevel(risk_level)
    except ValueError as e:
        raise ContractViolation(f"Unknown risk level {risk_level!r}") from e
    return RISK_CATEGORIES[level]
