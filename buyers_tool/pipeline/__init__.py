"""Pipeline modules for the decision compiler."""

from .damage import DamageClassifier
from .pricing import PricingEngine
from .safety import SafetyGate
from .warranty import WarrantyEvaluator
from .returns import ReturnPolicyFilter
from .negotiation import NegotiationEngine
from .logistics import LogisticsSolver
from .verdict import VerdictCompiler
from .orchestrator import compile, compute_input_hash
from .quick import QuickAssessment, quick_assess

__all__ = [
    "DamageClassifier",
    "PricingEngine",
    "SafetyGate",
    "WarrantyEvaluator",
    "ReturnPolicyFilter",
    "NegotiationEngine",
    "LogisticsSolver",
    "VerdictCompiler",
    "compile",
    "compute_input_hash",
    "QuickAssessment",
    "quick_assess",
]
