"""
Buyer's Tool - deterministic decision compiler for scratch-and-dent appliance purchases.

    from buyers_tool import CompilerOptions, compile, load_buyer_input

    output = compile(load_buyer_input(data), CompilerOptions(timestamp="2026-01-15T12:00:00Z"))
    output.verdict.recommendation
"""

from .models import BuyerInput, CompilerOptions, CompilerOutput, CompilerTrace, load_buyer_input
from .pipeline import QuickAssessment, compile, compute_input_hash, quick_assess
from .trace import (
    TraceSummaryOptions,
    get_failed_rule_summaries,
    group_rules_by_module,
    summarize_trace,
    summarize_trace_compact,
)
from .versions import COMPILER_VERSION, RULESET_VERSION, SCHEMA_VERSION

__all__ = [
    "BuyerInput",
    "CompilerOptions",
    "CompilerOutput",
    "CompilerTrace",
    "load_buyer_input",
    "compile",
    "compute_input_hash",
    "QuickAssessment",
    "quick_assess",
    "TraceSummaryOptions",
    "summarize_trace",
    "summarize_trace_compact",
    "get_failed_rule_summaries",
    "group_rules_by_module",
    "COMPILER_VERSION",
    "SCHEMA_VERSION",
    "RULESET_VERSION",
]
