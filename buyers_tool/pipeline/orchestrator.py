"""
Pipeline orchestrator - runs the eight modules in order and assembles the output.

Given the same BuyerInput and timestamp, ``compile`` always produces the
same CompilerOutput.
"""
import logging
from typing import Optional, TypeVar

from ..models.enums import Confidence, ModuleName, Recommendation
from ..models.inputs import BuyerInput
from ..models.output import CompilerOptions, CompilerOutput, CompilerTrace
from ..models.results import (
    LogisticsPlan,
    NegotiationAssessment,
    ReturnPolicyAssessment,
    Verdict,
    WarrantyEvaluation,
)
from ..models.rules import ModuleOutput, RuleResult, is_blocker
from ..trace import summarize_trace_compact
from ..versions import COMPILER_VERSION, RULESET_VERSION, SCHEMA_VERSION

from .damage import DamageClassifier
from .logistics import LogisticsSolver
from .negotiation import NegotiationEngine
from .pricing import PricingEngine
from .returns import ReturnPolicyFilter
from .safety import SafetyGate
from .verdict import VerdictCompiler
from .warranty import WarrantyEvaluator


logger = logging.getLogger(__name__)

ResultT = TypeVar("ResultT")


def compute_input_hash(buyer_input: BuyerInput) -> str:
    """
    32-bit string hash of the serialized input, as 8 hex chars.

    For dedup, caching and log correlation only; collisions are acceptable.
    The serialization follows the fixed field order of the models, so the
    same input always hashes the same.
    """
    serialized = buyer_input.model_dump_json(by_alias=True, exclude_none=True)
    value = 0
    for char in serialized:
        value = ((value << 5) - value + ord(char)) & 0xFFFFFFFF
    # Magnitude of the signed 32-bit value
    if value & 0x80000000:
        value = (1 << 32) - value
    return f"{value:08x}"


class _TraceBuilder:
    """Append-only record of the modules that ran and the rules they emitted."""

    def __init__(self, timestamp: str, input_hash: str):
        self.timestamp = timestamp
        self.input_hash = input_hash
        self.rules: list[RuleResult] = []
        self.execution_order: list[ModuleName] = []

    def record(self, module: ModuleName, output: ModuleOutput[ResultT]) -> ResultT:
        self.execution_order.append(module)
        self.rules.extend(output.rules)
        return output.result

    def build(self, halted_by: Optional[RuleResult] = None) -> CompilerTrace:
        return CompilerTrace(
            rules=list(self.rules),
            execution_order=list(self.execution_order),
            halted_at_module=self.execution_order[-1] if halted_by else None,
            halted_by_rule_id=halted_by.rule_id if halted_by else None,
            compiler_version=COMPILER_VERSION,
            schema_version=SCHEMA_VERSION,
            ruleset_version=RULESET_VERSION,
            timestamp=self.timestamp,
            input_hash=self.input_hash,
        )


def _first_blocker(output: ModuleOutput) -> Optional[RuleResult]:
    return next((rule for rule in output.rules if is_blocker(rule)), None)


def _walk_away(blocker: RuleResult) -> Verdict:
    return Verdict(
        recommendation=Recommendation.WALK_AWAY,
        confidence=Confidence.HIGH,
        summary=f"Cannot proceed: {blocker.message}",
    )


def compile(buyer_input: BuyerInput, options: CompilerOptions) -> CompilerOutput:
    """
    Run the full evaluation pipeline.

    Pipeline steps:
    1. DamageClassifier, PricingEngine, SafetyGate
    2. Halt on any failed SafetyGate blocker
    3. WarrantyEvaluator, ReturnPolicyFilter
    4. Halt on any failed ReturnPolicyFilter blocker
    5. NegotiationEngine, LogisticsSolver, VerdictCompiler

    On a halt the verdict is a forced WALK_AWAY quoting the first failed
    blocker, and every module that did not run is filled with its
    ``not_evaluated`` placeholder.

    Args:
        buyer_input: Structurally valid buyer input
        options: Caller-supplied options; the timestamp is never generated here

    Returns:
        CompilerOutput with the verdict, every module result and the trace
    """
    input_hash = compute_input_hash(buyer_input)
    trace = _TraceBuilder(options.timestamp, input_hash)

    logger.info(f"Compiling buyer input {input_hash}")

    # Initialize components
    damage_classifier = DamageClassifier()
    pricing_engine = PricingEngine()
    safety_gate = SafetyGate()
    warranty_evaluator = WarrantyEvaluator()
    return_policy_filter = ReturnPolicyFilter()
    negotiation_engine = NegotiationEngine()
    logistics_solver = LogisticsSolver()
    verdict_compiler = VerdictCompiler()

    damage = trace.record(ModuleName.DAMAGE_CLASSIFIER, damage_classifier.evaluate(buyer_input))
    financial = trace.record(ModuleName.PRICING_ENGINE, pricing_engine.evaluate(buyer_input, damage))

    safety_output = safety_gate.evaluate(buyer_input)
    safety = trace.record(ModuleName.SAFETY_GATE, safety_output)

    blocker = _first_blocker(safety_output)
    if blocker:
        halted_at = ModuleName.SAFETY_GATE
        logger.info(f"Halted at {halted_at.value} by {blocker.rule_id}")
        output = CompilerOutput(
            verdict=_walk_away(blocker),
            financial=financial,
            damage_assessment=damage,
            warranty_evaluation=WarrantyEvaluation.not_evaluated(halted_at),
            safety_gate=safety,
            negotiation=NegotiationAssessment.not_evaluated(halted_at),
            logistics=LogisticsPlan.not_evaluated(halted_at),
            return_policy_assessment=ReturnPolicyAssessment.not_evaluated(halted_at),
            trace=trace.build(halted_by=blocker),
        )
        return _finish(output)

    warranty = trace.record(
        ModuleName.WARRANTY_EVALUATOR,
        warranty_evaluator.evaluate(buyer_input, financial),
    )

    return_output = return_policy_filter.evaluate(buyer_input)
    return_policy = trace.record(ModuleName.RETURN_POLICY_FILTER, return_output)

    blocker = _first_blocker(return_output)
    if blocker:
        halted_at = ModuleName.RETURN_POLICY_FILTER
        logger.info(f"Halted at {halted_at.value} by {blocker.rule_id}")
        output = CompilerOutput(
            verdict=_walk_away(blocker),
            financial=financial,
            damage_assessment=damage,
            warranty_evaluation=warranty,
            safety_gate=safety,
            negotiation=NegotiationAssessment.not_evaluated(halted_at),
            logistics=LogisticsPlan.not_evaluated(halted_at),
            return_policy_assessment=return_policy,
            trace=trace.build(halted_by=blocker),
        )
        return _finish(output)

    negotiation = trace.record(
        ModuleName.NEGOTIATION_ENGINE,
        negotiation_engine.evaluate(buyer_input, damage, financial),
    )
    logistics = trace.record(ModuleName.LOGISTICS_SOLVER, logistics_solver.evaluate(buyer_input))

    # Sees every rule recorded so far
    verdict = trace.record(
        ModuleName.VERDICT_COMPILER,
        verdict_compiler.evaluate(list(trace.rules), buyer_input.buyer),
    )

    output = CompilerOutput(
        verdict=verdict,
        financial=financial,
        damage_assessment=damage,
        warranty_evaluation=warranty,
        safety_gate=safety,
        negotiation=negotiation,
        logistics=logistics,
        return_policy_assessment=return_policy,
        trace=trace.build(),
    )
    return _finish(output)


def _finish(output: CompilerOutput) -> CompilerOutput:
    logger.info(f"{summarize_trace_compact(output.trace)} -> {output.verdict.recommendation.value}")
    return output
