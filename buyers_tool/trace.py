"""
Trace summarization - turn a CompilerTrace into human-readable lines.

Pure functions over an existing trace, for display, debugging and audit
logs. Rule IDs and messages are shown as-is.
"""
from typing import Optional

from pydantic import BaseModel, Field

from .config import get_config
from .models.enums import RuleSeverity
from .models.output import CompilerTrace
from .models.rules import RuleResult, is_blocker, is_info, is_warning

BANNER = "═" * 59
DIVIDER = "─" * 59


class TraceSummaryOptions(BaseModel):
    """What ``summarize_trace`` includes beyond blockers and warnings."""
    include_info: bool = False
    include_passed: bool = False
    max_items: int = Field(default=10, ge=1, description="Max rules listed per section")

    @classmethod
    def from_config(cls) -> "TraceSummaryOptions":
        settings = get_config().trace_summary
        return cls(
            include_info=settings.include_info,
            include_passed=settings.include_passed,
            max_items=settings.max_items,
        )


def _format_rule(rule: RuleResult) -> str:
    if rule.passed:
        icon = "✓"
    elif rule.severity == RuleSeverity.BLOCKER:
        icon = "✗"
    else:
        icon = "⚠"
    return f"{icon} [{rule.severity.value.upper()}] {rule.message}"


def _section(title: str) -> list[str]:
    return [DIVIDER, title, DIVIDER]


def _overflow(total: int, max_items: int) -> list[str]:
    if total > max_items:
        return [f"   ... and {total - max_items} more"]
    return []


def summarize_trace(trace: CompilerTrace, options: Optional[TraceSummaryOptions] = None) -> list[str]:
    """
    Summarize a compiler trace into human-readable lines.

    Failed blockers and warnings are always listed. Passed checks and info
    rules are listed only when the options ask for them. Without options,
    the defaults come from configuration.

    Args:
        trace: The trace from CompilerOutput.trace
        options: Summary options

    Returns:
        List of lines, without trailing newlines
    """
    opts = options or TraceSummaryOptions.from_config()
    max_items = opts.max_items

    blockers = [rule for rule in trace.rules if is_blocker(rule)]
    warnings = [rule for rule in trace.rules if is_warning(rule)]
    passed_blockers = [r for r in trace.rules if r.severity == RuleSeverity.BLOCKER and r.passed]
    passed_warnings = [r for r in trace.rules if r.severity == RuleSeverity.WARNING and r.passed]
    info_rules = [rule for rule in trace.rules if is_info(rule)]

    lines = [
        BANNER,
        "                    DECISION TRACE SUMMARY                  ",
        BANNER,
        "",
        (
            f"Compiler: v{trace.compiler_version}  Schema: v{trace.schema_version}  "
            f"Ruleset: {trace.ruleset_version}"
        ),
        f"Timestamp: {trace.timestamp}",
        f"Input Hash: {trace.input_hash}",
        "",
    ]

    if trace.halted_at_module:
        lines += [
            "⛔ EXECUTION HALTED",
            f"   Module: {trace.halted_at_module.value}",
            f"   Rule: {trace.halted_by_rule_id}",
            "",
        ]
    else:
        lines += [f"✓ Completed all {len(trace.execution_order)} modules", ""]

    if blockers:
        lines += _section(f"🚫 BLOCKERS ({len(blockers)}) — These prevent purchase")
        for rule in blockers[:max_items]:
            lines += [_format_rule(rule), f"   Rule ID: {rule.rule_id}"]
        lines += _overflow(len(blockers), max_items)
        lines.append("")

    if warnings:
        lines += _section(f"⚠️  WARNINGS ({len(warnings)}) — Proceed with caution")
        for rule in warnings[:max_items]:
            lines += [_format_rule(rule), f"   Rule ID: {rule.rule_id}"]
        lines += _overflow(len(warnings), max_items)
        lines.append("")

    passed = passed_blockers + passed_warnings
    if opts.include_passed and passed:
        lines += _section(f"✅ PASSED CHECKS ({len(passed)})")
        lines += [_format_rule(rule) for rule in passed[:max_items]]
        lines += _overflow(len(passed), max_items)
        lines.append("")

    if opts.include_info and info_rules:
        lines += _section(f"ℹ️  INFO ({len(info_rules)}) — Informational")
        lines += [f"  {rule.message}" for rule in info_rules[:max_items]]
        lines += _overflow(len(info_rules), max_items)
        lines.append("")

    lines += _section("📋 EXECUTION ORDER")
    for index, module in enumerate(trace.execution_order, start=1):
        marker = " ← HALTED" if module == trace.halted_at_module else ""
        lines.append(f"  {index}. {module.value}{marker}")
    lines.append("")

    lines += _section("📊 SUMMARY")
    lines += [
        f"  Total rules evaluated: {len(trace.rules)}",
        f"  Blockers triggered: {len(blockers)}",
        f"  Warnings triggered: {len(warnings)}",
        f"  Safety checks passed: {len(passed_blockers)}",
        "",
        BANNER,
    ]
    return lines


def summarize_trace_compact(trace: CompilerTrace) -> str:
    """One-line summary for logs."""
    blockers = sum(1 for rule in trace.rules if is_blocker(rule))
    warnings = sum(1 for rule in trace.rules if is_warning(rule))
    halted = f" HALTED@{trace.halted_at_module.value}" if trace.halted_at_module else ""
    return (
        f"[{trace.ruleset_version}] {len(trace.rules)} rules, {blockers} blockers, "
        f"{warnings} warnings{halted} ({trace.input_hash})"
    )


def get_failed_rule_summaries(trace: CompilerTrace) -> list[str]:
    """Failed blockers and warnings as '[SEVERITY] message'."""
    return [
        f"[{rule.severity.value.upper()}] {rule.message}"
        for rule in trace.rules
        if not rule.passed and not is_info(rule)
    ]


def group_rules_by_module(trace: CompilerTrace) -> dict[str, list[RuleResult]]:
    """Rules keyed by rule-ID prefix, in first-seen order."""
    grouped: dict[str, list[RuleResult]] = {}
    for rule in trace.rules:
        grouped.setdefault(rule.module_prefix, []).append(rule)
    return grouped
