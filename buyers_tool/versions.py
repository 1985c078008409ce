"""
Version constants embedded in every compiler trace.

The three axes are bumped independently:

- COMPILER_VERSION: module ordering, halt behavior, trace format or
  orchestration changes. Unchanged by rule or threshold updates.
- SCHEMA_VERSION: the shape of BuyerInput or CompilerOutput changes.
- RULESET_VERSION: thresholds, expected discounts, blocker conditions or
  rule logic change. Format is ``{domain}-{year}-q{quarter}``.
"""

COMPILER_VERSION = "1.0.0"
SCHEMA_VERSION = "1.0.0"
RULESET_VERSION = "default-2026-q1"
