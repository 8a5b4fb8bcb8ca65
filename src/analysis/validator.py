"""Metadata validation entrypoint.

Runs every registered rule against one metadata document and folds their
outcomes into a single LintResult. Rules never stop later rules from running.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from common.logging_utils import extra_context, is_debug_enabled

from .metadata_rules import RuleEvaluatorRegistry, rule_evaluator_registry
from .models import Diagnostic, LintOptions, LintResult

logger = logging.getLogger(__name__)


def validate(
    metadata: Mapping[str, Any],
    options: Optional[LintOptions] = None,
    registry: Optional[RuleEvaluatorRegistry] = None,
) -> LintResult:
    """Validate a parsed metadata.json document.

    Args:
        metadata: Parsed JSON object; it is only read.
        options: Lint options; defaults to LintOptions().
        registry: Rule registry; defaults to the global registry.

    Returns:
        LintResult with the accumulated error state and ordered diagnostics.
    """
    options = options or LintOptions()
    registry = registry or rule_evaluator_registry

    has_errors = False
    diagnostics: list[Diagnostic] = []
    for rule_type, evaluator in registry.items():
        outcome = evaluator.evaluate(metadata, options)
        diagnostics.extend(outcome.diagnostics)
        has_errors = has_errors or outcome.has_errors
        if is_debug_enabled(logger):
            logger.debug(
                "Evaluated rule %s",
                rule_type,
                extra=extra_context(
                    event="rule_evaluated",
                    component="validator",
                    action=rule_type,
                    outcome="fail" if outcome.has_errors else "pass",
                    count=len(outcome.diagnostics),
                ),
            )

    return LintResult(has_errors=has_errors, diagnostics=diagnostics, options=options)
