"""Rule evaluators for metadata.json checks."""

import logging
import re
from collections.abc import Mapping
from typing import Any, List

from common.spdx import is_spdx_license
from constants import Constants
from versioning.range import VersionRangeParseError, is_open_ended

from .models import Diagnostic, LintOptions, RuleOutcome

logger = logging.getLogger(__name__)

_WHITESPACE = re.compile(r"\s")


class RuleEvaluator:
    """Base class for rule evaluators."""

    def evaluate(self, metadata: Mapping[str, Any], options: LintOptions) -> RuleOutcome:
        """Evaluate a rule against a metadata document.

        Args:
            metadata: The parsed metadata.json document.
            options: The lint options for this run.

        Returns:
            RuleOutcome with diagnostics and the error flag.
        """
        raise NotImplementedError


class RequiredFieldsEvaluator(RuleEvaluator):
    """Every required field must be present and non-null."""

    def evaluate(self, metadata: Mapping[str, Any], options: LintOptions) -> RuleOutcome:
        outcome = RuleOutcome()
        for field in Constants.REQUIRED_FIELDS:
            if metadata.get(field) is None:
                outcome.add(Diagnostic.error(f"Required field '{field}' not found"))
        return outcome


class DependenciesEvaluator(RuleEvaluator):
    """Duplicate names, unparseable ranges and open-ended ranges in ``dependencies``."""

    def evaluate(self, metadata: Mapping[str, Any], options: LintOptions) -> RuleOutcome:
        deps = metadata.get("dependencies")
        if deps is None:
            return RuleOutcome()
        return check_dependencies(deps, options)


class DeprecatedFieldsEvaluator(RuleEvaluator):
    """Deprecated fields must be absent."""

    def evaluate(self, metadata: Mapping[str, Any], options: LintOptions) -> RuleOutcome:
        outcome = RuleOutcome()
        for field in Constants.DEPRECATED_FIELDS:
            if metadata.get(field) is not None:
                outcome.add(Diagnostic.error(f"Deprecated field '{field}' found"))
        return outcome


class SummaryLengthEvaluator(RuleEvaluator):
    """Summary may not exceed the Forge limit."""

    def evaluate(self, metadata: Mapping[str, Any], options: LintOptions) -> RuleOutcome:
        outcome = RuleOutcome()
        summary = metadata.get("summary")
        if isinstance(summary, str) and len(summary) > Constants.SUMMARY_MAX_LENGTH:
            outcome.add(Diagnostic.error(f"summary exceeds {Constants.SUMMARY_MAX_LENGTH} characters"))
        return outcome


class LicenseEvaluator(RuleEvaluator):
    """License should be an SPDX identifier or ``proprietary``."""

    def evaluate(self, metadata: Mapping[str, Any], options: LintOptions) -> RuleOutcome:
        outcome = RuleOutcome()
        license_id = metadata.get("license")
        if license_id is None or license_id == Constants.PROPRIETARY_LICENSE:
            return outcome
        if not is_spdx_license(license_id):
            outcome.add(
                Diagnostic.warning(f"License identifier {license_id} is not in the SPDX list"),
                fails=options.strict_license,
            )
            logger.debug("See %s for valid license identifiers", Constants.SPDX_LIST_URL)
        return outcome


class TagsEvaluator(RuleEvaluator):
    """Tags must be an array of strings without whitespace."""

    def evaluate(self, metadata: Mapping[str, Any], options: LintOptions) -> RuleOutcome:
        tags = metadata.get("tags")
        if tags is None:
            return RuleOutcome()
        return check_tags(tags)


def check_dependencies(deps: Any, options: LintOptions) -> RuleOutcome:
    """Check a dependency list in order.

    Duplicate names and unparseable version requirements are errors. Missing
    or open-ended requirements are warnings that only set the error state
    under ``strict_dependencies``.
    """
    outcome = RuleOutcome()
    if not isinstance(deps, list) or any(not isinstance(dep, Mapping) for dep in deps):
        outcome.add(Diagnostic.error("dependencies must be an array of objects"))
        return outcome

    seen: List[Any] = []
    for dep in deps:
        name = dep.get("name")
        if name in seen:
            outcome.add(Diagnostic.error(f"duplicate dependencies on {name}"))
        seen.append(name)

        requirement = dep.get("version_requirement")
        # From: https://docs.puppet.com/puppet/latest/reference/modules_metadata.html#best-practice-set-an-upper-bound-for-dependencies
        try:
            open_ended = requirement is None or is_open_ended(requirement)
        except VersionRangeParseError as exc:
            outcome.add(Diagnostic.error(f"Invalid 'version_requirement' field: {exc}"))
            continue
        if open_ended:
            message = f"Dependency {name} has an open ended dependency version requirement"
            if requirement is not None:
                message = f"{message} {requirement}"
            outcome.add(Diagnostic.warning(message), fails=options.strict_dependencies)
    return outcome


def check_tags(tags: Any) -> RuleOutcome:
    """Check that tags are an array of strings without whitespace."""
    outcome = RuleOutcome()
    if not isinstance(tags, list) or any(not isinstance(tag, str) for tag in tags):
        outcome.add(Diagnostic.error("tags must be an array of strings"))
    elif any(_WHITESPACE.search(tag) for tag in tags):
        outcome.add(Diagnostic.error("tags must not contain any whitespace"))
    return outcome


class RuleEvaluatorRegistry:
    """Ordered registry of rule evaluators."""

    def __init__(self):
        """Initialize the registry with the built-in rules in evaluation order."""
        self._evaluators = {
            "required_fields": RequiredFieldsEvaluator(),
            "dependencies": DependenciesEvaluator(),
            "deprecated_fields": DeprecatedFieldsEvaluator(),
            "summary": SummaryLengthEvaluator(),
            "license": LicenseEvaluator(),
            "tags": TagsEvaluator(),
        }

    def items(self):
        """Return (rule_type, evaluator) pairs in evaluation order."""
        return list(self._evaluators.items())


# Global registry instance
rule_evaluator_registry = RuleEvaluatorRegistry()
