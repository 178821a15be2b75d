"""Validate-then-optionally-repair entry point."""

import logging
from collections.abc import Sequence

from turnguard_core.messages import Message
from turnguard_core.repair import repair_tool_pairs
from turnguard_core.results import (
    ValidateAndFixResult,
    ValidationOptions,
    ValidationReport,
)
from turnguard_core.validation import validate_tool_pairs

logger = logging.getLogger(__name__)


def _log_report(report: ValidationReport) -> None:
    if report.errors:
        logger.warning("Tool pairing errors: %d", len(report.errors))
        for n, error in enumerate(report.errors, start=1):
            logger.warning("  %d. %s", n, error)
    if report.warnings:
        logger.warning("Tool pairing warnings: %d", len(report.warnings))
        for n, warning in enumerate(report.warnings, start=1):
            logger.warning("  %d. %s", n, warning)


def validate_and_fix(
    conversation: Sequence[Message],
    options: ValidationOptions | None = None,
) -> ValidateAndFixResult:
    """Validate a conversation and repair it if asked to.

    The returned ``validation`` is the report for the conversation as passed
    in, even when a repair was applied. ``options.log_errors`` only decides
    whether findings are logged.

    Args:
        conversation: Messages in turn order. Not modified.
        options: Fix/log switches. Defaults to fixing and logging.

    Returns:
        The conversation to send on, the pre-fix report and applied fixes.
    """
    options = options or ValidationOptions()
    validation = validate_tool_pairs(conversation)

    if options.log_errors and (validation.errors or validation.warnings):
        _log_report(validation)

    if not options.fix_errors or validation.is_valid:
        return ValidateAndFixResult(conversation=list(conversation), validation=validation)

    repaired = repair_tool_pairs(conversation)
    if options.log_errors:
        if repaired.fixes_applied:
            logger.info("Applied %d tool pairing fix(es)", len(repaired.fixes_applied))
        remaining = validate_tool_pairs(repaired.fixed_conversation)
        if not remaining.is_valid:
            logger.error(
                "Tool pairing errors remain after repair: %s",
                [str(e) for e in remaining.errors],
            )

    return ValidateAndFixResult(
        conversation=repaired.fixed_conversation,
        validation=validation,
        fixes_applied=repaired.fixes_applied,
    )
