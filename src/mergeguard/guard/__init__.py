"""PR title guard."""

from mergeguard.guard.validator import (
    CHECK_NAME,
    CHECK_OUTPUT_TITLE,
    ERROR_MESSAGE,
    SUCCESS_MESSAGE,
    TICKET_PATTERN,
    TitleValidator,
    ValidationOutcome,
    evaluate_title,
    title_matches,
)

__all__ = [
    "CHECK_NAME",
    "CHECK_OUTPUT_TITLE",
    "ERROR_MESSAGE",
    "SUCCESS_MESSAGE",
    "TICKET_PATTERN",
    "TitleValidator",
    "ValidationOutcome",
    "evaluate_title",
    "title_matches",
]
