"""Topic parser: subject tokenization and control/business classification."""

from .subject_parser import (
    DELIMITER,
    ControlVerb,
    ControlCommand,
    BusinessSubject,
    ParsedSubject,
    tokenize,
    join_tokens,
    parse_subject,
    control_subjects,
)

__all__ = [
    "DELIMITER",
    "ControlVerb",
    "ControlCommand",
    "BusinessSubject",
    "ParsedSubject",
    "tokenize",
    "join_tokens",
    "parse_subject",
    "control_subjects",
]
