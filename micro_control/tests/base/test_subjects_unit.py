"""Unit tests for subject tokenization and classification."""

from __future__ import annotations

import pytest

from micro_control.base.subjects import (
    BusinessSubject,
    ControlCommand,
    ControlVerb,
    control_subjects,
    join_tokens,
    parse_subject,
    tokenize,
)

SUBJECTS = [
    "",
    ".",
    "..",
    "add",
    "a..b",
    "$CTL",
    "$CTL.",
    "$CTL.PING",
    "$CTL.PING.calculator.adfa8cb7-0821-4e63-9dbd-92a27c30f083",
    "trailing.dot.",
    ".leading",
]


@pytest.mark.parametrize("subject", SUBJECTS)
def test_join_inverts_tokenize(subject: str) -> None:
    assert join_tokens(tokenize(subject)) == subject  # nosec B101


def test_empty_tokens_are_preserved() -> None:
    assert tokenize("a..b") == ("a", "", "b")  # nosec B101
    assert tokenize("") == ("",)  # nosec B101
    assert tokenize("$CTL.PING.") == ("$CTL", "PING", "")  # nosec B101


@pytest.mark.parametrize("subject", SUBJECTS)
def test_parse_is_deterministic(subject: str) -> None:
    assert parse_subject(subject, "$CTL") == parse_subject(subject, "$CTL")  # nosec B101


def test_bare_verb_is_control_command() -> None:
    parsed = parse_subject("$CTL.PING", "$CTL")
    assert isinstance(parsed, ControlCommand)  # nosec B101
    assert parsed.verb == "PING" and parsed.known_verb is ControlVerb.PING  # nosec B101
    assert parsed.service is None and parsed.instance_id is None  # nosec B101
    assert parsed.depth == 1  # nosec B101


def test_scoped_verb_carries_qualifiers() -> None:
    parsed = parse_subject("$CTL.STATS.calculator.abc", "$CTL")
    assert isinstance(parsed, ControlCommand)  # nosec B101
    assert parsed.service == "calculator" and parsed.instance_id == "abc"  # nosec B101
    assert parsed.depth == 3  # nosec B101


def test_prefix_without_verb_is_ignored() -> None:
    assert parse_subject("$CTL", "$CTL") is None  # nosec B101


def test_unknown_verb_is_still_a_control_command() -> None:
    parsed = parse_subject("$CTL.RESET", "$CTL")
    assert isinstance(parsed, ControlCommand)  # nosec B101
    assert parsed.known_verb is None  # nosec B101


@pytest.mark.parametrize("subject", ["add", "$CTLX.PING", "svc.$CTL.PING", "ctl.PING"])
def test_non_prefixed_subjects_are_business(subject: str) -> None:
    parsed = parse_subject(subject, "$CTL")
    assert isinstance(parsed, BusinessSubject)  # nosec B101
    assert parsed.subject == subject  # nosec B101


def test_prefix_is_configurable() -> None:
    assert isinstance(parse_subject("$SRV.INFO", "$SRV"), ControlCommand)  # nosec B101
    assert isinstance(parse_subject("$SRV.INFO", "$CTL"), BusinessSubject)  # nosec B101


def test_control_subjects_three_levels() -> None:
    assert control_subjects("$CTL", ControlVerb.INFO, "calculator", "abc") == (  # nosec B101
        "$CTL.INFO",
        "$CTL.INFO.calculator",
        "$CTL.INFO.calculator.abc",
    )
