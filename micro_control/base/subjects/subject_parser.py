"""Subject tokenization and classification.

Every inbound subject is classified exactly once into a closed variant:

* :class:`ControlCommand` - the first token equals the control prefix and a
  verb token is present (``$CTL.PING``, ``$CTL.INFO.calculator``, ...).
* :class:`BusinessSubject` - anything else; looked up verbatim by the router.

A subject under the control prefix without a verb (``$CTL``) classifies as
``None`` and is dropped by the dispatcher.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional, Tuple, Union

DELIMITER = "."


class ControlVerb(str, Enum):
    """Discovery verbs recognised under the control prefix."""

    PING = "PING"
    INFO = "INFO"
    STATS = "STATS"


@dataclass(frozen=True)
class ControlCommand:
    """A control-namespace command.

    Attributes:
        verb: Raw verb token; may name an unknown verb.
        service: Optional service-name scoping token.
        instance_id: Optional instance-id scoping token.
        tokens: All subject tokens, prefix included.
    """

    verb: str
    service: Optional[str]
    instance_id: Optional[str]
    tokens: Tuple[str, ...]

    @property
    def known_verb(self) -> Optional[ControlVerb]:
        try:
            return ControlVerb(self.verb)
        except ValueError:
            return None

    @property
    def depth(self) -> int:
        """Number of tokens after the prefix (verb plus scoping tokens)."""
        return len(self.tokens) - 1


@dataclass(frozen=True)
class BusinessSubject:
    """A subject addressed to a business endpoint."""

    subject: str
    tokens: Tuple[str, ...]


ParsedSubject = Union[ControlCommand, BusinessSubject]


def tokenize(subject: str) -> Tuple[str, ...]:
    """Split ``subject`` on ``.`` keeping empty tokens."""
    return tuple(subject.split(DELIMITER))


def join_tokens(tokens: Iterable[str]) -> str:
    """Inverse of :func:`tokenize`."""
    return DELIMITER.join(tokens)


def parse_subject(subject: str, control_prefix: str) -> Optional[ParsedSubject]:
    """Classify ``subject`` as a control command or a business subject.

    Returns ``None`` for a control-prefixed subject that carries no verb.
    """
    tokens = tokenize(subject)
    if tokens[0] != control_prefix:
        return BusinessSubject(subject=subject, tokens=tokens)
    if len(tokens) < 2:
        return None
    return ControlCommand(
        verb=tokens[1],
        service=tokens[2] if len(tokens) > 2 else None,
        instance_id=tokens[3] if len(tokens) > 3 else None,
        tokens=tokens,
    )


def control_subjects(control_prefix: str, verb: ControlVerb, name: str, instance_id: str) -> Tuple[str, str, str]:
    """Return the three subjects at which ``verb`` is answered for one instance."""
    base = join_tokens((control_prefix, verb.value))
    return (base, join_tokens((base, name)), join_tokens((base, name, instance_id)))


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
