"""
Simplified tajweed rule observations.

Each rule is a character-class pattern. A rule is observed as missed
when its pattern occurs somewhere in the expected text and nowhere in
the transcript. This is a presence check over letters, not phonological
analysis: it over- and under-detects, and the table below is kept as is.
"""

import re
from dataclasses import dataclass

from tilawa.models import RuleObservation, Severity


@dataclass(frozen=True)
class TajweedRule:
    """A named rule and the pattern whose presence signals it."""

    name: str
    pattern: re.Pattern
    description: str

    def applies_to(self, text: str) -> bool:
        """Whether the pattern occurs anywhere in text."""
        return self.pattern.search(text) is not None


# Evaluated in this order; observations come out in the same order.
TAJWEED_RULES: tuple[TajweedRule, ...] = (
    TajweedRule("Madd", re.compile(r"[اوي]"), "Elongation rules"),
    TajweedRule("Ghunnah", re.compile(r"[من]"), "Nasal sound rules"),
    TajweedRule("Qalqalah", re.compile(r"[قطبجد]"), "Echoing rules"),
    TajweedRule("Idgham", re.compile(r"ن[ملنريو]"), "Merging rules"),
)


def detect_rule_observations(
    actual: str | None,
    expected: str | None,
    rules: tuple[TajweedRule, ...] = TAJWEED_RULES,
) -> list[RuleObservation]:
    """
    Report rules present in the expected text but missing from the transcript.

    Note the argument order: transcript first, reference second.

    Args:
        actual: Transcribed text
        expected: Reference text
        rules: Rule table to evaluate

    Returns:
        One observation per missed rule, in rule-table order (empty if none)

    Examples:
        >>> [o.rule_name for o in detect_rule_observations("كل", "قل")]
        ['Qalqalah']
    """
    actual = actual or ""
    expected = expected or ""

    return [
        RuleObservation(
            rule_name=rule.name,
            description=rule.description,
            severity=Severity.MEDIUM,
        )
        for rule in rules
        if rule.applies_to(expected) and not rule.applies_to(actual)
    ]
