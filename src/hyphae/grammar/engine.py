from __future__ import annotations

import random
import re

from hyphae.grammar.rules import PLACEHOLDER_PATTERN, PLACEHOLDERS, Rule, RuleSet
from hyphae.grammar.turns import turn_string


def match_rule(sentence: str, cursor: int, rules: tuple[Rule, ...]) -> Rule | None:
    """Return the first rule whose pattern occurs in ``sentence`` at ``cursor``."""

    for rule in rules:
        if sentence.startswith(rule.pattern, cursor):
            return rule
    return None


def _substitute(template: str, angles: list[int]) -> str:
    def replace(match: re.Match[str]) -> str:
        return turn_string(angles[PLACEHOLDERS.index(match.group())])

    return PLACEHOLDER_PATTERN.sub(replace, template)


def rewrite(sentence: str, rule_set: RuleSet, rng: random.Random) -> str:
    """Apply one left-to-right, non-overlapping rewriting pass over ``sentence``.

    Every match draws its own angles from ``rng``; characters no rule matches
    are copied through unchanged.
    """

    parts: list[str] = []
    cursor = 0
    while cursor < len(sentence):
        rule = match_rule(sentence, cursor, rule_set.rules)
        if rule is None:
            parts.append(sentence[cursor])
            cursor += 1
            continue
        parts.append(_substitute(rule.template, rule_set.draw_angles(rng)))
        cursor += len(rule.pattern)
    return "".join(parts)
