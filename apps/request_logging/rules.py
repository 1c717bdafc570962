"""
apps.request_logging.rules
~~~~~~~~~~~~~~~~~~~~~~~~~~
Path-pattern rules and the level selection built on them.

This module does not touch requests or responses and is exercised in
plain ``pytest`` tests.

Public API
----------
PatternRule      – One compiled pattern → level association
RuleSet          – Ordered, immutable tuple of rules
build_rule_set   – Compile a whole configuration in one go
select_level     – Pick the level for a request path
"""
from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass

from common.exceptions import InvalidPatternError

from .levels import Level


@dataclass(frozen=True)
class PatternRule:
    """
    A compiled path pattern and the level used for requests it matches.

    Attributes:
        pattern: The pattern exactly as configured.
        regex: ``pattern`` compiled once, searched on every request.
        level: Level selected when ``regex`` matches.
    """

    pattern: str
    regex: re.Pattern
    level: Level

    @classmethod
    def compile(cls, pattern: str, level: Level | str) -> PatternRule:
        """
        Compile *pattern* into a rule logging at *level*.

        Raises:
            InvalidPatternError: *pattern* is not a valid regular expression.
            InvalidLevelError: *level* names no level.
        """
        # Paths are str; a bytes pattern would compile and then fail on every request.
        if not isinstance(pattern, str):
            raise InvalidPatternError(repr(pattern), "pattern must be a string")
        try:
            regex = re.compile(pattern)
        except re.error as exc:
            raise InvalidPatternError(pattern, str(exc)) from exc
        return cls(pattern=pattern, regex=regex, level=Level.parse(level))

    def matches(self, path: str) -> bool:
        return self.regex.search(path) is not None


#: Rules in configuration order.  Order is significant, see :func:`select_level`.
RuleSet = tuple[PatternRule, ...]

#: What :func:`build_rule_set` accepts: ``{pattern: level}`` or ``(pattern, level)`` pairs.
RuleSpec = Mapping[str, Level | str] | Iterable[tuple[str, Level | str]]


def build_rule_set(rules: RuleSpec) -> RuleSet:
    """
    Compile every ``pattern → level`` entry of *rules*.

    A mapping keeps its insertion order; a sequence of pairs keeps its
    position order.  Compilation stops at the first bad entry and nothing is
    returned, so a rule set is either complete or absent.

    Raises:
        InvalidPatternError: An entry's pattern does not compile, or *rules*
            is not shaped as pattern/level entries.
        InvalidLevelError: An entry's level names no level.
    """
    if isinstance(rules, (str, bytes)):
        raise InvalidPatternError(
            repr(rules), "rules must be a mapping or (pattern, level) pairs"
        )
    items = rules.items() if isinstance(rules, Mapping) else rules
    compiled = []
    for item in items:
        try:
            pattern, level = item
        except (TypeError, ValueError) as exc:
            raise InvalidPatternError(
                repr(item), "rule must be a (pattern, level) pair"
            ) from exc
        compiled.append(PatternRule.compile(pattern, level))
    return tuple(compiled)


def select_level(path: str, rules: RuleSet) -> Level:
    """
    Return the level for *path*: ``INFO`` unless a rule matches.

    Every rule is examined and each match replaces the previous candidate,
    so the **last** matching rule in *rules* wins, however specific an
    earlier match was.  Operators order their rules from general to
    specific.
    """
    level = Level.INFO
    for rule in rules:
        if rule.matches(path):
            level = rule.level
    return level
