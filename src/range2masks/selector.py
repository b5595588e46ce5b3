import logging
from dataclasses import dataclass

from .split_range import RuleSet, convert

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Direct:
    """Accept the range with its own entries."""
    rule_set: RuleSet

    @property
    def count(self):
        return len(self.rule_set)

    @property
    def rule_sets(self):
        return [("accept", self.rule_set)]


@dataclass(frozen=True)
class Split:
    """
    Reject 0 - (start-1) first, then accept 0 - end.

    The reject entries must be matched before the accept entries; whatever
    installs them is responsible for that order.
    """
    reject: RuleSet
    accept: RuleSet

    @property
    def count(self):
        return len(self.reject) + len(self.accept)

    @property
    def rule_sets(self):
        return [("reject", self.reject), ("accept", self.accept)]


def select(start, end):
    """
    Picks the cheaper way to accept start <= x <= end.

    Compares the entries of the range itself against a reject rule for
    0 - (start-1) plus an accept rule for 0 - end.

    :param start: First address of the range.
    :param end: Last address of the range.
    :return: Direct(rule_set) or Split(reject, accept).
    """
    direct = convert(start, end)
    if start == 0:
        # no addresses below start to reject
        return Direct(direct)

    reject = convert(0, start - 1)
    accept = convert(0, end)
    log.info("direct %d entries, reject + accept %d + %d entries",
             len(direct), len(reject), len(accept))
    if len(reject) + len(accept) < len(direct):
        return Split(reject, accept)
    return Direct(direct)
