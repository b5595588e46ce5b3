import logging
from typing import NamedTuple

from .errors import AddressOutOfRange, CapacityExceeded, RangeTooLarge

log = logging.getLogger(__name__)

ALL_ONES = 0xFFFFFFFF
MAX_ENTRIES = 32


class Entry(NamedTuple):
    """
    One ternary match entry. A 0 bit in the mask is a wildcard.

    The mask is always ALL_ONES shifted left, so the entry matches the
    aligned block [patt, patt | ~mask].
    """
    patt: int
    mask: int

    @property
    def bottom(self):
        return self.patt

    @property
    def top(self):
        return self.patt | (~self.patt & ~self.mask & ALL_ONES)

    @property
    def wildcard_bits(self):
        # number of trailing 0s in the mask
        return 32 - bin(self.mask & ALL_ONES).count("1")

    @property
    def size(self):
        return 1 << self.wildcard_bits

    def contains(self, addr):
        return (addr & self.mask) == self.patt

    def __str__(self):
        return f"{self.patt:#010x}/{self.mask:#010x}"


class RuleSet:
    """
    Entries for one range, in construction order (top of the range first).

    The rule set holds at most `capacity` entries; appending more raises
    CapacityExceeded.
    """

    def __init__(self, st, end, capacity=MAX_ENTRIES):
        self.st = st
        self.end = end
        self.capacity = capacity
        self._entries = []

    def _append(self, patt, mask):
        if len(self._entries) >= self.capacity:
            raise CapacityExceeded(self.st, self.end, self.capacity)
        self._entries.append(Entry(patt, mask))

    @property
    def count(self):
        return len(self._entries)

    def __len__(self):
        return len(self._entries)

    def __iter__(self):
        return iter(self._entries)

    def __getitem__(self, index):
        return self._entries[index]

    def __eq__(self, other):
        if not isinstance(other, RuleSet):
            return NotImplemented
        return (self.st, self.end, self._entries) == (other.st, other.end, other._entries)

    def __repr__(self):
        return f"RuleSet({self.st}, {self.end}, {self._entries!r})"


def check_address(value, name):
    if isinstance(value, bool) or not isinstance(value, int):
        raise AddressOutOfRange(f"{name} must be an integer, got {value!r}")
    if not 0 <= value <= ALL_ONES:
        raise AddressOutOfRange(f"{name} {value} is outside 0 - {ALL_ONES}")


# Function to convert a range into ternary match entries
def convert(st, end, capacity=MAX_ENTRIES):
    """
    Converts the range st <= x <= end into the fewest aligned ternary entries.

    Works from the top of the range down: each step takes the largest
    aligned block ending at the cursor, shrinks it while it starts below
    st, and moves the cursor just below it.

    :param st: First address of the range.
    :param end: Last address of the range. Must be < 0xffffffff unless st is 0.
    :param capacity: Maximum number of entries allowed.
    :return: A RuleSet of (patt, mask) entries, top of the range first.
    """
    check_address(st, "start")
    check_address(end, "end")
    if end == ALL_ONES and st != 0:
        raise RangeTooLarge(st, end)
    if st > end:
        log.warning("start %d is above end %d, no entries", st, end)

    rule_set = RuleSet(st, end, capacity)
    patt = end
    while patt >= st:
        # Clear the trailing 1s: patt becomes the start of the largest
        # aligned block whose top is the cursor
        mask = ALL_ONES
        i = 1
        while i & patt:
            patt ^= i
            i <<= 1
            mask = (mask << 1) & ALL_ONES

        # Halve the block until it no longer starts below st
        while patt < st:
            i >>= 1
            patt |= i
            mask |= i

        rule_set._append(patt, mask)
        log.debug("entry %#010x/%#010x", patt, mask)
        if patt == 0:
            # nothing below address 0
            break
        patt -= 1

    return rule_set
