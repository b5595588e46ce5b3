import numpy as np

from .errors import CoverageError
from .split_range import ALL_ONES


def is_prefix_mask(mask):
    """True when the mask is a run of 1s followed by a run of 0s."""
    inverted = ~mask & ALL_ONES
    # ~mask must be of the form 0...01...1
    return (inverted & (inverted + 1)) == 0


def block_bounds(rule_set):
    """
    Returns the first and last address of every entry, in rule set order.

    :param rule_set: A RuleSet or any iterable of (patt, mask) pairs.
    :return: (bottoms, tops) as uint64 arrays.
    """
    pairs = np.array([(patt, mask) for patt, mask in rule_set], dtype=np.uint64).reshape(-1, 2)
    patts = pairs[:, 0]
    wildcards = ~pairs[:, 1] & np.uint64(ALL_ONES)
    return patts, patts | wildcards


def verify(rule_set, st, end):
    """
    Checks that the entries cover st <= x <= end exactly once.

    :raises CoverageError: on a non-prefix mask, a misaligned pattern, a gap,
        an overlap, or a cover that does not start at st and end at end.
    """
    for patt, mask in rule_set:
        if not is_prefix_mask(mask):
            raise CoverageError(f"mask {mask:#010x} is not contiguous")
        if patt & ~mask & ALL_ONES:
            raise CoverageError(f"pattern {patt:#010x} is not aligned to mask {mask:#010x}")

    bottoms, tops = block_bounds(rule_set)
    if st > end:
        if len(bottoms):
            raise CoverageError(f"empty range {st} - {end} has {len(bottoms)} entries")
        return
    if not len(bottoms):
        raise CoverageError(f"range {st} - {end} has no entries")

    order = np.argsort(bottoms, kind="stable")
    bottoms = bottoms[order]
    tops = tops[order]
    if bottoms[0] != st:
        raise CoverageError(f"cover starts at {int(bottoms[0])}, not {st}")
    if tops[-1] != end:
        raise CoverageError(f"cover ends at {int(tops[-1])}, not {end}")

    # each block must start right after the previous one ends
    nexts = tops[:-1] + np.uint64(1)
    overlaps = np.nonzero(bottoms[1:] < nexts)[0]
    if len(overlaps):
        at = int(bottoms[overlaps[0] + 1])
        raise CoverageError(f"overlap at {at}")
    gaps = np.nonzero(bottoms[1:] > nexts)[0]
    if len(gaps):
        at = int(nexts[gaps[0]])
        raise CoverageError(f"gap at {at}")
