"""Convert address ranges into ternary (pattern, mask) match entries."""

from .errors import (AddressOutOfRange, CapacityExceeded, CoverageError,
                     InvalidEndpoint, NotAPrefix, Range2MasksError,
                     RangeTooLarge)
from .selector import Direct, Split, select
from .split_range import ALL_ONES, MAX_ENTRIES, Entry, RuleSet, convert

__version__ = "0.1.0"
