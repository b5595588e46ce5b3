# Exceptions raised by range2masks


class Range2MasksError(Exception):
    """Base class for every failure raised by this package."""


class RangeTooLarge(Range2MasksError):
    """The range ends at 0xffffffff but does not start at 0."""

    def __init__(self, st, end):
        super().__init__(f"end too big: must be < {end} ({hex(end)}) unless start is 0, got start {st}")
        self.st = st
        self.end = end


class CapacityExceeded(Range2MasksError):
    """The decomposition needs more entries than the rule set can hold."""

    def __init__(self, st, end, capacity):
        super().__init__(f"not enough entries ({st}:{end}), capacity is {capacity}")
        self.st = st
        self.end = end
        self.capacity = capacity


class NotAPrefix(Range2MasksError):
    """A mask with non-contiguous ones has no prefix length."""

    def __init__(self, mask):
        super().__init__(f"mask {mask:#010x} is not a prefix mask")
        self.mask = mask


class AddressOutOfRange(Range2MasksError, ValueError):
    """An endpoint does not fit in 32 unsigned bits."""


class InvalidEndpoint(Range2MasksError, ValueError):
    """Endpoint text is neither a numeral nor a dotted-decimal IPv4 address."""


class CoverageError(Range2MasksError):
    """A rule set does not cover its range exactly."""
