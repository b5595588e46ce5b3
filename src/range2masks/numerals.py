import ipaddress
import re

from .errors import InvalidEndpoint
from .split_range import ALL_ONES

NUMERAL = re.compile(r"(?:0[xX][0-9a-fA-F]+|[0-9]+)\Z")
IPV4 = re.compile(r"(?:[0-9]{1,3}\.){3}[0-9]{1,3}\Z")


def is_numeral(text):
    """Decimal or 0x-prefixed hexadecimal."""
    return NUMERAL.match(text.strip()) is not None


def is_ipv4(text):
    return IPV4.match(text.strip()) is not None


# Function to turn a command line endpoint into an address
def parse_endpoint(text):
    """
    Parses a range endpoint written as a numeral or a dotted-decimal address.

    :param text: "1000", "0x3e8" or "10.0.0.1".
    :return: (value, is_ipv4) where value fits in 32 unsigned bits.
    :raises InvalidEndpoint: for anything else.
    """
    text = text.strip()
    if is_numeral(text):
        value = int(text, 0) if text[:2].lower() == "0x" else int(text, 10)
        if value > ALL_ONES:
            raise InvalidEndpoint(f"{text} does not fit in 32 bits")
        return value, False
    if is_ipv4(text):
        try:
            return int(ipaddress.IPv4Address(text)), True
        except ipaddress.AddressValueError as e:
            raise InvalidEndpoint(f"{text}: {e}") from e
    raise InvalidEndpoint(f"{text} is neither a number nor an IPv4 address")
