import ipaddress

from .errors import NotAPrefix
from .split_range import ALL_ONES


def mask_to_prefix_len(mask):
    """
    Counts the leading 1s of a contiguous mask.

    :param mask: 32-bit mask such as 0xffffff00.
    :return: The prefix length, 24 for 0xffffff00.
    :raises NotAPrefix: when the 1s are not contiguous from the top bit.
    """
    mask &= ALL_ONES
    wildcards = ~mask & ALL_ONES
    if wildcards & (wildcards + 1):
        raise NotAPrefix(mask)
    return 32 - wildcards.bit_length()


def format_entry(entry, ipv4=False):
    patt, mask = entry
    end = patt | (~patt & ~mask & ALL_ONES)
    lines = [f"patt: {patt:08x}  ({patt} - {end})",
             f"mask: {mask:08x}"]
    if ipv4:
        lines.append(f"{ipaddress.IPv4Address(patt)}/{mask_to_prefix_len(mask)}")
    return "\n".join(lines)


def format_rule_set(rule_set, ipv4=False):
    return "\n".join(format_entry(entry, ipv4) for entry in rule_set)


def format_selection(selection, ipv4=False):
    """
    Renders a Direct or Split selection.

    A split is printed as its reject entries under "Reject: 0 - <start-1>"
    followed by its accept entries under "Accept: 0 - <end>".
    """
    rule_sets = selection.rule_sets
    if len(rule_sets) == 1:
        return format_rule_set(rule_sets[0][1], ipv4)
    blocks = []
    for action, rule_set in rule_sets:
        blocks.append(f"{action.capitalize()}: {rule_set.st} - {rule_set.end}")
        if len(rule_set):
            blocks.append(format_rule_set(rule_set, ipv4))
    return "\n".join(blocks)
