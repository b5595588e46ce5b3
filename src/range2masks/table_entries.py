# Turn a range selection into commands for a P4 ternary table.
#  The structure of a command is described here: https://github.com/p4lang/behavioral-model/blob/main/docs/runtime_CLI.md#table_add
#
#  table_add MyIngress.acl allow 0x0a000000&&&0xffffff00 => 1
#
# Priorities are handed out in match order: every reject entry gets a
# smaller number than every accept entry.

import logging

log = logging.getLogger(__name__)

DEFAULT_TABLE = "MyIngress.acl"
DEFAULT_ACTION = "allow"
DEFAULT_DENY_ACTION = "drop"


class TableWriter:
    """
    Writes table_add lines for one or more selections.

    Each writer keeps its own priority counter, starting at first_priority.
    """

    def __init__(self, table=DEFAULT_TABLE, action=DEFAULT_ACTION,
                 deny_action=DEFAULT_DENY_ACTION, params="", first_priority=1):
        self.table = table
        self.actions = {"accept": action, "reject": deny_action}
        self.params = params
        self.priority = first_priority

    def command(self, entry, action):
        patt, mask = entry
        params = f"{self.params} " if self.params else ""
        line = "table_add {} {} {}&&&{} => {}{}".format(
            self.table, self.actions[action], hex(patt), hex(mask), params, self.priority)
        self.priority += 1
        return line

    def commands(self, selection):
        lines = []
        for action, rule_set in selection.rule_sets:
            for entry in rule_set:
                lines.append(self.command(entry, action))
        log.debug("%d commands for %s, next priority %d", len(lines), self.table, self.priority)
        return lines

    def write(self, f, selection):
        for line in self.commands(selection):
            f.write(line + "\n")
