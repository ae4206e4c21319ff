# tildeshell/topics/__init__.py
#
# Built-in command surface, merged from each topic's COMMANDS table.

from tildeshell.topics.builtins import COMMANDS as BUILTIN_COMMANDS

ALL_COMMANDS = {}
ALL_COMMANDS.update(BUILTIN_COMMANDS)
