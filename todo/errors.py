"""Errors surfaced to the command line.

Every failure that should abort an invocation derives from TodoError;
the CLI turns it into a message and a non-zero exit status.
"""


class TodoError(Exception):
    """Base class for all todo errors"""


class IOFailure(TodoError):
    """Storage could not be read or written"""


class CorruptState(TodoError):
    """Storage content does not match the expected structure"""


class InputError(TodoError):
    """Interactive or command-line input was malformed"""


class InputCancelled(InputError):
    """The user aborted an interactive prompt"""


class SelectionContractError(TodoError):
    """A selection provider returned an option it was never offered"""
