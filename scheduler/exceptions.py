"""
Errors raised by the simulator.

Both concrete errors subclass ValueError so callers that only care about
"bad input" can catch the builtin. Every error is terminal for the
invocation: no partial report is ever produced.
"""


class SchedulerError(Exception):
    """Base class for everything the simulator raises on purpose."""


class ConfigurationError(SchedulerError, ValueError):
    """Unknown algorithm, missing/non-positive quantum, empty or oversized job list."""


class InputError(SchedulerError, ValueError):
    """A malformed job record: bad burst time, missing field, empty or duplicate name."""
