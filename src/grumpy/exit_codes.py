"""Process exit codes returned by grumpy commands."""

from enum import IntEnum


class ExitCode(IntEnum):
    SUCCESS = 0
    CONFLICTING_PROJECT_TYPE = 1
    UNEXPECTED_TERMINATION = 100
    BINARY_EXISTS = 101
    ALREADY_EXISTS = 102
    INSIDE_PROJECT = 103
    NO_PROJECT_NAME = 104
