"""
Errors surfaced to whoever runs the artwork.

Drawing code does not raise these: a failure inside a frame is a bug and
propagates as-is. These cover the outer shell - output targets and the
optional live window.
"""


class SonglinesError(Exception):
    """Base class for operator-facing failures."""
    pass


class OutputError(SonglinesError):
    """An output file or directory could not be written."""
    pass


class BackendUnavailableError(SonglinesError):
    """An optional display backend (pygame) is not installed."""
    pass
