r"""
Exceptions raised by vajra.

Configuration and parse errors are raised before any process is spawned.
A child exiting non-zero is never an error.
"""

__all__ = ["VajraError", "ConfigurationError", "ParseError", "SpawnError"]


class VajraError(Exception):
    """Base class for vajra errors."""


class ConfigurationError(VajraError, ValueError):
    """Invalid option value or missing command."""


class ParseError(VajraError, ValueError):
    """Command string produced no arguments."""


class SpawnError(VajraError, RuntimeError):
    """Benchmarked process could not be started (abort policy only)."""

    def __init__(self, command: str, iteration: int) -> None:
        self.command = command
        self.iteration = iteration
        super().__init__(f"Failed to start '{command}' on iteration {iteration}")
