r"""
Child process execution.

One process is started per call, its standard streams are discarded and
the call blocks until it exits. Failing to start the process is reported
as SPAWN_FAILED instead of raising, so a benchmark run never dies halfway.

    from vajra.runner.process import default_runner

    runner = default_runner()
    code = runner.execute(["ls", "-la"])
"""

import logging
import os
import shlex
import signal
import subprocess
from collections.abc import Sequence
from typing import Any

from vajra.types import SPAWN_FAILED, TIMED_OUT

__all__ = ["SubprocessRunner", "PosixProcessRunner", "WindowsProcessRunner", "default_runner"]

logger = logging.getLogger(__name__)


class SubprocessRunner:
    """Runs commands with subprocess, discarding their output.

    Args:
        timeout_seconds: Kill a child still running after this many seconds
            and report TIMED_OUT. None waits forever.
    """

    def __init__(self, *, timeout_seconds: float | None = None) -> None:
        self.timeout_seconds = timeout_seconds

    def _popen_kwargs(self) -> dict[str, Any]:
        """Platform specific keyword arguments for subprocess.Popen."""
        return {}

    def _shell_command(self, tokens: Sequence[str]) -> str:
        if isinstance(tokens, str):
            return tokens
        return " ".join(tokens)

    def _normalize_exit(self, returncode: int) -> int:
        return returncode

    def _kill(self, proc: subprocess.Popen) -> None:
        """Kill a child that missed its deadline."""
        proc.kill()

    def execute(self, tokens: Sequence[str], shell_mode: bool = False) -> int:
        """Run the command and return its exit code, or SPAWN_FAILED."""
        if shell_mode:
            args: str | list[str] = self._shell_command(tokens)
        else:
            args = list(tokens)
            if not args:
                logger.warning("Refusing to execute an empty argument list")
                return SPAWN_FAILED

        try:
            proc = subprocess.Popen(
                args,
                shell=shell_mode,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                **self._popen_kwargs(),
            )
        except (OSError, ValueError) as e:
            # ValueError: arguments holding a NUL byte never reach exec
            logger.debug("Could not start %r: %s", args, e)
            return SPAWN_FAILED

        with proc:
            try:
                returncode = proc.wait(timeout=self.timeout_seconds)
            except subprocess.TimeoutExpired:
                logger.debug("Killed %r after %ss", args, self.timeout_seconds)
                self._kill(proc)
                proc.wait()
                return TIMED_OUT

        return self._normalize_exit(returncode)


class PosixProcessRunner(SubprocessRunner):
    """Backend for Linux, macOS and other POSIX systems."""

    def _popen_kwargs(self) -> dict[str, Any]:
        # A deadline kill must reach the whole group, not just /bin/sh
        return {"close_fds": True, "start_new_session": self.timeout_seconds is not None}

    def _kill(self, proc: subprocess.Popen) -> None:
        try:
            os.killpg(proc.pid, signal.SIGKILL)
        except ProcessLookupError:
            pass

    def _shell_command(self, tokens: Sequence[str]) -> str:
        if isinstance(tokens, str):
            return tokens
        if len(tokens) == 1:
            return tokens[0]
        return shlex.join(tokens)

    def _normalize_exit(self, returncode: int) -> int:
        # subprocess reports death by signal N as -N
        if returncode < 0:
            return 128 - returncode
        return returncode


class WindowsProcessRunner(SubprocessRunner):
    """Backend for Windows; shell mode goes through COMSPEC (cmd.exe)."""

    def _popen_kwargs(self) -> dict[str, Any]:
        return {"creationflags": getattr(subprocess, "CREATE_NO_WINDOW", 0)}


def default_runner(*, timeout_seconds: float | None = None) -> SubprocessRunner:
    """Create the process runner for the current platform."""
    if os.name == "nt":
        return WindowsProcessRunner(timeout_seconds=timeout_seconds)
    return PosixProcessRunner(timeout_seconds=timeout_seconds)
