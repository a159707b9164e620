r"""
Benchmark configuration and validation.

Defaults can be overridden with VAJRA_-prefixed environment variables,
either exported or placed in a .env file in the working directory:

    VAJRA_WARMUP=3
    VAJRA_ITERATIONS=50
    VAJRA_OUTPUT=json

    from vajra.config import build_config

    config = build_config("sleep 0.1", warmup=2, iterations=20)
    print(f"Iterations: {config.iteration_count}")
"""

import os
from pathlib import Path

from dotenv import load_dotenv

from vajra.command import build_command
from vajra.errors import ConfigurationError
from vajra.types import BenchmarkConfig, ExecutionMode, OutputFormat, SpawnFailurePolicy

__all__ = [
    "DEFAULT_ITERATIONS",
    "DEFAULT_OUTPUT",
    "DEFAULT_WARMUP",
    "ENV_PREFIX",
    "build_config",
    "get_env",
    "parse_count",
    "parse_output_format",
    "parse_policy",
    "parse_timeout",
]

ENV_PREFIX = "VAJRA_"

DEFAULT_WARMUP = 5
DEFAULT_ITERATIONS = 100
DEFAULT_OUTPUT = OutputFormat.TEXT.value

# Variables already set in the environment win over .env entries
_env_file = Path(".env")
if _env_file.exists():
    load_dotenv(_env_file, override=False)


def get_env(key: str, *, default: str | None = None) -> str | None:
    """Get environment variable with VAJRA_ prefix.

    Args:
        key: Variable name without prefix (e.g., "WARMUP").
        default: Default value if not set.

    Returns:
        Environment variable value or default.
    """
    return os.environ.get(f"{ENV_PREFIX}{key}", default)


def parse_count(name: str, value: str | int, *, minimum: int) -> int:
    """Convert an iteration count option to an int.

    Args:
        name: Option name used in error messages.
        value: Raw value from the command line or environment.
        minimum: Smallest accepted value.

    Returns:
        The validated count.

    Raises:
        ConfigurationError: If the value is not an integer or is below minimum.
    """
    if isinstance(value, bool):
        raise ConfigurationError(f"Invalid integer value for --{name}: {value!r}")

    if isinstance(value, int):
        count = value
    else:
        try:
            count = int(str(value).strip())
        except ValueError:
            msg = f"Invalid integer value for --{name}: '{value}'. Expected a number, e.g., --{name} 100"
            raise ConfigurationError(msg) from None

    if count < minimum:
        qualifier = "non-negative" if minimum == 0 else f"at least {minimum}"
        raise ConfigurationError(f"--{name} must be {qualifier} (got {count})")

    return count


def parse_output_format(value: str | OutputFormat) -> OutputFormat:
    """Resolve an output format name.

    Raises:
        ConfigurationError: If the format is not 'text' or 'json'.
    """
    if isinstance(value, OutputFormat):
        return value
    try:
        return OutputFormat(value.strip().lower())
    except ValueError:
        valid = ", ".join(f.value for f in OutputFormat)
        raise ConfigurationError(f"--output must be one of {valid} (got '{value}')") from None


def parse_policy(value: str | SpawnFailurePolicy) -> SpawnFailurePolicy:
    """Resolve a spawn failure policy name.

    Raises:
        ConfigurationError: If the policy is unknown.
    """
    if isinstance(value, SpawnFailurePolicy):
        return value
    try:
        return SpawnFailurePolicy(value.strip().lower())
    except ValueError:
        valid = ", ".join(p.value for p in SpawnFailurePolicy)
        raise ConfigurationError(f"--on-spawn-failure must be one of {valid} (got '{value}')") from None


def parse_timeout(value: float | str | None) -> float | None:
    """Validate a per-iteration deadline in seconds.

    Returns:
        The deadline, or None when disabled.

    Raises:
        ConfigurationError: If the value is not a positive number.
    """
    if value is None:
        return None
    try:
        seconds = float(value)
    except (TypeError, ValueError):
        raise ConfigurationError(f"Invalid value for --timeout: '{value}'") from None
    if seconds <= 0:
        raise ConfigurationError(f"--timeout must be positive (got {seconds})")
    return seconds


def build_config(
    command: str,
    *,
    warmup: str | int | None = None,
    iterations: str | int | None = None,
    output: str | OutputFormat | None = None,
    shell: bool = False,
) -> BenchmarkConfig:
    """Build a validated benchmark configuration.

    Unset options fall back to VAJRA_ environment variables, then to
    the built-in defaults.

    Args:
        command: Raw command string.
        warmup: Warmup iteration count.
        iterations: Measured iteration count.
        output: Output format name.
        shell: Run the command through the system shell.

    Returns:
        Immutable BenchmarkConfig.

    Raises:
        ConfigurationError: On any invalid option or missing command.
        ParseError: If a direct-mode command yields no arguments.
    """
    if warmup is None:
        warmup = get_env("WARMUP", default=str(DEFAULT_WARMUP))
    if iterations is None:
        iterations = get_env("ITERATIONS", default=str(DEFAULT_ITERATIONS))
    if output is None:
        output = get_env("OUTPUT", default=DEFAULT_OUTPUT)

    warmup_count = parse_count("warmup", warmup, minimum=0)  # type: ignore[arg-type]
    iteration_count = parse_count("iterations", iterations, minimum=1)  # type: ignore[arg-type]
    output_format = parse_output_format(output)  # type: ignore[arg-type]

    mode = ExecutionMode.SHELL if shell else ExecutionMode.DIRECT
    spec = build_command(command, mode)

    return BenchmarkConfig(
        command=spec,
        warmup_count=warmup_count,
        iteration_count=iteration_count,
        output_format=output_format,
    )
