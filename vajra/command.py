r"""
Command string tokenization.

    from vajra.command import parse_command

    parse_command('echo "hello world"')  # ['echo', 'hello world']

Either quote character toggles a quoted region; quotes are not
distinguished from each other and there is no escape character.
"""

from vajra.errors import ConfigurationError, ParseError
from vajra.types import CommandSpec, ExecutionMode

__all__ = ["QUOTE_CHARS", "parse_command", "build_command"]

QUOTE_CHARS = frozenset("\"'")


def parse_command(command: str) -> list[str]:
    """Split a command string into arguments.

    Args:
        command: Raw command string.

    Returns:
        List of arguments, empty if the string holds no tokens.
    """
    args: list[str] = []
    current: list[str] = []
    in_quote = False

    for char in command:
        if char in QUOTE_CHARS:
            in_quote = not in_quote
        elif char.isspace() and not in_quote:
            if current:
                args.append("".join(current))
                current.clear()
        else:
            current.append(char)

    if current:
        args.append("".join(current))

    return args


def build_command(raw: str, mode: ExecutionMode = ExecutionMode.DIRECT) -> CommandSpec:
    """Validate a raw command and wrap it in a CommandSpec.

    Args:
        raw: Command as given by the user.
        mode: Execution mode.

    Returns:
        CommandSpec ready for the engine.

    Raises:
        ConfigurationError: If the command is empty.
        ParseError: If a direct-mode command yields no arguments.
    """
    if not raw or not raw.strip():
        raise ConfigurationError("No command specified")

    tokens = tuple(parse_command(raw))
    if mode is ExecutionMode.DIRECT and not tokens:
        raise ParseError(f"Failed to parse command: {raw!r}")

    return CommandSpec(raw=raw, tokens=tokens, mode=mode)
