r"""
Command-line interface for vajra.

    vajra --iterations 1000 ls -la
    vajra --warmup 0 --output json python script.py
    vajra --shell "sort data.txt | uniq -c"
"""

import logging
import sys
from pathlib import Path
from typing import Annotated

import typer

from vajra.config import build_config, parse_policy, parse_timeout
from vajra.errors import VajraError
from vajra.reporting import NullProgressSink, ProgressBarSink, Style, TextFormatter, get_formatter
from vajra.runner import BenchmarkEngine, EngineOptions, default_runner
from vajra.types import OutputFormat
from vajra.utils.memory import format_memory, get_children_peak_rss_kb

__all__ = ["app", "main"]

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="vajra",
    help="Benchmark a command by running it repeatedly and reporting timing statistics.",
    add_completion=False,
)


def _setup_logging(verbose: bool) -> None:
    """Send vajra log records to stderr when verbose."""
    root = logging.getLogger("vajra")
    if not verbose or any(isinstance(h, logging.StreamHandler) for h in root.handlers):
        return

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(asctime)s %(name)s %(levelname)s %(message)s"))

    root.setLevel(logging.DEBUG)
    root.addHandler(handler)


@app.command(
    no_args_is_help=True,
    context_settings={"allow_interspersed_args": False, "ignore_unknown_options": True},
)
def run(
    command: Annotated[
        list[str] | None, typer.Argument(help="Command to benchmark, with its arguments", show_default=False)
    ] = None,
    warmup: Annotated[
        str | None, typer.Option("-w", "--warmup", help="Warmup runs before measuring [default: 5]")
    ] = None,
    iterations: Annotated[
        str | None, typer.Option("-n", "--iterations", help="Measured runs [default: 100]")
    ] = None,
    output: Annotated[str | None, typer.Option("-o", "--output", help="Output format: text, json")] = None,
    shell: Annotated[bool, typer.Option("--shell", help="Run the command through the system shell")] = False,
    timeout: Annotated[
        str | None, typer.Option("--timeout", help="Kill a run after this many seconds")
    ] = None,
    count_warmup: Annotated[
        bool, typer.Option("--count-warmup", help="Include warmup runs in the progress bar")
    ] = False,
    on_spawn_failure: Annotated[
        str, typer.Option("--on-spawn-failure", help="Runs that fail to start: include, exclude, abort")
    ] = "include",
    no_color: Annotated[bool, typer.Option("--no-color", help="Disable colored output")] = False,
    no_progress: Annotated[bool, typer.Option("--no-progress", help="Hide the progress bar")] = False,
    save: Annotated[Path | None, typer.Option("--save", help="Also write the result to this file")] = None,
    verbose: Annotated[bool, typer.Option("-v", "--verbose", help="Verbose output")] = False,
) -> None:
    """Benchmark COMMAND and print mean, standard deviation, min, max and throughput."""
    _setup_logging(verbose)

    raw_command = " ".join(command or [])

    try:
        config = build_config(raw_command, warmup=warmup, iterations=iterations, output=output, shell=shell)
        policy = parse_policy(on_spawn_failure)
        timeout_seconds = parse_timeout(timeout)
    except VajraError as e:
        typer.echo(f"Error: {e}", err=True)
        typer.echo("Run 'vajra --help' for more information.", err=True)
        raise typer.Exit(1)

    is_json = config.output_format is OutputFormat.JSON
    style = Style.plain() if no_color else Style()

    if not is_json:
        typer.echo(f"{style.paint('Running benchmark:', 'bright_cyan')} {style.paint(raw_command, 'bright_yellow')}")
        typer.echo(f"Warmup: {config.warmup_count} | Iterations: {config.iteration_count}\n")

    engine = BenchmarkEngine(
        options=EngineOptions(count_warmup_in_progress=count_warmup, spawn_failure_policy=policy),
    )
    runner = default_runner(timeout_seconds=timeout_seconds)

    if is_json or no_progress:
        sink: ProgressBarSink | NullProgressSink = NullProgressSink()
    else:
        sink = ProgressBarSink(label="Benchmarking")

    if not is_json and config.warmup_count > 0:
        typer.echo(f"Warming up ({config.warmup_count} runs)...", err=True)

    try:
        result = engine.run(config, runner, sink)
    except VajraError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)
    finally:
        if isinstance(sink, ProgressBarSink):
            sink.close()

    formatter = get_formatter(config.output_format, style=style)
    typer.echo(formatter.to_string(result), nl=False)

    if save is not None:
        if is_json:
            formatter.export(result, save)
        else:
            TextFormatter(style=Style.plain()).export(result, save)
        logger.info("Saved result to %s", save)

    if verbose and not is_json:
        peak_kb = get_children_peak_rss_kb()
        if peak_kb:
            typer.echo(f"Peak child memory: {format_memory(peak_kb)}", err=True)


def main() -> None:
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
