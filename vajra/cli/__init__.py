r"""
Command-line interface for vajra.

    vajra --iterations 1000 ls -la
    vajra --output json --warmup 0 sleep 0.1
"""

from vajra.cli.main import app, main

__all__ = [
    "app",
    "main",
]
