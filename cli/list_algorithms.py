"""
CLI command to list the supported digest algorithms.
"""
import click
from rich.console import Console
from rich.table import Table
from models.algorithm import ALGORITHM_ORDER, ALL, DIGEST_SIZES


@click.command("list-algorithms")
def list_algorithms() -> None:
    """List supported algorithms with their mask bits and digest sizes."""
    table = Table(title="Supported Algorithms")
    table.add_column("Name", style="cyan")
    table.add_column("Mask", justify="right")
    table.add_column("Digest bytes", justify="right")
    table.add_column("Hex digits", justify="right")
    table.add_column("In 'all'", justify="center")

    for algorithm in ALGORITHM_ORDER:
        size = DIGEST_SIZES[algorithm]
        table.add_row(
            algorithm.name.lower(),
            f"0x{int(algorithm):02X}",
            str(size),
            str(size * 2),
            "✓" if int(algorithm) & ALL else "",
        )

    Console().print(table)
