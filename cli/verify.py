"""
CLI command to verify a file against a reference digest.
"""
import logging
import click
from models.algorithm import parse_algorithm
from services.hashing_service import HashingService, ReferenceHashError

logger = logging.getLogger(__name__)


@click.command("verify")
@click.argument("file", type=click.Path(dir_okay=False))
@click.argument("reference")
@click.option("--algorithm", "-a", default="md5", show_default=True, help="Algorithm the reference digest was produced with")
@click.pass_context
def verify(ctx: click.Context, file: str, reference: str, algorithm: str) -> None:
    """
    Check FILE against the REFERENCE hex digest.

    Exit codes: 0 on match, 1 on mismatch or unreadable file, 2 when the
    reference is not a valid digest for the algorithm.
    """
    if not ctx.obj:
        click.secho("❌ Error: No context object found", fg="red", bold=True)
        ctx.exit(1)

    hashing: HashingService = ctx.obj["hashing"]

    try:
        selected = parse_algorithm(algorithm)
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="--algorithm")

    try:
        matched = hashing.verify_file(file, selected, reference)
    except ReferenceHashError as e:
        logger.error(str(e))
        click.secho(f"❌ {e}", fg="red", err=True)
        ctx.exit(2)
    except OSError as e:
        logger.error(f"Failed to read {file}: {e}")
        click.secho(f"❌ {file}: {e.strerror or e}", fg="red", err=True)
        ctx.exit(1)

    if matched:
        click.secho(f"✅ {file}: {selected.name} OK", fg="green")
    else:
        click.secho(f"❌ {file}: {selected.name} MISMATCH", fg="red", bold=True)
        ctx.exit(1)
