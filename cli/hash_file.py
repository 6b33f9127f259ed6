"""
CLI command to hash one or more files with any combination of algorithms in a single read pass.
"""
import logging
import click
from rich.console import Console
from rich.table import Table
from models.algorithm import AlgorithmSet, CaseMode
from services.hashing_service import HashingService

logger = logging.getLogger(__name__)


@click.command("hash")
@click.argument("files", nargs=-1, required=True, type=click.Path(dir_okay=False))
@click.option("--algorithm", "-a", "algorithms", multiple=True, help="Algorithm to compute (repeatable): crc32, md4, md5, sha1, sha256, sha512, ed2k or all")
@click.option("--upper/--lower", "uppercase", default=None, help="Letter case of the hex digests")
@click.option("--parallel/--sequential", default=None, help="Run each algorithm on its own worker thread")
@click.option("--plain", is_flag=True, help="Print 'ALGORITHM  DIGEST  PATH' lines instead of a table")
@click.pass_context
def hash_file(ctx: click.Context, files: tuple, algorithms: tuple, uppercase: bool, parallel: bool, plain: bool) -> None:
    """
    Hash FILES with the selected algorithms.

    Args:
        ctx (click.Context): Click context containing shared settings and services.
        files (tuple): Paths of the files to hash.
        algorithms (tuple): Algorithm names; defaults to the configured selection.
        uppercase (bool): Overrides the configured letter case when given.
        parallel (bool): Overrides the configured worker-thread setting when given.
        plain (bool): Print plain lines instead of a rich table.

    Returns:
        None. Exits with code 1 if any file could not be hashed.
    """
    if not ctx.obj:
        click.secho("❌ Error: No context object found", fg="red", bold=True)
        ctx.exit(1)

    settings = ctx.obj["settings"]
    hashing: HashingService = ctx.obj["hashing"]

    try:
        selection = AlgorithmSet.from_names(algorithms) if algorithms else settings.algorithm_set
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="--algorithm")

    case_mode = hashing.case_mode
    if uppercase is not None:
        case_mode = CaseMode.UPPERCASE if uppercase else CaseMode.LOWERCASE

    if parallel is not None and parallel != hashing.parallel:
        hashing = HashingService(chunk_size=hashing.chunk_size, case_mode=case_mode, parallel=parallel)

    logger.info(f"Hashing {len(files)} file(s) with {', '.join(selection.names())}")

    rows = []
    failures = 0
    for path in files:
        try:
            result = hashing.hash_file(path, selection, case_mode)
        except OSError as e:
            failures += 1
            logger.error(f"Failed to hash {path}: {e}")
            click.secho(f"❌ {path}: {e.strerror or e}", fg="red", err=True)
            continue
        for algorithm in selection:
            rows.append((algorithm.name, result[algorithm], path))

    if plain:
        for name, digest, path in rows:
            click.echo(f"{name}  {digest}  {path}")
    elif rows:
        table = Table(title="File Digests")
        table.add_column("Algorithm", style="cyan", no_wrap=True)
        table.add_column("Digest", style="green", overflow="fold")
        table.add_column("File", style="white")
        for name, digest, path in rows:
            table.add_row(name, digest, path)
        Console().print(table)

    if failures:
        ctx.exit(1)
