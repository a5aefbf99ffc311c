import random
from typing import Optional

import typer

from hyphae.errors import ConfigError
from hyphae.grammar.turns import generate_random_axiom
from hyphae.utilities.logging import get_logger

logger = get_logger(__name__)


def axiom_command(
    min_count: int = typer.Option(1, "--min-count"),
    max_count: int = typer.Option(5, "--max-count"),
    min_angle: int = typer.Option(-40, "--min-angle"),
    max_angle: int = typer.Option(40, "--max-angle"),
    seed: Optional[int] = typer.Option(None, "--seed"),
) -> None:
    """Print a random axiom made of bracketed single-segment branches."""

    try:
        axiom = generate_random_axiom(
            min_count, max_count, min_angle, max_angle, rng=random.Random(seed)
        )
    except ConfigError as error:
        logger.error("Invalid axiom request: %s", error)
        raise typer.Exit(code=2) from error
    typer.echo(axiom)
