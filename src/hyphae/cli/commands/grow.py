import random
from typing import Optional

import typer

from hyphae.errors import ConfigError, StructuralError
from hyphae.grammar.rules import HYPHAE_RULES
from hyphae.growth.system import GrowthSystem
from hyphae.utilities.env import Configuration
from hyphae.utilities.logging import get_logger

logger = get_logger(__name__)


def grow_command(
    axiom: str = typer.Option("[M]", "--axiom", help="Initial symbol string."),
    steps: int = typer.Option(1, "--steps", min=0, help="Rewriting steps to apply."),
    seed: Optional[int] = typer.Option(
        None, "--seed", help="Seed for the angle draws."
    ),
    show_sentence: bool = typer.Option(
        True, "--sentence/--no-sentence", help="Print the final sentence."
    ),
) -> None:
    """Rewrite an axiom without opening a window and report the result."""

    system = GrowthSystem(
        rule_set=HYPHAE_RULES.with_angle_range(*Configuration.rewrite_angle_range()),
        rng=random.Random(seed),
    )
    try:
        entity = system.create_entity(axiom, 0, 0)
        for _ in range(steps):
            entity.step()
            entity.advance(1.0)
    except (ConfigError, StructuralError) as error:
        logger.error("Unable to grow %r: %s", axiom, error)
        raise typer.Exit(code=2) from error

    typer.echo(f"depth: {entity.depth}")
    typer.echo(f"length: {len(entity.sentence)}")
    if show_sentence:
        typer.echo(entity.sentence)
