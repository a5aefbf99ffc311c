from typing import Optional

import typer

from hyphae.runtime.container import build_runtime_container
from hyphae.runtime.game_loop import GameLoop
from hyphae.utilities.logging import get_logger

logger = get_logger(__name__)

DEFAULT_SEED_ENTITIES = True


def run_command(
    seed: Optional[int] = typer.Option(
        None, "--seed", help="Seed the random source for repeatable growth."
    ),
    dev: bool = typer.Option(
        False, "--dev", help="Start with the status overlay and performance logging."
    ),
    seed_entities: bool = typer.Option(
        DEFAULT_SEED_ENTITIES,
        "--seed-entities/--no-seed-entities",
        help="Start with the two default growth points.",
    ),
) -> None:
    resolver = build_runtime_container(seed=seed, dev_mode=dev or None)
    loop = resolver[GameLoop]
    if seed_entities:
        loop.seed()
    loop.start()
