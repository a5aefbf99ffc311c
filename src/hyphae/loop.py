import os

os.environ["PYGAME_HIDE_SUPPORT_PROMPT"] = "1"

import typer

from hyphae.cli.commands.axiom import axiom_command
from hyphae.cli.commands.grow import grow_command
from hyphae.cli.commands.run import run_command

app = typer.Typer(help="Grow animated L-system hyphae.")

app.command(name="run")(run_command)
app.command(name="grow")(grow_command)
app.command(name="axiom")(axiom_command)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
