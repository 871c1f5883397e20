import typer

import cli.cli

if __name__ == "__main__":
    # Opens the interactive menu on the default data file
    typer_app: typer.Typer = cli.cli.app
    typer_app()
