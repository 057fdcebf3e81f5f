from docanalyzer.cli import run_cli


def main() -> None:
    """Entry point: hand control to the Typer application."""
    run_cli()


if __name__ == "__main__":
    main()
