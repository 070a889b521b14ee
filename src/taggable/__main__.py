"""Entry point for running taggable as a module: python -m taggable"""

from taggable.cli.main import cli


def main():
    """Run the taggable CLI."""
    cli(obj={})


if __name__ == "__main__":
    main()
