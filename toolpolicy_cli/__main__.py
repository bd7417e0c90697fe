"""console script entrypoint for the toolpolicy CLI."""

from .cli import main as cli_main


def run() -> int:
    return cli_main()


def main() -> int:
    """Console entrypoint used by setuptools script hooks."""
    return run()


if __name__ == "__main__":
    raise SystemExit(run())
