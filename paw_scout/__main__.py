"""Allow ``python -m paw_scout``."""
from paw_scout.cli import cli

if __name__ == "__main__":
    cli(prog_name="paw_scout")
