"""Entry point for the scrapbrawl duel."""

import sys

from scrapbrawl.config import settings
from scrapbrawl.simulation.loop import run


def main() -> None:
    runtime_settings = settings.load_runtime_settings(sys.argv[1:])
    settings.apply_runtime_settings(runtime_settings)
    run(runtime_settings)


if __name__ == "__main__":
    main()
