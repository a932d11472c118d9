"""Module entrypoint for ``python -m guildtree``."""

from .cli import main


if __name__ == "__main__":
    main()
