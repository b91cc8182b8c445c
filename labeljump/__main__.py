"""Module entrypoint for ``python -m labeljump``."""

from .cli import main


if __name__ == "__main__":
    main()
