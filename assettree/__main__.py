"""Module entrypoint for ``python -m assettree``.

All argument parsing and logging setup happen in ``assettree.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
