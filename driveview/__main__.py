"""Module entrypoint for ``python -m driveview``.

All argument parsing and fetch/render setup happen in ``driveview.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
