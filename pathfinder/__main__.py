"""Entry point for the Pathfinder CLI.

Allows running ``python -m pathfinder`` as an alternative to the installed
``pathfinder`` script.
"""

from .cli import main

if __name__ == "__main__":  # pragma: no cover
    main()
