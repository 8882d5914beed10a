"""Entry point for ``python -m idxgraph``."""

from idxgraph.cli import main

if __name__ == "__main__":
    main()
