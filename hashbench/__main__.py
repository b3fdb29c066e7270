"""Entry point for ``python -m hashbench``."""

from hashbench.cli import hashbench

if __name__ == "__main__":
    hashbench()
