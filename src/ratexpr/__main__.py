"""Entry point for ``python -m ratexpr``."""

from ratexpr.cli import main

if __name__ == "__main__":
    main()
