"""Allow `python -m pocat`."""

from .cli import main

if __name__ == "__main__":
    main()
