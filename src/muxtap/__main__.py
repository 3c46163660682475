"""Run muxtap with `python -m muxtap`."""

from . import main

if __name__ == "__main__":
    main()
