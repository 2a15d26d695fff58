"""Entry point for `python -m raymaze [options]`."""
from raymaze.app import main

if __name__ == "__main__":
    main()
