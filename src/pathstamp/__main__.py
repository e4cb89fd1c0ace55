"""Allow ``python -m pathstamp``."""

from pathstamp.cli.main import main

if __name__ == "__main__":
    main()
