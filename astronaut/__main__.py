"""Allow ``python -m astronaut``."""

from astronaut.cli.main import main

if __name__ == "__main__":
    main()
