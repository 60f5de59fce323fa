"""Allow ``python -m radnt``."""

from radnt.cli import main

if __name__ == "__main__":
    main()
