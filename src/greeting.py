"""Console program that prints a fixed greeting."""

import sys

GREETING = "Hello, World!"


def hello_world():
    """Return a hello world greeting."""
    return GREETING


def main():
    """Entry point for the application.

    Writes the greeting to stdout and returns the exit status. Write
    failures on stdout are left to propagate.
    """
    print(hello_world())
    return 0


if __name__ == "__main__":
    sys.exit(main())
