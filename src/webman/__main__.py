"""Entry point for 'python -m webman' command."""

from webman.cli import main

if __name__ == "__main__":
    main()
