"""Allow running eureka as ``python -m eureka``."""

from eureka.cli import cli_main

if __name__ == "__main__":
    cli_main()
