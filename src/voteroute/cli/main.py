"""
voteroute CLI - Main entry point.

This module registers all CLI commands. Each command is implemented
in its own module under cli/commands/.
"""

import click

from .commands import popularity, route


@click.group()
@click.version_option(package_name="voteroute")
def main():
    """voteroute: Vote propagation routes for consensus telemetry.

    Reconstructs how a round's vote travelled hop by hop through the
    relay mesh, from exported connection telemetry.

    \b
    Quick Start:
      voteroute route telemetry.json -r 1200 -a AUTH -s GUID:relay-3
      voteroute route telemetry.json -r 1200 -a AUTH -s GUID:relay-3 --style flow
      voteroute popularity telemetry.json -r 1200
    """
    pass


# Register commands
main.add_command(route.route)
main.add_command(popularity.popularity)

if __name__ == "__main__":
    main()
