"""
Command-line argument parsing for the request trace server.
"""

import argparse

from version import get_version_string


def parse_arguments(argv=None):
    """Parse command-line arguments for the trace server.

    Args:
        argv: Argument list to parse (defaults to sys.argv[1:])

    Returns:
        argparse.Namespace: Parsed command-line arguments with the following attributes:
            - config (str): Path to configuration file (default: "config.json")
            - debug (bool): Enable debug mode
            - trace (bool): Enable TRACE logging so request dumps are emitted
            - port (int | None): Port number to run the server on
            - log_folder (str | None): Directory for a log file
    """
    version_string = get_version_string()
    parser = argparse.ArgumentParser(
        description=f"Request trace server - {version_string}",
        epilog=f"Version: {version_string}",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {version_string}",
        help="Show version information and exit",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=str,
        default="config.json",
        help="Path to the configuration file",
    )
    parser.add_argument("-d", "--debug", action="store_true", help="Enable debug mode")
    parser.add_argument(
        "-t",
        "--trace",
        action="store_true",
        help="Enable TRACE logging (dumps every request)",
    )
    parser.add_argument(
        "-p",
        "--port",
        type=int,
        default=None,
        help="Port number to run the server on (overrides config file)",
    )
    parser.add_argument(
        "--log-folder",
        type=str,
        default=None,
        help="Also write logs to a timestamped file in this folder",
    )
    return parser.parse_args(argv)
