"""
Request trace server.

A small Flask application for inspecting what clients actually send: every
request is dumped at TRACE level and /debug/request echoes the dump back.
"""

import logging
from logging import Logger
from pathlib import Path
from typing import Optional

from flask import Flask

from blueprints import debug_request_bp, init_debug_request_blueprint
from cli import parse_arguments
from config import TraceConfigModel, load_config, validate_config_dict
from utils.logging_utils import get_server_logger, init_logging
from utils.request_hooks import install_request_trace
from version import get_version_string


logger: Logger = get_server_logger(__name__)


def create_app(trace_config: Optional[TraceConfigModel] = None) -> Flask:
    """Build the Flask application.

    Args:
        trace_config: Configuration to apply (defaults to TraceConfigModel())

    Returns:
        Configured Flask app
    """
    trace_config = trace_config or TraceConfigModel()

    app = Flask(__name__)
    app.config["SESSION_COOKIE_NAME"] = trace_config.session_cookie_name
    if trace_config.secret_key:
        app.secret_key = trace_config.secret_key

    if trace_config.trace_all_requests:
        install_request_trace(
            app,
            logger=logging.getLogger(trace_config.logger_name),
            tz=trace_config.get_tzinfo(),
            session_cookie_name=trace_config.session_cookie_name,
        )

    if trace_config.debug_endpoint:
        init_debug_request_blueprint(trace_config)
        app.register_blueprint(debug_request_bp)

    return app


def main() -> None:
    """Main entry point for the request trace server."""
    args = parse_arguments()

    init_logging(debug=args.debug, trace=args.trace, log_folder=args.log_folder)

    logger.info(f"Request trace server - Version: {get_version_string()}")

    if Path(args.config).exists():
        logger.info(f"Loading configuration from: {args.config}")
        trace_config = load_config(args.config)
    else:
        logger.info(f"No configuration file at {args.config}, using defaults")
        trace_config = TraceConfigModel()

    if args.port is not None:
        trace_config = validate_config_dict(
            {**trace_config.model_dump(), "port": args.port}
        )

    host = trace_config.host
    port = trace_config.port

    app = create_app(trace_config)

    logger.info(f"Starting trace server on host {host} and port {port}...")
    if trace_config.trace_all_requests and not args.trace:
        logger.info("Request dumps are emitted at TRACE level; pass --trace to see them")
    if trace_config.debug_endpoint:
        logger.info(f"  - Request dump page: http://{host}:{port}/debug/request")
    app.run(host=host, port=port, debug=args.debug)


if __name__ == "__main__":
    main()
