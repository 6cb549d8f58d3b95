"""
Accessibility Helper - Tool Server
Main entry point for the Flask-based checking service.
"""

import argparse
import logging
import os
from typing import Optional

from flask import Flask

from a11y_auditor.server.routers.tool_router import tool_router
from a11y_auditor.utils.config_loader import get_nested_config
from a11y_auditor.utils.configure_logging import configure_logger

logger = logging.getLogger(__name__)

DEFAULT_MAX_CONTENT_LENGTH = 10 * 1024 * 1024


def create_app(max_content_length: Optional[int] = None) -> Flask:
    """
    Application factory to initialize the Flask instance with the tool routes.
    """
    flask_app = Flask(__name__)

    # Requests above this size are rejected by Flask with 413
    flask_app.config['MAX_CONTENT_LENGTH'] = max_content_length or get_nested_config(
        "server.max_content_length", DEFAULT_MAX_CONTENT_LENGTH
    )

    flask_app.register_blueprint(tool_router)
    return flask_app


def resolve_port(cli_port: Optional[int]) -> int:
    """CLI argument first, then $PORT, then the configured default."""
    if cli_port:
        return cli_port
    env_port = os.environ.get("PORT")
    if env_port and env_port.isdigit():
        return int(env_port)
    return int(get_nested_config("server.port", 3000))


def run_server(host: Optional[str] = None, port: Optional[int] = None) -> None:
    """Builds the app and serves it until interrupted."""
    app = create_app()
    host = host or get_nested_config("server.host", "0.0.0.0")
    port = resolve_port(port)

    print("\n" + "=" * 50)
    print("🚀  ACCESSIBILITY HELPER | Tool Server")
    print("=" * 50)
    print(f"📡  Listening on:  http://{host}:{port}")
    print(f"❤️   Health check: http://localhost:{port}/health")
    print("-" * 50)

    print("\n🔍 API ROUTE MAPPING:")
    for rule in app.url_map.iter_rules():
        if "static" not in str(rule):
            print(f"   ✅ {rule}")
    print("-" * 50 + "\n")

    # use_reloader=False prevents double-initialization in detached environments
    app.run(host=host, port=port, debug=False, use_reloader=False)


def main():
    """
    Main execution block to parse arguments and start the server.
    """
    parser = argparse.ArgumentParser(description="Accessibility Helper Tool Server")
    parser.add_argument("--port", type=int, default=None, help="Port to bind the server to (default: $PORT or config)")
    parser.add_argument(
        "--host",
        type=str,
        default=None,
        help="Host interface to bind to (use 0.0.0.0 for Docker/External access)"
    )
    args = parser.parse_args()

    configure_logger(
        general_level=get_nested_config("debug.level", "INFO"),
        module_specific_levels=get_nested_config("debug.module_levels", {}),
        silenced_loggers=get_nested_config("debug.silenced_loggers", {}),
    )
    run_server(args.host, args.port)


if __name__ == '__main__':
    main()
