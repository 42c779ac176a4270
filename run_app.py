#!/usr/bin/env python3
"""
Runner for the Flask application.
Sets the Python path, applies command line overrides and starts the server.
"""

import argparse
import sys
from pathlib import Path

# Add the current directory to Python path
current_dir = Path(__file__).parent
sys.path.insert(0, str(current_dir))

from config_manager import ConfigManager
from summarizer import setup_logging, stop_logging
from app.main import create_app


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Legal & financial document summarizer")
    parser.add_argument("--port", type=int, help="Port to run the server on")
    parser.add_argument("--host", type=str, help="Host to bind the server to")
    parser.add_argument("--debug", action="store_true", help="Enable debug mode")
    parser.add_argument("--config", type=str, default="summarizer_config.json",
                        help="Path to the JSON configuration file")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)

    config_manager = ConfigManager(args.config)
    app_config = config_manager.get_app_config()

    # Override configuration with command line arguments
    if args.port:
        app_config.port = args.port
    if args.host:
        app_config.host = args.host
    if args.debug:
        app_config.debug = args.debug

    setup_logging(debug=app_config.debug)
    try:
        app = create_app(config_manager=config_manager)

        print("🚀 Starting Flask application...")
        print(f"📋 Configuration loaded:")
        print(f"   Host: {app_config.host}")
        print(f"   Port: {app_config.port}")
        print(f"   Debug: {app_config.debug}")

        app.run(
            host=app_config.host,
            port=app_config.port,
            debug=app_config.debug
        )
    finally:
        stop_logging()


if __name__ == "__main__":
    main()
