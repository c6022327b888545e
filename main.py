"""
Lightbulb MCP Server

Main Application Entry Point.
Builds one LightbulbService and serves it over stdio (default) or HTTP.
"""

import argparse
import logging

from waitress import serve

from lightbulb_core.app import TRANSPORTS, _build_config, _setup_logging, create_app
from lightbulb_core.service import LightbulbService
from lightbulb_core.stdio_server import run_stdio

logger = logging.getLogger(__name__)


def _parse_args(argv=None) -> dict:
    parser = argparse.ArgumentParser(description="Simulated lightbulb exposed as MCP tools")
    parser.add_argument("--transport", choices=TRANSPORTS, help="stdio (default) or http")
    parser.add_argument("--host", help="HTTP bind address")
    parser.add_argument("--port", type=int, help="HTTP port")
    parser.add_argument("--log-file", dest="activity_log_path", help="Activity log path")
    parser.add_argument("--log-level", help="trace, debug, info, warn or error")
    return vars(parser.parse_args(argv))


def main(argv=None) -> None:
    cfg = _build_config(_parse_args(argv))
    _setup_logging(cfg.log_level)

    service = LightbulbService.with_file_log(cfg.activity_log_path)
    logger.info(
        "Lightbulb Core %s starting (transport=%s, activity log=%s)",
        cfg.version, cfg.transport, cfg.activity_log_path,
    )

    if cfg.transport == "http":
        app = create_app(service=service, cfg=cfg)
        serve(app, host=cfg.host, port=cfg.port)
    else:
        run_stdio(service, cfg.log_level, version=cfg.version)


if __name__ == "__main__":
    main()
