import json
import logging
import os
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Optional

from flask import Flask, jsonify

from lightbulb_core.activity_log import DEFAULT_LOG_PATH
from lightbulb_core.mcp_server import mcp_bp
from lightbulb_core.service import LightbulbService
from lightbulb_core.versioning import get_runtime_version

logger = logging.getLogger(__name__)

TRANSPORTS = ("stdio", "http")


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


@dataclass(frozen=True)
class LightbulbConfig:
    version: str = get_runtime_version()

    # Logging
    log_level: str = "info"

    # Activity log (relative to the working directory)
    activity_log_path: str = DEFAULT_LOG_PATH

    # Transport: stdio (default) or http
    transport: str = "stdio"
    host: str = "127.0.0.1"
    port: int = 8909


def _load_options_json(path: str) -> dict[str, Any]:
    if not path:
        return {}
    try:
        with open(path, "r", encoding="utf-8") as fh:
            return json.load(fh) or {}
    except Exception:
        logger.warning("Could not read options file %s", path)
        return {}


def _build_config(overrides: Optional[dict[str, Any]] = None) -> LightbulbConfig:
    """Defaults < options JSON (LIGHTBULB_OPTIONS) < LIGHTBULB_* env < overrides."""
    opts = _load_options_json(os.environ.get("LIGHTBULB_OPTIONS", "").strip())

    def pick(key: str, default: Any) -> Any:
        if overrides and overrides.get(key) is not None:
            return overrides[key]
        env = os.environ.get(f"LIGHTBULB_{key.upper()}", "").strip()
        if env:
            return env
        value = opts.get(key)
        return default if value is None else value

    log_level = str(pick("log_level", "info") or "info").strip().lower()
    activity_log_path = str(pick("activity_log_path", DEFAULT_LOG_PATH) or DEFAULT_LOG_PATH)

    transport = str(pick("transport", "stdio") or "stdio").strip().lower()
    if transport not in TRANSPORTS:
        raise ValueError(f"Unknown transport: {transport}")

    host = str(pick("host", "127.0.0.1"))
    port = int(pick("port", 8909))

    return LightbulbConfig(
        log_level=log_level,
        activity_log_path=activity_log_path,
        transport=transport,
        host=host,
        port=max(1, min(port, 65535)),
    )


def _setup_logging(level: str) -> None:
    # Handlers write to stderr; stdout carries the stdio JSON-RPC stream.
    lvl = logging.INFO
    if level in ("trace", "debug"):
        lvl = logging.DEBUG
    elif level == "info":
        lvl = logging.INFO
    elif level in ("warn", "warning"):
        lvl = logging.WARNING
    elif level == "error":
        lvl = logging.ERROR

    logging.basicConfig(
        level=lvl,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # Reduce noise unless debugging.
    logging.getLogger("werkzeug").setLevel(lvl)
    logging.getLogger("waitress").setLevel(lvl)
    logging.getLogger("mcp").setLevel(lvl)


def create_app(
    service: Optional[LightbulbService] = None,
    cfg: Optional[LightbulbConfig] = None,
) -> Flask:
    cfg = cfg or _build_config()
    service = service or LightbulbService.with_file_log(cfg.activity_log_path)

    app = Flask(__name__)

    # Attach config and the single bulb service to the app (simple, explicit)
    app.config["LIGHTBULB_CFG"] = cfg
    app.config["LIGHTBULB_SERVICE"] = service

    app.register_blueprint(mcp_bp)

    @app.get("/")
    def index():
        return (
            "Lightbulb MCP Server\n"
            "Endpoints: /health, /version, /mcp\n"
            "Tools: get_lightbulb_status, turn_on_lightbulb, turn_off_lightbulb\n"
        )

    @app.get("/health")
    def health():
        return jsonify({"ok": True, "time": _now_iso(), "port": cfg.port})

    @app.get("/version")
    def version():
        return jsonify({"version": cfg.version, "time": _now_iso()})

    return app
