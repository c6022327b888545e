"""Tests for the command-line entry point wiring."""

from unittest.mock import patch

import main
from lightbulb_core.app import LightbulbConfig


def test_default_runs_stdio_with_file_log(tmp_path):
    log_file = str(tmp_path / "bulb.log")
    with patch.object(main, "run_stdio") as run_stdio, patch.object(main, "serve") as serve:
        main.main(["--log-file", log_file])

    serve.assert_not_called()
    service, level = run_stdio.call_args.args
    assert service.activity_log.path == log_file
    assert level == "info"
    assert run_stdio.call_args.kwargs["version"] == LightbulbConfig().version


def test_http_transport_serves_flask_app(tmp_path):
    with patch.object(main, "run_stdio") as run_stdio, patch.object(main, "serve") as serve:
        main.main([
            "--transport", "http",
            "--port", "9911",
            "--log-file", str(tmp_path / "bulb.log"),
        ])

    run_stdio.assert_not_called()
    app = serve.call_args.args[0]
    assert serve.call_args.kwargs == {"host": "127.0.0.1", "port": 9911}
    assert "LIGHTBULB_SERVICE" in app.config
