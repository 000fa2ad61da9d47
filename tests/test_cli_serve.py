"""
Tests for the server entrypoint.
"""

from unittest.mock import Mock, patch

from pathcomplete import cli_serve


class TestCliServe:
    """Test cases for cli_serve.main."""

    def test_runs_uvicorn_with_settings(self):
        settings = Mock(host="0.0.0.0", port=9000, reload=False)
        with (
            patch.object(cli_serve, "settings", settings),
            patch.object(cli_serve.uvicorn, "run") as mock_run,
        ):
            code = cli_serve.main([])

        assert code == 0
        mock_run.assert_called_once_with(
            "pathcomplete.main:app", host="0.0.0.0", port=9000, reload=False
        )
