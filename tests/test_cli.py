"""
Tests for the primevue-mcp command line.
"""

import json
from unittest.mock import patch

import pytest

from primevue_mcp.cli import build_parser, main


@pytest.fixture
def cli_env(temp_dir, monkeypatch):
    monkeypatch.setenv("PRIMEVUE_MCP_DATA_PATH", str(temp_dir / "data"))
    monkeypatch.delenv("PRIMEVUE_MCP_LOG_FILE", raising=False)
    return temp_dir


class TestParser:
    """Test argument parsing."""

    def test_command_required(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args([])

    def test_repeatable_theme_dirs(self):
        args = build_parser().parse_args(["extract-tokens", "--theme-dir", "a", "--theme-dir", "b"])
        assert args.theme_dir == ["a", "b"]


class TestBuild:
    """Test the full offline build."""

    def test_build_without_docs(self, cli_env, library_dir):
        themes = cli_env / "styles"
        themes.mkdir()
        (themes / "button.mjs").write_text("dt('button.border.radius')")
        data_dir = cli_env / "out"

        exit_code = main([
            "build", "--skip-docs",
            "--data-dir", str(data_dir),
            "--library-dir", str(library_dir),
            "--theme-dir", str(themes),
        ])

        assert exit_code == 0
        combined = json.loads((data_dir / "combined.json").read_text())
        assert list(combined) == ["button", "inputtext", "_tokens"]
        assert combined["button"]["logic"]["emits"] == ["click", "blur"]
        assert combined["_tokens"] == {"--p-button-border-radius": "dt('button.border.radius')"}
        assert not (data_dir / "docs.json").exists()

    def test_merge_alone(self, cli_env):
        data_dir = cli_env / "out"
        data_dir.mkdir()
        (data_dir / "api.json").write_text(json.dumps({"button": {"props": {}}}))

        assert main(["merge", "--data-dir", str(data_dir)]) == 0
        assert json.loads((data_dir / "combined.json").read_text()) == {"button": {"props": {}}}


class TestInitConfig:
    """Test writing the default config file."""

    def test_writes_config(self, cli_env):
        assert main(["init-config"]) == 0
        assert (cli_env / "data" / "config.yaml").exists()


class TestServe:
    """Test the serve command wiring."""

    def test_serve_configures_catalog(self, cli_env):
        from primevue_mcp.catalog import get_catalog, reset_catalog

        data_dir = cli_env / "out"
        try:
            with patch("primevue_mcp.controllers.http.run_server") as mock_run:
                assert main(["serve", "--data-dir", str(data_dir), "--port", "4100"]) == 0

            mock_run.assert_called_once_with(host=None, port=4100)
            assert get_catalog().path == data_dir.resolve() / "combined.json"
        finally:
            reset_catalog()
