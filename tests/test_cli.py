"""Tests for the command line interface."""

import pytest
from click.testing import CliRunner
from PIL import Image

from memepen import cli


@pytest.fixture
def runner(service, monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(cli, "build_service", lambda cfg: service)
    return CliRunner()


class TestCli:
    """Test suite for the memepen command."""

    def test_templates_lists_builtins(self, runner):
        result = runner.invoke(cli.main, ["templates"])
        assert result.exit_code == 0
        assert "yall-got-any-more-of-them" in result.output
        assert "two-buttons" in result.output
        assert "3 field(s), 500x756" in result.output

    def test_render_writes_png(self, runner, tmp_path):
        output = tmp_path / "out.png"
        result = runner.invoke(
            cli.main, ["render", "yall-got-any-more-of-them", "TOP", "BOTTOM", "-o", str(output)]
        )

        assert result.exit_code == 0, result.output
        assert "Meme saved to" in result.output
        assert Image.open(output).size == (600, 471)

    def test_render_default_output_name(self, runner, tmp_path):
        result = runner.invoke(cli.main, ["render", "two-buttons", "A", "B", "C"])
        assert result.exit_code == 0, result.output
        assert (tmp_path / "two-buttons.png").exists()

    def test_render_wrong_text_count_fails(self, runner, tmp_path):
        result = runner.invoke(cli.main, ["render", "yall-got-any-more-of-them", "ONLY"])
        assert result.exit_code == 1
        assert not (tmp_path / "yall-got-any-more-of-them.png").exists()

    def test_render_unknown_template_fails(self, runner):
        result = runner.invoke(cli.main, ["render", "not-real", "A"])
        assert result.exit_code == 1

    def test_create_prints_url(self, runner, service):
        result = runner.invoke(cli.main, ["create", "yall-got-any-more-of-them", "TOP", "BOTTOM"])
        assert result.exit_code == 0, result.output
        meme = service.memes.list()[0]
        assert f"http://memes.test/memes/{meme.id}.png" in result.output

    def test_invalid_config_fails(self, monkeypatch, tmp_path):
        config = tmp_path / "memepen.toml"
        config.write_text('[storage]\nuploader = "http"\n')
        result = CliRunner().invoke(cli.main, ["--config", str(config), "templates"])
        assert result.exit_code == 1
