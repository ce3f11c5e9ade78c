"""CLI tests using click's runner."""

import pytest
from click.testing import CliRunner
from loguru import logger

from cli.config import default_output_file, get_log_level, split_excludes
from cli.main import cli

GO_MOD = "module example.com/demo\n\ngo 1.21\n\nrequire github.com/pkg/errors v0.9.1\n"
MAIN_GO = "package main\n\nfunc main() {\n\tx := 1\n\t_ = x\n}\n"


@pytest.fixture(autouse=True)
def _drop_log_handlers():
    yield
    # The runner's captured stderr is closed once an invocation returns.
    logger.remove()


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def project(tmp_path):
    root = tmp_path / "demo"
    root.mkdir()
    (root / "go.mod").write_text(GO_MOD)
    (root / "main.go").write_text(MAIN_GO)
    return root


def test_bundle_writes_output(runner, project, tmp_path):
    out = tmp_path / "out.txt"
    result = runner.invoke(cli, ["bundle", str(project), "--out", str(out), "--meta", "--minify", "2"])

    assert result.exit_code == 0, result.output
    assert "✅ AI-friendly Go project bundle created" in result.output
    assert out.read_text(encoding="utf-8") == (
        '{"d":["github.com/pkg/errors@v0.9.1"],"s":{"main":["main.go"]}}\n'
        "###FILE:main.go###\npackage main;func main(){x:=1;_=x;}\n\n"
    )


def test_bundle_default_output_name(runner, tmp_path, monkeypatch):
    root = tmp_path / "my project"
    root.mkdir()
    (root / "go.mod").write_text(GO_MOD)
    (root / "main.go").write_text(MAIN_GO)
    monkeypatch.chdir(tmp_path)

    result = runner.invoke(cli, ["bundle", str(root)])

    assert result.exit_code == 0, result.output
    assert (tmp_path / "my_project_bundle.txt").exists()


def test_bundle_without_manifest_fails(runner, project, tmp_path):
    (project / "go.mod").unlink()
    out = tmp_path / "out.txt"

    result = runner.invoke(cli, ["bundle", str(project), "--out", str(out)])

    assert result.exit_code == 1
    assert "❌ Bundling failed" in result.output
    assert not out.exists()


def test_bundle_parse_error_fails(runner, project, tmp_path):
    (project / "broken.go").write_text("package main\nfunc {\n")
    out = tmp_path / "out.txt"

    result = runner.invoke(cli, ["bundle", str(project), "--out", str(out)])

    assert result.exit_code == 1
    assert "broken.go" in result.output
    assert not out.exists()


def test_bundle_keep_going(runner, project, tmp_path):
    (project / "broken.go").write_text("package main\nfunc {\n")
    out = tmp_path / "out.txt"

    result = runner.invoke(cli, ["bundle", str(project), "--out", str(out), "--keep-going"])

    assert result.exit_code == 0, result.output
    assert "Skipped 1 file(s)" in result.output
    assert "###FILE:broken.go###" not in out.read_text(encoding="utf-8")


def test_minify_level_from_environment(runner, tmp_path):
    source = tmp_path / "vars.go"
    source.write_text("package main\n\nvar x = 1\nvar y = 2\n")

    result = runner.invoke(cli, ["minify", str(source)], env={"GOBUNDLE_MINIFY_LEVEL": "2"})

    assert result.exit_code == 0, result.output
    assert result.output == "package main;var(x=1;y=2;)\n"


def test_minify_command(runner, tmp_path):
    source = tmp_path / "main.go"
    source.write_text(MAIN_GO)

    result = runner.invoke(cli, ["minify", str(source)])

    assert result.exit_code == 0, result.output
    assert result.output == "package main;func main(){x:=1;_=x;}\n"


def test_invalid_level_is_rejected(runner, project):
    result = runner.invoke(cli, ["bundle", str(project), "--minify", "4"])

    assert result.exit_code == 2


def test_split_excludes():
    assert split_excludes("vendor, testdata,,internal/gen ") == ["vendor", "testdata", "internal/gen"]


def test_default_output_file_sanitizes(tmp_path):
    assert default_output_file(tmp_path / "my.proj v2").name == "my_proj_v2_bundle.txt"


def test_log_level(monkeypatch):
    monkeypatch.delenv("GOBUNDLE_LOG_LEVEL", raising=False)
    assert get_log_level() == "WARNING"
    assert get_log_level(verbose=True) == "DEBUG"
    monkeypatch.setenv("GOBUNDLE_LOG_LEVEL", "info")
    assert get_log_level() == "INFO"


def test_bundle_reports_configured_output(runner, project, tmp_path):
    out = tmp_path / "nested" / "bundle.txt"

    result = runner.invoke(cli, ["bundle", str(project), "--out", str(out)])

    assert result.exit_code == 0, result.output
    assert f"bundle created: {out}" in result.output
    assert out.read_text(encoding="utf-8").startswith('{"d":["github.com/pkg/errors@v0.9.1"]}\n')
