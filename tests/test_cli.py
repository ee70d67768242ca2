"""Tests for app.cli and commons.log."""

import logging
import os
import shlex
import sys

import pytest

from app import cli
from app.cli import AppConfig, build_orchestrator, main, parse_args
from app.extractors.subprocess_adapter import SubprocessExtractionAdapter
from commons.log import setup_logging, verbose_from_env


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def no_logging_setup(monkeypatch):
    calls = []
    monkeypatch.setattr(cli, "setup_logging", lambda verbose=False: calls.append(verbose))
    return calls


def test_parse_args_defaults(monkeypatch, tmp_path):
    monkeypatch.delenv("VERBOSE", raising=False)
    monkeypatch.delenv("EXTRACTOR_COMMAND", raising=False)
    monkeypatch.chdir(tmp_path)
    cfg = parse_args([])
    assert os.path.realpath(cfg.root) == os.path.realpath(tmp_path)
    assert cfg.verbose is False
    assert cfg.command == "npx @polka-codes/cli --silent"
    assert cfg.document_extension == ".pdf"


def test_parse_args_flags():
    cfg = parse_args(["/data/audits", "--verbose", "--command", "tool -q", "--extension", ".docx"])
    assert cfg.root == "/data/audits"
    assert cfg.verbose is True
    assert cfg.command == "tool -q"
    assert cfg.document_extension == ".docx"


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("VERBOSE", "1")
    monkeypatch.setenv("EXTRACTOR_COMMAND", "other-tool --silent")
    cfg = AppConfig()
    assert cfg.verbose is True
    assert cfg.command == "other-tool --silent"
    assert verbose_from_env() is True


def test_build_orchestrator_wires_components():
    orchestrator = build_orchestrator(AppConfig(root="/x", command="tool", document_extension=".PDF"))
    assert isinstance(orchestrator.runner.adapter, SubprocessExtractionAdapter)
    assert orchestrator.runner.adapter.command == "tool"
    assert orchestrator.discoverer.extension == ".pdf"
    assert orchestrator.gate is orchestrator.runner.gate


def test_build_orchestrator_unknown_kind():
    with pytest.raises(ValueError, match="Unknown extractor kind"):
        build_orchestrator(AppConfig(adapter_kind="carrier-pigeon"))


def test_main_missing_root_exits_1(tmp_path, no_logging_setup, caplog):
    with caplog.at_level(logging.ERROR, logger="app.cli"):
        code = main([str(tmp_path / "missing"), "--command", "unused"])
    assert code == 1
    assert any("Not a folder" in r.getMessage() for r in caplog.records)


def test_main_no_documents_exits_0(tmp_path, no_logging_setup):
    (tmp_path / "notes.txt").write_text("x", encoding="utf-8")
    assert main([str(tmp_path), "--command", "unused", "--verbose"]) == 0
    assert no_logging_setup == [True]


@pytest.mark.skipif(sys.platform == "win32", reason="uses POSIX shell quoting")
def test_main_end_to_end(make_tree, no_logging_setup):
    root = make_tree("a/ok.pdf", "b/bad.pdf", "node_modules/x/ignored.pdf")
    script = (
        "import sys; data = sys.stdin.read(); "
        "sys.exit(2) if 'bad.pdf' in data else sys.stdout.write('[]')"
    )
    command = f"{shlex.quote(sys.executable)} -c {shlex.quote(script)}"

    assert main([str(root), "--command", command]) == 0
    assert (root / "a" / "ok.json").read_text(encoding="utf-8") == "[]"
    assert not (root / "b" / "bad.json").exists()
    assert not (root / "node_modules" / "x" / "ignored.json").exists()


def test_setup_logging_splits_streams(restore_root_logger, capsys):
    setup_logging(verbose=False)
    log = logging.getLogger("audit.test")
    log.debug("hidden detail")
    log.info("progress line")
    log.warning("warn line")
    out, err = capsys.readouterr()
    assert "INFO progress line" in out
    assert "warn line" not in out
    assert "WARNING warn line" in err
    assert "hidden detail" not in out + err
    assert out.startswith("[")


def test_setup_logging_verbose_enables_debug(restore_root_logger, capsys):
    setup_logging(verbose=True)
    logging.getLogger("audit.test").debug("scan dir: /x")
    out, _ = capsys.readouterr()
    assert "DEBUG scan dir: /x" in out


@pytest.mark.parametrize("value", ["", "   "])
def test_parse_args_rejects_empty_extension(value, capsys):
    with pytest.raises(SystemExit) as excinfo:
        parse_args(["/data", "--extension", value])
    assert excinfo.value.code == 2
    assert "--extension must not be empty" in capsys.readouterr().err
