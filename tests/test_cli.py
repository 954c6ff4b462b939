from __future__ import annotations

import os

import pytest

from mandate_extractor import cli


@pytest.fixture(autouse=True)
def _quiet_logging(monkeypatch):
    levels: list[str] = []
    monkeypatch.setattr(cli, "setup_logging", levels.append)
    return levels


def test_no_arguments_prints_help_and_fails(capsys) -> None:
    assert cli.main([]) == 1
    assert "PDF Last-Page Extractor" in capsys.readouterr().out


def test_help_exits_zero(capsys) -> None:
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["--help"])

    assert exc_info.value.code == 0
    out = capsys.readouterr().out
    assert "--concurrency" in out
    assert "_mandate_" in out


def test_flags_without_paths_fail(capsys) -> None:
    assert cli.main(["--concurrency=2"]) == 1
    assert "Error: No PDF files specified" in capsys.readouterr().err


def test_invalid_concurrency_is_usage_error(capsys) -> None:
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["--concurrency=0", "a.pdf"])

    assert exc_info.value.code == 2


def test_successful_run(multi_page_pdf, single_page_pdf, tmp_path, capsys, _quiet_logging) -> None:
    output_dir = tmp_path / "out"

    code = cli.main(
        [multi_page_pdf, single_page_pdf, "--concurrency=1", f"--output={output_dir}"]
    )

    assert code == 0
    out = capsys.readouterr().out
    assert "Processing 2 PDF(s) with concurrency=1" in out
    assert "[1/2] OK: sample-multi.pdf" in out
    assert "[2/2] OK: sample-single.pdf" in out
    assert "Completed: 2 succeeded, 0 failed" in out
    assert len(list(output_dir.glob("*_mandate_*.pdf"))) == 2
    assert _quiet_logging == ["WARNING"]


def test_failed_file_sets_exit_code(multi_page_pdf, tmp_path, capsys) -> None:
    missing = tmp_path / "missing.pdf"

    code = cli.main([multi_page_pdf, str(missing)])

    assert code == 1
    captured = capsys.readouterr()
    assert "FAILED: missing.pdf" in captured.out
    assert "Completed: 1 succeeded, 1 failed" in captured.out
    assert "Errors:" in captured.out
    assert f"  - missing.pdf: PDF file not found: {missing}" in captured.err


def test_fail_fast_reports_fatal_error(tmp_path, capsys) -> None:
    code = cli.main(["--fail-fast", str(tmp_path / "missing.pdf")])

    assert code == 1
    assert "Fatal error:" in capsys.readouterr().err


def test_relative_paths_are_resolved(multi_page_pdf, monkeypatch, capsys) -> None:
    monkeypatch.chdir(os.path.dirname(multi_page_pdf))

    assert cli.main(["sample-multi.pdf", "--log-level=DEBUG"]) == 0
    assert "[1/1] OK: sample-multi.pdf" in capsys.readouterr().out
