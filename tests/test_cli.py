"""Tests for the token dump command line."""

from pathlib import Path

import pytest

from scriptlex.cli import format_token, main
from scriptlex.tokens import Token, TokenType


@pytest.fixture
def script(tmp_path: Path) -> Path:
    path = tmp_path / "main.agent"
    path.write_text("topic:\n   body\n", encoding="utf-8")
    return path


def test_format_token() -> None:
    token = Token(TokenType.INDENT, "\n", 3, 7, 12, 13)
    assert format_token(token) == "Line    3: INDENT '\\n' @ 12..13"


def test_dumps_layout_tokens(script: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main([str(script)]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert [line.split()[2] for line in lines] == ["CONTENT", "INDENT", "CONTENT", "DEDENT", "EOF"]
    assert lines[0] == "Line    1: CONTENT 'topic:' @ 0..6"


def test_instructions_mode(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = tmp_path / "prompt.txt"
    path.write_text("say {!name}", encoding="utf-8")
    assert main([str(path), "--instructions"]) == 0
    kinds = [line.split()[2] for line in capsys.readouterr().out.splitlines()]
    assert kinds == ["INSTRUCTION_TEXT_SEGMENT", "INTERPOLATION_START", "INSTRUCTION_TEXT_SEGMENT", "EOF"]


def test_state_printed(script: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main([str(script), "--state"]) == 0
    assert capsys.readouterr().out.splitlines()[-1] == "State: 0101ffff0000"


def test_line_filter(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = tmp_path / "long.agent"
    path.write_text("".join(f"line{n}\n" for n in range(1, 31)), encoding="utf-8")
    assert main([str(path), "--line", "20"]) == 0
    linenos = {int(line.split()[1].rstrip(":")) for line in capsys.readouterr().out.splitlines()}
    assert min(linenos) == 15
    assert max(linenos) == 25


def test_missing_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main([str(tmp_path / "absent.agent")]) == 1
    assert "cannot read" in capsys.readouterr().err


def test_undecodable_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = tmp_path / "latin1.agent"
    path.write_bytes(b"topic caf\xe9:\n   x\n")
    assert main([str(path)]) == 1
    captured = capsys.readouterr()
    assert "cannot read" in captured.err
    assert captured.out == ""
