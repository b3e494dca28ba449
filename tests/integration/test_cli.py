import io
from pathlib import Path

import pytest

from identicon import identicon_bytes
from identicon.cli import main
from identicon.config import (
    LOG_LEVEL_ENV,
    OUTPUT_DIR_ENV,
    default_output_path,
    resolve_cli_config,
)
from identicon.hashing import get_hash_fn


def test_cli_writes_default_name(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["alice", "--output-dir", str(tmp_path)]) == 0
    written = tmp_path / "alice.png"
    assert written.read_bytes() == identicon_bytes("alice")
    assert capsys.readouterr().out.strip() == str(written)


def test_cli_explicit_output_and_hash(tmp_path: Path) -> None:
    destination = tmp_path / "out.png"
    assert main(["alice", "-o", str(destination), "--hash", "blake2s"]) == 0
    assert destination.read_bytes() == identicon_bytes(
        "alice", hash_fn=get_hash_fn("blake2s")
    )


def test_cli_reads_stdin(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO("bob\n"))
    assert main(["-", "--output-dir", str(tmp_path)]) == 0
    assert (tmp_path / "bob.png").exists()


def test_cli_output_dir_from_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(OUTPUT_DIR_ENV, str(tmp_path))
    assert main(["carol"]) == 0
    assert (tmp_path / "carol.png").exists()


def test_cli_write_failure(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    destination = tmp_path / "missing" / "alice.png"
    assert main(["alice", "-o", str(destination)]) == 1
    assert "identicon:" in capsys.readouterr().err


def test_cli_rejects_unknown_hash() -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["alice", "--hash", "sha1"])
    assert excinfo.value.code == 2


def test_resolve_cli_config_precedence() -> None:
    env = {OUTPUT_DIR_ENV: "/env/dir", LOG_LEVEL_ENV: "debug"}
    config = resolve_cli_config("alice", environ=env)
    assert config.output == Path("/env/dir/alice.png")
    assert config.log_level == "DEBUG"

    config = resolve_cli_config(
        "alice", output_dir="/arg/dir", log_level="info", environ=env
    )
    assert config.output == Path("/arg/dir/alice.png")
    assert config.log_level == "INFO"

    config = resolve_cli_config("alice", output="x.png", environ={})
    assert config.output == Path("x.png")
    assert config.log_level == "WARNING"


def test_default_output_path() -> None:
    assert default_output_path("alice", None) == Path("alice.png")
    assert default_output_path("alice", "avatars", "bmp") == Path("avatars/alice.bmp")


@pytest.mark.parametrize(
    "args",
    [
        ["alice", "--format", "nope"],
        ["alice", "--log-level", "verbose"],
    ],
)
def test_cli_rejects_invalid_options(
    args: list[str], tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(args + ["--output-dir", str(tmp_path)])
    assert excinfo.value.code == 2
    assert "invalid choice" in capsys.readouterr().err
    assert list(tmp_path.iterdir()) == []


def test_cli_format_is_case_insensitive(tmp_path: Path) -> None:
    assert main(["alice", "--output-dir", str(tmp_path), "--format", "bmp"]) == 0
    assert (tmp_path / "alice.bmp").read_bytes().startswith(b"BM")


def test_cli_log_level_is_case_insensitive(tmp_path: Path) -> None:
    assert main(["alice", "--output-dir", str(tmp_path), "--log-level", "debug"]) == 0


def test_cli_rejects_unknown_log_level_from_env(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv(LOG_LEVEL_ENV, "verbose")
    with pytest.raises(SystemExit) as excinfo:
        main(["alice", "--output-dir", str(tmp_path)])
    assert excinfo.value.code == 2


@pytest.mark.parametrize("text", ["", "a/b"])
def test_cli_requires_output_for_unsafe_names(
    text: str, tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main([text, "--output-dir", str(tmp_path)])
    assert excinfo.value.code == 2
    assert "explicit output path" in capsys.readouterr().err
    assert list(tmp_path.iterdir()) == []


def test_cli_empty_input_with_explicit_output(tmp_path: Path) -> None:
    destination = tmp_path / "empty.png"
    assert main(["", "-o", str(destination)]) == 0
    assert destination.read_bytes() == identicon_bytes("")


@pytest.mark.parametrize("text", ["", "a/b", "/etc/passwd"])
def test_default_output_path_rejects_unsafe_names(text: str) -> None:
    with pytest.raises(ValueError):
        default_output_path(text, None)


def test_resolve_cli_config_rejects_unknown_log_level() -> None:
    with pytest.raises(ValueError, match="Unknown log level"):
        resolve_cli_config("alice", environ={LOG_LEVEL_ENV: "verbose"})
