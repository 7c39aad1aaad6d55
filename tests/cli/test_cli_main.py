from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from hashcodec.cli.main import EXIT_CONFIG, EXIT_EMPTY, EXIT_OK, main, parse_args
from hashcodec.utils.logging import LOGGER_NAME


@pytest.fixture(autouse=True)
def _restore_logger():
    logger = logging.getLogger(LOGGER_NAME)
    handlers, level, propagate = list(logger.handlers), logger.level, logger.propagate
    yield
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
    for handler in handlers:
        logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = propagate


def _run(capsys: pytest.CaptureFixture[str], *argv: str) -> tuple[int, str]:
    code = main(["-nl", *argv])
    return code, capsys.readouterr().out.strip()


def test_parse_args_defaults() -> None:
    args = parse_args(["encode", "1"])

    assert args.salt == ""
    assert args.min_length == 0
    assert args.prefix is None
    assert args.prefix_separator == "-"
    assert args.config is None
    assert args.numbers == ["1"]


def test_encode_and_decode(capsys: pytest.CaptureFixture[str]) -> None:
    assert _run(capsys, "encode", "1", "2", "3") == (EXIT_OK, "o2fXhV")
    assert _run(capsys, "decode", "o2fXhV") == (EXIT_OK, "1 2 3")
    assert _run(capsys, "decode", "--first", "o2fXhV") == (EXIT_OK, "1")


def test_codec_options(capsys: pytest.CaptureFixture[str]) -> None:
    assert _run(capsys, "--salt", "main salt", "--min-length", "10", "encode", "5", "10") == (
        EXIT_OK,
        "1XMloHLYjw",
    )
    assert _run(capsys, "-s", "this is my salt", "-p", "inv", "-ps", "_", "encode", "42", "7") == (
        EXIT_OK,
        "inv_rkUE",
    )


def test_hex_commands(capsys: pytest.CaptureFixture[str]) -> None:
    assert _run(capsys, "encode-hex", "deadbeef") == (EXIT_OK, "wpVL4j9g")
    assert _run(capsys, "decode-hex", "wpVL4j9g") == (EXIT_OK, "deadbeef")


def test_invalid_input_exits_with_empty_status(capsys: pytest.CaptureFixture[str]) -> None:
    assert _run(capsys, "decode", "not-valid") == (EXIT_EMPTY, "")
    assert _run(capsys, "encode-hex", "xyz") == (EXIT_EMPTY, "")
    assert _run(capsys, "-p", "usr", "encode", "1.5") == (EXIT_EMPTY, "usr-")


def test_invalid_alphabet_exits_with_config_status(capsys: pytest.CaptureFixture[str]) -> None:
    code = main(["-nl", "--alphabet", "abc", "encode", "1"])

    assert code == EXIT_CONFIG
    assert "at least 10 unique" in capsys.readouterr().err


def test_config_file_connections(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    config_path = tmp_path / "hashids.json"
    config_path.write_text(
        json.dumps(
            {
                "default": "main",
                "connections": {
                    "main": {"salt": "main salt", "min_length": 10},
                    "alternative": {"salt": "other"},
                },
            }
        ),
        encoding="utf-8",
    )

    assert _run(capsys, "--config", str(config_path), "encode", "5", "10") == (EXIT_OK, "1XMloHLYjw")
    assert _run(capsys, "-c", str(config_path), "-n", "alternative", "encode", "5", "10") == (EXIT_OK, "yKhK")


def test_unknown_connection_exits_with_config_status(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    config_path = tmp_path / "hashids.json"
    config_path.write_text(json.dumps({"connections": {"main": {}}}), encoding="utf-8")

    code = main(["-nl", "-c", str(config_path), "-n", "missing", "encode", "1"])

    assert code == EXIT_CONFIG
    assert "not configured" in capsys.readouterr().err


def test_log_file_receives_records(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    log_path = tmp_path / "hashcodec.log"

    code = main(["-nl", "--log-file", str(log_path), "--log-level", "DEBUG", "decode", "not-valid"])
    capsys.readouterr()
    logging.getLogger(LOGGER_NAME).handlers[0].flush()

    assert code == EXIT_EMPTY
    assert "decode produced no output" in log_path.read_text(encoding="utf-8")
