import argparse
import logging
from types import SimpleNamespace

import pytest

from dns_probe.cli import _build_config_payload, _parse_positive_float, _setup_logging, build_parser
from dns_probe.errors import ConfigError


def test_parse_positive_float_accepts_numbers():
    assert _parse_positive_float("1.5", label="Timeout") == 1.5


def test_parse_positive_float_rejects_text():
    with pytest.raises(argparse.ArgumentTypeError, match="Timeout must be a number"):
        _parse_positive_float("soon", label="Timeout")


def test_parse_positive_float_rejects_zero():
    with pytest.raises(argparse.ArgumentTypeError, match="Timeout must be a positive number"):
        _parse_positive_float("0", label="Timeout")


def _args(**values):
    defaults = {
        "config": None,
        "server": None,
        "port": None,
        "record": None,
        "domain": None,
        "expected_output": None,
    }
    defaults.update(values)
    return SimpleNamespace(**defaults)


def test_build_config_payload_from_flags_only():
    payload = _build_config_payload(_args(server="1.1.1.1", domain="example.com"))

    assert payload == {"server": "1.1.1.1", "domain": "example.com"}


def test_server_flag_replaces_legacy_target(tmp_path):
    path = tmp_path / "check.json"
    path.write_text('{"target": "9.9.9.9", "domain": "example.com"}', encoding="utf-8")

    payload = _build_config_payload(_args(config=str(path), server="1.1.1.1"))

    assert payload == {"server": "1.1.1.1", "domain": "example.com"}


def test_empty_config_file_yields_flags(tmp_path):
    path = tmp_path / "check.yaml"
    path.write_text("", encoding="utf-8")

    assert _build_config_payload(_args(config=str(path), port=5353)) == {"port": 5353}


def test_non_mapping_config_file_is_rejected(tmp_path):
    path = tmp_path / "check.yaml"
    path.write_text("just text\n", encoding="utf-8")

    with pytest.raises(ConfigError, match="must contain a mapping"):
        _build_config_payload(_args(config=str(path)))


def test_parser_defaults():
    args = build_parser().parse_args([])

    assert args.timeout == 5.0
    assert args.output == "text"
    assert args.record is None
    assert args.verbose == 0


def test_parser_rejects_unknown_record():
    with pytest.raises(SystemExit):
        build_parser().parse_args(["--record", "SRV"])


@pytest.mark.parametrize(
    ("verbosity", "level"),
    [(0, logging.WARNING), (1, logging.INFO), (2, logging.DEBUG)],
)
def test_setup_logging_levels(monkeypatch, verbosity, level):
    captured = {}
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: captured.update(kwargs))

    _setup_logging(verbosity)

    assert captured["level"] == level
    assert captured["format"].startswith("%(asctime)sZ")
