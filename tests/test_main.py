import json
import logging
import pytest

import main


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers = handlers
    root.setLevel(level)


def run(capsys, *argv):
    code = main.main(list(argv))
    return code, capsys.readouterr().out


def test_segment_defaults(capsys):
    code, out = run(capsys, "segment")
    assert code == 0
    data = json.loads(out)
    assert len(data["breakpoints"]) == 11
    assert data["breakpoints"][0] == pytest.approx([0.45 * 300 + 400, 0.328 * 300 + 300])
    assert "sample" not in data


def test_segment_custom_curve(capsys):
    code, out = run(
        capsys, "segment",
        "--point", "0", "0", "--point", "1", "0", "--point", "1", "1", "--point", "0", "1",
        "--segments", "4", "--epsilon", "1e-4", "--dt", "0.1", "--domain", "1",
        "--no-transform", "--include-sample",
    )
    assert code == 0
    data = json.loads(out)
    assert len(data["breakpoints"]) == 5
    assert len(data["sample"]) == 11
    assert data["breakpoints"][0] == [0.0, 0.0]


@pytest.mark.parametrize("argv", [
    ["segment", "--segments", "0"],
    ["segment", "--epsilon", "0"],
    ["segment", "--dt", "-1"],
    ["segment", "--point", "0", "0", "--point", "1", "1"],
])
def test_segment_reports_invalid_input(capsys, argv):
    code, out = run(capsys, *argv)
    assert code == 1
    assert out == ""


def test_missing_command(capsys):
    code, out = run(capsys)
    assert code == 2
    assert out == ""


def test_missing_command_logs_through_colorlog(capsys):
    main.main([])
    handlers = logging.getLogger().handlers
    assert len(handlers) == 1
    assert handlers[0].formatter is main.formatter
