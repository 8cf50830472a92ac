# tests/test_cli.py
"""
Tests for the ``interval`` command line: output of each command and the
exit codes.
"""

import io

import pytest

from interval_algebra import __version__
from interval_notation.main import EXIT_ERROR, EXIT_INFRA, EXIT_OK, main


def run(*argv):
    """Run the CLI and return (exit code, output lines)."""
    stream = io.StringIO()
    code = main(list(argv), stream=stream)
    return code, stream.getvalue().splitlines()


class TestParseCommand:

    def test_parse_prints_canonical_form(self):
        assert run("parse", "5±2.5", "∅") == (EXIT_OK, ["[2.5, 7.5]", "(0, 0)"])

    def test_simplify(self):
        assert run("--simplify", "parse", "[5, ∞)", "∅") == (EXIT_OK, ["≥5", "∅"])

    def test_endpoint_format(self):
        assert run("--endpoint-format", ".1f", "parse", "[1, 2]") == (EXIT_OK, ["[1.0, 2.0]"])

    def test_bad_input_is_reported_and_others_still_print(self, caplog):
        code, lines = run("parse", "[3, 10] ", "7")
        assert code == EXIT_ERROR
        assert lines == ["[7, 7]"]
        assert "characters left over" in caplog.text

    def test_writes_to_stdout_by_default(self, capsys):
        assert main(["parse", "1"]) == EXIT_OK
        assert capsys.readouterr().out == "[1, 1]\n"


class TestAlgebraCommands:

    def test_classify(self):
        assert run("classify", "[0, 10)", "[5, 15)") == (
            EXIT_OK,
            ["Intersecting(A_OVERLAPS_LOWER_B)"],
        )

    def test_union_and_intersection(self):
        assert run("union", "[0, 10)", "[5, 15)") == (EXIT_OK, ["[0, 15)"])
        assert run("intersection", "[0, 10)", "[5, 15)") == (EXIT_OK, ["[5, 10)"])

    def test_difference(self):
        assert run("difference", "[1, 10]", "1") == (EXIT_OK, ["(1, 10]"])

    def test_symmetric_difference(self):
        assert run("symmetric-difference", "[0, 10)", "[5, 15)") == (
            EXIT_OK,
            ["[0, 5)", "[10, 15)"],
        )

    def test_complement(self):
        assert run("complement", "(-∞, 5)") == (EXIT_OK, ["[5, ∞)"])
        assert run("complement", "[2, 3]", "--within", "[0, 10]") == (
            EXIT_OK,
            ["[0, 2)", "(3, 10]"],
        )

    def test_partition(self):
        assert run("partition", "[0, 10]", "4") == (EXIT_OK, ["[0, 4)", "[4, 4]", "(4, 10]"])

    def test_partition_outside(self):
        assert run("partition", "[0, 10]", "40") == (EXIT_ERROR, [])

    def test_contains(self):
        assert run("contains", "[0, 10)", "5") == (EXIT_OK, ["yes"])
        assert run("contains", "[0, 10)", "10") == (EXIT_OK, ["no"])
        assert run("contains", "[0, ∞)", "∞") == (EXIT_OK, ["no"])


class TestExitCodes:

    def test_invalid_operand(self):
        assert run("union", "[0, 10)", "nope")[0] == EXIT_ERROR

    def test_invalid_point(self):
        assert run("contains", "[0, 10)", "five")[0] == EXIT_ERROR

    def test_no_command(self, capsys):
        assert main([]) == EXIT_INFRA

    def test_invalid_formatting_options(self):
        assert run("--decimal-separator", "±", "parse", "1")[0] == EXIT_INFRA
        assert run("--endpoint-format", "zz", "parse", "1")[0] == EXIT_INFRA

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as info:
            main(["--version"])
        assert info.value.code == 0
        assert __version__ in capsys.readouterr().out
