# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Tests for the r1cs_decode command-line tool.

Features tested:
- Dumping an R1CS file
- Dumping an assignments file
- Both files in one run
- Missing and malformed files are reported without stopping
"""

import subprocess
import sys
from pathlib import Path

from r1cs_decode import main


class TestDumpR1CS:
    """Feature: Print a constraint system."""

    def test_prints_constraints(self, r1cs_file, capsys):
        """Scenario: Dump a valid R1CS file."""
        assert main(["--r1cs", str(r1cs_file)]) == 0

        out = capsys.readouterr().out
        assert out.startswith(f"> {r1cs_file}\n")
        assert "Characteristic:    64513" in out
        assert "  (w_0 * 2) * (w_1) = -x_0 + w_0 + w_1" in out

    def test_short_option(self, r1cs_file, capsys):
        """Scenario: Use -r instead of --r1cs."""
        assert main(["-r", str(r1cs_file)]) == 0
        assert "Constraints:" in capsys.readouterr().out


class TestDumpAssignments:
    """Feature: Print a set of assignments."""

    def test_prints_values(self, assignments_file, capsys):
        """Scenario: Dump a valid assignments file."""
        assert main(["--assignments", str(assignments_file)]) == 0

        out = capsys.readouterr().out
        assert out.startswith(f"> {assignments_file}\n")
        assert "  Constant = 1\n" in out
        assert "  w_1 = 1\n" in out


class TestDumpBoth:
    """Feature: Print both files in one run."""

    def test_r1cs_then_assignments(self, r1cs_file, assignments_file, capsys):
        """Scenario: The constraint system is printed before the assignments."""
        assert main(["--r1cs", str(r1cs_file), "--assignments", str(assignments_file)]) == 0

        out = capsys.readouterr().out
        assert out.index("Constraints:") < out.index("Assignments:")

    def test_no_arguments(self, capsys):
        """Scenario: Nothing to do prints nothing."""
        assert main([]) == 0
        assert capsys.readouterr().out == ""


class TestErrors:
    """Feature: Errors are reported per file."""

    def test_missing_file(self, tmp_path, assignments_file, capsys):
        """Scenario: A missing R1CS file does not stop the assignments dump."""
        missing = tmp_path / "missing.r1cs"
        assert main(["--r1cs", str(missing), "--assignments", str(assignments_file)]) == 1

        out = capsys.readouterr().out
        assert f"Could not load {missing}:" in out
        assert "Assignments:" in out

    def test_malformed_file(self, tmp_path, r1cs_file, capsys):
        """Scenario: A file with the wrong magic is reported."""
        bogus = tmp_path / "bogus.assignments"
        bogus.write_bytes(b"NOPE\x00\x04")

        assert main(["--r1cs", str(r1cs_file), "--assignments", str(bogus)]) == 1

        out = capsys.readouterr().out
        assert "Constraints:" in out
        assert f"Could not load {bogus}: " in out
        assert "bad magic" in out

    def test_swapped_files(self, r1cs_file, capsys):
        """Scenario: An R1CS file passed as assignments is rejected."""
        assert main(["--assignments", str(r1cs_file)]) == 1
        assert "Could not load" in capsys.readouterr().out


class TestScript:
    """Feature: Run as a script."""

    def test_runs_as_script(self, r1cs_file):
        """Scenario: python r1cs_decode.py --r1cs FILE."""
        script = Path(__file__).parent.parent / "r1cs_decode.py"
        result = subprocess.run(
            [sys.executable, str(script), "--r1cs", str(r1cs_file)],
            cwd=script.parent,
            capture_output=True,
            text=True,
        )
        assert result.returncode == 0, result.stderr
        assert "(1 - w_0) * (w_0) = 0" in result.stdout
