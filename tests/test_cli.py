import io
import tempfile
import unittest
from contextlib import redirect_stdout
from pathlib import Path

from altdisks.cli import main


def run_cli(*argv: str) -> tuple[int, str]:
    buffer = io.StringIO()
    with redirect_stdout(buffer):
        code = main(list(argv))
    return code, buffer.getvalue()


class TestCli(unittest.TestCase):
    def test_runs_both_algorithms(self):
        code, output = run_cli("2")
        self.assertEqual(code, 0)
        self.assertIn("lawnmower: 4 disks, 3 swaps", output)
        self.assertIn("alternate: 4 disks, 3 swaps", output)
        self.assertIn("  before: D L D L", output)
        self.assertIn("  after:  L L D D", output)

    def test_single_algorithm_quiet(self):
        code, output = run_cli("4", "--algorithm", "alternate", "--quiet")
        self.assertEqual(code, 0)
        self.assertEqual(output, "alternate: 8 disks, 10 swaps\n")

    def test_config_file_and_override(self):
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.yaml"
            config_path.write_text("light_count: 3\nshow_rows: false\n", encoding="utf-8")

            code, output = run_cli("--config", str(config_path), "-a", "lawnmower")
            self.assertEqual(code, 0)
            self.assertEqual(output, "lawnmower: 6 disks, 6 swaps\n")

            code, output = run_cli("5", "--config", str(config_path), "-a", "lawnmower")
            self.assertEqual(output, "lawnmower: 10 disks, 15 swaps\n")
            self.assertEqual(code, 0)

    def test_zero_disks_is_an_error(self):
        code, output = run_cli("0")
        self.assertEqual(code, 1)
        self.assertTrue(output.startswith("Error: "))

    def test_unknown_algorithm_is_a_usage_error(self):
        with redirect_stdout(io.StringIO()), self.assertRaises(SystemExit) as ctx:
            main(["2", "--algorithm", "bubble"])
        self.assertEqual(ctx.exception.code, 2)

    def test_row_argument_sorts_given_layout(self):
        with self.assertLogs("altdisks.algorithms", level="WARNING"):
            code, output = run_cli("--row", "D D L L", "-a", "lawnmower")
        self.assertEqual(code, 0)
        self.assertIn("lawnmower: 4 disks, 4 swaps", output)
        self.assertIn("  before: D D L L", output)
        self.assertIn("  after:  L L D D", output)

    def test_strict_rejects_non_alternating_row(self):
        code, output = run_cli("--row", "L D L D", "--strict")
        self.assertEqual(code, 1)
        self.assertTrue(output.startswith("Error: "))
        self.assertIn("not in alternating layout", output)

    def test_unsorted_result_sets_exit_code(self):
        with self.assertLogs("altdisks", level="WARNING") as logs:
            code, output = run_cli("--row", "D D D L", "-a", "lawnmower", "-q")
        self.assertEqual(code, 1)
        self.assertEqual(output, "lawnmower: 4 disks, 3 swaps\n")
        self.assertTrue(any("did not produce a sorted row" in line for line in logs.output))

    def test_wrongly_typed_config_value_is_an_error(self):
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.yaml"
            config_path.write_text("light_count: \"3\"\n", encoding="utf-8")
            code, output = run_cli("--config", str(config_path))
        self.assertEqual(code, 1)
        self.assertIn("light_count must be an integer", output)


if __name__ == "__main__":
    unittest.main()
