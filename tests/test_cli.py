import io
import json
import tempfile
import unittest
from contextlib import redirect_stderr, redirect_stdout
from pathlib import Path

import main as cli


class CliTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.tmpdir = Path(self._tmp.name)

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def _vocabulary(self, *words: str) -> Path:
        path = self.tmpdir / "vocabulary.csv"
        lines = ["word,hint"] + [f"{word},hint for {word}" for word in words]
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path

    def _run(self, *args: str):
        stdout = io.StringIO()
        stderr = io.StringIO()
        with redirect_stdout(stdout), redirect_stderr(stderr):
            code = cli.main([*args, "--log-level", "ERROR"])
        return code, stdout.getvalue(), stderr.getvalue()

    def test_successful_run_writes_output(self) -> None:
        output = self.tmpdir / "board.json"
        code, stdout, _ = self._run(
            "--file", str(self._vocabulary("cat", "car")), "--width", "9", "--output", str(output)
        )
        self.assertEqual(code, cli.EXIT_OK)
        self.assertIn("Words", stdout)
        payload = json.loads(output.read_text(encoding="utf-8"))
        self.assertEqual(payload["outcome"], "COMPLETED")
        self.assertEqual(payload["words"], ["cat", "car"])
        self.assertEqual(payload["board"]["word_count"], 2)

    def test_partial_board_exits_nonzero(self) -> None:
        store_dir = self.tmpdir / "boards"
        code, _, _ = self._run(
            "--file", str(self._vocabulary("cat", "dog")), "--width", "5",
            "--store-dir", str(store_dir),
        )
        self.assertEqual(code, cli.EXIT_PARTIAL)
        self.assertEqual(len(list(store_dir.glob("*.json"))), 1)

    def test_optimal_size_without_width(self) -> None:
        code, _, _ = self._run("--file", str(self._vocabulary("cat", "car")), "--optimal")
        self.assertEqual(code, cli.EXIT_OK)

    def test_missing_vocabulary_is_configuration_error(self) -> None:
        code, _, stderr = self._run("--file", str(self.tmpdir / "missing.csv"), "--width", "9")
        self.assertEqual(code, cli.EXIT_CONFIG)
        self.assertIn("error:", stderr)

    def test_width_or_sizing_mode_required(self) -> None:
        with self.assertRaises(SystemExit):
            self._run("--file", str(self._vocabulary("cat", "car")))


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
