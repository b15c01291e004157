import io
import json
import tempfile
import unittest
from contextlib import redirect_stdout
from pathlib import Path

from main import main


class CliTests(unittest.TestCase):
    def test_writes_svg_and_json(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            words = Path(tmpdir) / "animals.txt"
            words.write_text("cat\n# pets\ndog\n", encoding="utf-8")
            dump = Path(tmpdir) / "puzzle.json"

            image = Path(tmpdir) / "animals.svg"

            code = main(
                ["-f", str(words), "-o", str(image), "-c", "10", "-r", "10", "--seed", "3", "--json", str(dump)]
            )

            self.assertEqual(code, 0)
            svg = image.read_text(encoding="utf-8")
            self.assertIn(">cat</text>", svg)
            payload = json.loads(dump.read_text(encoding="utf-8"))
            self.assertEqual(payload["words"], ["cat", "dog"])
            self.assertEqual(len(payload["grid"]), 10)
            self.assertTrue(all(len(row) == 10 for row in payload["grid"]))
            self.assertEqual(sorted(p["word"] for p in payload["placements"]), ["CAT", "DOG"])
            self.assertEqual(payload["seed"], 3)

    def test_print_shows_grid_and_stats(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            words = Path(tmpdir) / "words.txt"
            words.write_text("sun\n", encoding="utf-8")
            stream = io.StringIO()
            with redirect_stdout(stream):
                code = main(["-f", str(words), "-c", "6", "-r", "5", "--seed", "1", "--print"])

        self.assertEqual(code, 0)
        output = stream.getvalue()
        self.assertIn("Size:          5 x 6 (30 cells)", output)
        self.assertIn("Placed:        1", output)
        self.assertIn("--- Validation ---\n  OK", output)
        self.assertIn("Seed: 1", output)

    def test_defaults_to_png_beside_wordlist(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            words = Path(tmpdir) / "fruit.txt"
            words.write_text("kiwi\nfig\n", encoding="utf-8")

            self.assertEqual(main(["-f", str(words), "-c", "8", "-r", "8", "--seed", "2"]), 0)
            self.assertEqual((Path(tmpdir) / "fruit.png").read_bytes()[:4], b"\x89PNG")

    def test_unwritable_image_exits_nonzero(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            words = Path(tmpdir) / "words.txt"
            words.write_text("sun\n", encoding="utf-8")
            image = Path(tmpdir) / "no_such_dir" / "puzzle.svg"
            self.assertEqual(main(["-f", str(words), "-o", str(image), "--seed", "1"]), 1)

    def test_unwritable_json_exits_nonzero(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            words = Path(tmpdir) / "words.txt"
            words.write_text("sun\n", encoding="utf-8")
            image = Path(tmpdir) / "puzzle.svg"
            dump = Path(tmpdir) / "no_such_dir" / "puzzle.json"
            code = main(["-f", str(words), "-o", str(image), "--seed", "1", "--json", str(dump)])
            self.assertEqual(code, 1)
            self.assertTrue(image.exists())

    def test_missing_wordlist_exits_nonzero(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            self.assertEqual(main(["-f", str(Path(tmpdir) / "missing.txt")]), 1)

    def test_rejects_non_positive_columns(self) -> None:
        with self.assertRaises(SystemExit):
            main(["-c", "0"])


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
