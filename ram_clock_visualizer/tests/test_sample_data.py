import tempfile
import unittest
from pathlib import Path

from ram_clock_visualizer.analysis.pipeline import parse_directory
from ram_clock_visualizer.scripts.sample_data import SAMPLE_HEADER, create_sample_data, ensure_sample_data


class TestSampleData(unittest.TestCase):
    def test_files_and_layout(self):
        with tempfile.TemporaryDirectory() as d:
            root = Path(d) / "sample_data"
            written = create_sample_data(root)
            self.assertEqual([p.name for p in written], ["block_A.csv", "block_B.csv", "block_C.csv", "block_D.csv"])
            lines = written[0].read_text(encoding="utf-8").splitlines()
            self.assertEqual(lines[0], SAMPLE_HEADER)
            self.assertEqual(len(lines), 101)
            self.assertTrue(lines[1].startswith("0,"))

    def test_deterministic(self):
        with tempfile.TemporaryDirectory() as d:
            a = create_sample_data(Path(d) / "a", n_blocks=3, n_samples=20)
            b = create_sample_data(Path(d) / "b", n_blocks=3, n_samples=20)
            for pa, pb in zip(a, b):
                self.assertEqual(pa.read_text(encoding="utf-8"), pb.read_text(encoding="utf-8"))

    def test_labels_follow_base_rates(self):
        """Base rates step down by 50 MHz, far above the noise, so block_X gets label X."""
        with tempfile.TemporaryDirectory() as d:
            root = Path(d) / "s"
            create_sample_data(root)
            res = parse_directory(root)
            self.assertEqual(
                res.file_label_map,
                {"block_A.csv": "A", "block_B.csv": "B", "block_C.csv": "C", "block_D.csv": "D"},
            )
            self.assertAlmostEqual(res.get_block("A").stats.average, 1600.0, delta=5.0)
            self.assertEqual(res.get_block("D").n_samples, 100)

    def test_ensure_keeps_existing_directory(self):
        with tempfile.TemporaryDirectory() as d:
            root = Path(d)
            ensure_sample_data(root)
            self.assertEqual(list(root.iterdir()), [])
            fresh = root / "new"
            ensure_sample_data(fresh, n_blocks=2)
            self.assertEqual(sorted(p.name for p in fresh.iterdir()), ["block_A.csv", "block_B.csv"])

    def test_rejects_zero_blocks(self):
        with tempfile.TemporaryDirectory() as d:
            with self.assertRaises(ValueError):
                create_sample_data(Path(d) / "x", n_blocks=0)


if __name__ == "__main__":
    unittest.main()
