import tempfile
import unittest
from pathlib import Path
from unittest import mock

from typer.testing import CliRunner

from labtrack import configuration
from labtrack.repository.configuration import ConfigurationRepository
from labtrack.repository.sample import SampleRepository
from labtrack.service.sample import create_concrete_sample
from labtrack.terminal import add, dashboard
from labtrack.terminal import sample as sample_commands
from labtrack.terminal.app import app

runner = CliRunner()
WIDE = {"COLUMNS": "200"}


class TerminalTest(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmp.cleanup)
        tmp_path = Path(self._tmp.name)
        self.tmp_path = tmp_path

        for name, path in [
            ("APP_CONFIG_PATH", tmp_path / "config.yaml"),
            ("DATA_SAMPLES_DIR", tmp_path / "samples"),
        ]:
            patcher = mock.patch.object(configuration, name, path)
            patcher.start()
            self.addCleanup(patcher.stop)

        self.config_repo = ConfigurationRepository()
        self.sample_repo = SampleRepository()
        for module in (add, dashboard, sample_commands):
            for name, value in [
                ("CONFIGURATION_REPO", self.config_repo),
                ("SAMPLE_REPO", self.sample_repo),
            ]:
                patcher = mock.patch.object(module, name, value)
                patcher.start()
                self.addCleanup(patcher.stop)

    def test_crush_dates_preview(self):
        result = runner.invoke(app, ["crush-dates", "2024-02-27"], env=WIDE)
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("2024-03-05", result.output)
        self.assertIn("2024-03-26", result.output)

    def test_crush_dates_alias_and_invalid_date(self):
        result = runner.invoke(app, ["cd", "2023-02-29"], env=WIDE)
        self.assertEqual(result.exit_code, 2)

    def test_add_concrete_rejects_invalid_pouring_date(self):
        result = runner.invoke(
            app,
            ["add", "concrete", "-c", "Nile Builders", "-te", "Omar", "-pd", "2025-13-01"],
            env=WIDE,
        )
        self.assertEqual(result.exit_code, 2)
        self.assertEqual(self.sample_repo.get_all_samples(), [])

    def test_add_concrete_stores_crush_dates(self):
        result = runner.invoke(
            app,
            ["add", "co", "-c", "Nile Builders", "-te", "Omar", "-pd", "2023-12-28"],
            env=WIDE,
        )
        self.assertEqual(result.exit_code, 0, result.output)
        (sample,) = self.sample_repo.get_all_samples()
        self.assertEqual(sample["crush_date_28_days"], "2024-01-25")

    def test_dashboard_lists_alerts_in_order(self):
        for contractor, pouring_date in [
            ("Alpha Contracting", "2025-06-03"),
            ("Gamma Contracting", "2025-05-23"),
            ("Charlie Contracting", "2025-05-31"),
        ]:
            self.sample_repo.save_new_sample(
                create_concrete_sample(contractor, "Tech", pouring_date, "slab", "30 MPa")
            )

        result = runner.invoke(app, ["dashboard", "--today", "2025-06-10"], env=WIDE)
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("Alerts (2)", result.output)
        self.assertNotIn("Gamma Contracting", result.output)
        self.assertLess(
            result.output.index("Charlie Contracting"),
            result.output.index("Alpha Contracting"),
        )
        self.assertIn("Overdue", result.output)
        self.assertIn("Due today", result.output)

    def test_export_file_stays_inside_output_directory(self):
        attachment = {
            "id": "file-1",
            "name": "../escaped.txt",
            "type": "text/plain",
            "data_url": "data:text/plain;base64,Y3ViZQ==",
        }
        id = self.sample_repo.save_new_sample(
            create_concrete_sample(
                "Nile Builders", "Omar", "2025-06-01", "slab", "30 MPa", files=[attachment]
            )
        )
        output_dir = self.tmp_path / "exports"

        result = runner.invoke(
            app, ["sample", "export-file", id, "file-1", "-o", str(output_dir)], env=WIDE
        )
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual((output_dir / "escaped.txt").read_bytes(), b"cube")
        self.assertFalse((self.tmp_path / "escaped.txt").exists())

    def test_table_headers_follow_configured_language(self):
        self.sample_repo.save_new_sample(
            create_concrete_sample("Nile Builders", "Omar", "2025-06-03", "slab", "30 MPa")
        )

        result = runner.invoke(app, ["dashboard", "--today", "2025-06-10"], env=WIDE)
        self.assertEqual(result.exit_code, 0, result.output)
        for label in ["Status", "Milestone", "ID"]:
            self.assertIn(label, result.output)

        self.config_repo.update_config(language="ar")
        result = runner.invoke(app, ["dashboard", "--today", "2025-06-10"], env=WIDE)
        self.assertEqual(result.exit_code, 0, result.output)
        for label in ["الحالة", "الموعد", "المعرف"]:
            self.assertIn(label, result.output)
        self.assertNotIn("Milestone", result.output)

        result = runner.invoke(app, ["sample", "list"], env=WIDE)
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("المعرف", result.output)
        self.assertIn("العينات", result.output)


if __name__ == "__main__":
    unittest.main()
