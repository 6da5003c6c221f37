import tempfile
import unittest
from pathlib import Path

from labtrack.service.attachment import (
    attachment_file_name,
    attachment_from_path,
    attachment_payload,
)


class AttachmentTest(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.tmp_path = Path(self._tmp.name)

    def tearDown(self):
        self._tmp.cleanup()

    def test_pdf_attachment(self):
        path = self.tmp_path / "report.pdf"
        path.write_bytes(b"%PDF-1.4 test")
        attachment = attachment_from_path(path)
        self.assertEqual(attachment["name"], "report.pdf")
        self.assertEqual(attachment["type"], "application/pdf")
        self.assertTrue(attachment["data_url"].startswith("data:application/pdf;base64,"))
        self.assertEqual(attachment_payload(attachment), b"%PDF-1.4 test")

    def test_unknown_extension_uses_octet_stream(self):
        path = self.tmp_path / "readings.zzunknown"
        path.write_bytes(b"\x00\x01")
        self.assertEqual(attachment_from_path(path)["type"], "application/octet-stream")

    def test_each_attachment_gets_its_own_id(self):
        path = self.tmp_path / "notes.txt"
        path.write_text("cube 1 cracked")
        self.assertNotEqual(attachment_from_path(path)["id"], attachment_from_path(path)["id"])

    def test_missing_file_raises(self):
        with self.assertRaises(FileNotFoundError):
            attachment_from_path(self.tmp_path / "missing.jpg")

    def test_payload_rejects_non_data_url(self):
        attachment = {"id": "f-1", "name": "x", "type": "text/plain", "data_url": "https://example.com/x"}
        with self.assertRaises(ValueError):
            attachment_payload(attachment)

    def test_file_name_keeps_only_the_last_component(self):
        for name, expected in [
            ("cube.jpg", "cube.jpg"),
            ("../../etc/passwd", "passwd"),
            ("/tmp/report.pdf", "report.pdf"),
            ("..\\lab\\report.pdf", "report.pdf"),
        ]:
            with self.subTest(name=name):
                attachment = {"id": "f-1", "name": name, "type": "text/plain", "data_url": ""}
                self.assertEqual(attachment_file_name(attachment), expected)

    def test_file_name_rejects_directory_names(self):
        for name in ["", ".", "..", "../", "C:"]:
            with self.subTest(name=name):
                attachment = {"id": "f-1", "name": name, "type": "text/plain", "data_url": ""}
                with self.assertRaises(ValueError):
                    attachment_file_name(attachment)


if __name__ == "__main__":
    unittest.main()
