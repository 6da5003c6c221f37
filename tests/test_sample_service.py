import unittest

import pendulum

from labtrack.error import InvalidDate
from labtrack.service.sample import (
    create_asphalt_sample,
    create_concrete_sample,
    create_soil_sample,
    create_steel_sample,
    filter_samples,
    get_contractors,
    get_sample_stats,
)


def build_samples():
    return [
        create_concrete_sample("Nile Builders", "Omar", "2025-06-01", "slab", "30 MPa"),
        create_asphalt_sample("Delta Roads", "Sara", "C", "North plant"),
        create_soil_sample("Nile Builders", "Hassan", "Block 4", "Proctor"),
        create_steel_sample("Cairo Steelworks", "omar k.", "B500", "16mm", "Ezz"),
        create_concrete_sample("Delta Roads", "Mona", "2025-06-05", "column", "40 MPa"),
    ]


class CreateSampleTest(unittest.TestCase):
    def test_concrete_sample_carries_derived_crush_dates(self):
        sample = create_concrete_sample(
            "Nile Builders", "Omar", "2024-02-27", "slab", "30 MPa"
        )
        self.assertEqual(sample["material_type"], "concrete")
        self.assertEqual(sample["pouring_date"], "2024-02-27")
        self.assertEqual(sample["crush_date_7_days"], "2024-03-05")
        self.assertEqual(sample["crush_date_28_days"], "2024-03-26")
        self.assertIsNone(sample["id"])
        self.assertEqual(sample["files"], [])
        self.assertIsInstance(sample["created"], pendulum.DateTime)

    def test_concrete_sample_rejects_invalid_pouring_date(self):
        with self.assertRaises(InvalidDate):
            create_concrete_sample("Nile Builders", "Omar", "2025-02-30", "slab", "30 MPa")

    def test_files_are_copied(self):
        files = [{"id": "f-1", "name": "a.txt", "type": "text/plain", "data_url": "data:text/plain;base64,"}]
        sample = create_soil_sample("Nile Builders", "Hassan", "Block 4", "Proctor", files=files)
        files.clear()
        self.assertEqual(len(sample["files"]), 1)

    def test_asphalt_mix_type(self):
        self.assertEqual(create_asphalt_sample("Delta Roads", "Sara", "B", "North")["mix_type"], "B")
        with self.assertRaises(ValueError):
            create_asphalt_sample("Delta Roads", "Sara", "D", "North")

    def test_steel_sample(self):
        sample = create_steel_sample("Cairo Steelworks", "Ali", "B500", "16mm", "Ezz")
        self.assertEqual(sample["material_type"], "steel")
        self.assertEqual(sample["steel_grade"], "B500")
        self.assertEqual(sample["diameter"], "16mm")
        self.assertEqual(sample["supplier"], "Ezz")
        self.assertNotIn("crush_date_7_days", sample)


class FilterSamplesTest(unittest.TestCase):
    def test_no_filters_returns_everything(self):
        samples = build_samples()
        self.assertEqual(len(filter_samples(samples)), 5)

    def test_search_matches_contractor_or_technician_case_insensitively(self):
        samples = build_samples()
        self.assertEqual(len(filter_samples(samples, search="OMAR")), 2)
        self.assertEqual(len(filter_samples(samples, search="delta")), 2)

    def test_material_and_contractor_filters(self):
        samples = build_samples()
        concrete = filter_samples(samples, material_type="concrete")
        self.assertEqual([sample["technician_name"] for sample in concrete], ["Omar", "Mona"])
        combined = filter_samples(samples, material_type="concrete", contractor="Delta Roads")
        self.assertEqual([sample["technician_name"] for sample in combined], ["Mona"])

    def test_contractors_in_first_seen_order(self):
        self.assertEqual(
            get_contractors(build_samples()),
            ["Nile Builders", "Delta Roads", "Cairo Steelworks"],
        )

    def test_stats(self):
        self.assertEqual(
            get_sample_stats(build_samples()),
            {"total": 5, "concrete": 2, "asphalt": 1, "soil": 1, "steel": 1},
        )
        self.assertEqual(get_sample_stats([])["total"], 0)


if __name__ == "__main__":
    unittest.main()
