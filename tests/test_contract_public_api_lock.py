from __future__ import annotations

import unittest


class TestPublicApiLockContract(unittest.TestCase):
    def test_api_module_exports_are_present(self) -> None:
        import clinicgrid.api as api

        self.assertTrue(hasattr(api, "__all__"))
        self.assertIsInstance(api.__all__, (list, tuple))
        self.assertEqual(len(api.__all__), len(set(api.__all__)))

        for name in api.__all__:
            self.assertIsInstance(name, str)
            self.assertTrue(hasattr(api, name), f"clinicgrid.api missing public name: {name}")
            self.assertIsNotNone(getattr(api, name), f"clinicgrid.api {name} is None")

    def test_package_reexports_match_api_all(self) -> None:
        import clinicgrid
        import clinicgrid.api as api

        self.assertEqual(list(clinicgrid.__all__), list(api.__all__))
        for name in api.__all__:
            self.assertTrue(hasattr(clinicgrid, name), f"clinicgrid package does not re-export: {name}")
            self.assertIs(getattr(clinicgrid, name), getattr(api, name))

    def test_core_operations_are_public(self) -> None:
        import clinicgrid

        for name in (
            "pixel_to_minute",
            "range_to_geometry",
            "layout_cell",
            "preview_rect",
            "transition",
            "InteractionController",
            "week_start",
            "week_days",
            "previous_week",
            "next_week",
            "today",
        ):
            self.assertIn(name, clinicgrid.__all__)


if __name__ == "__main__":
    unittest.main(verbosity=2)
