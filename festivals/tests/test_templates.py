from datetime import date

from django.test import SimpleTestCase

from festivals.regions import festival_region, project_festival_region
from festivals.stores import is_expired, plan_rollover
from festivals.templates import generate_festivals, template_for


class TemplateTestCase(SimpleTestCase):
    def test_generate_is_inclusive(self):
        festivals = generate_festivals(2024, 2025)

        self.assertEqual(len(festivals), 12)
        self.assertIn("cannes-2024", {f["id"] for f in festivals})
        self.assertIn("busan-2025", {f["id"] for f in festivals})

    def test_months_are_calendar_months(self):
        cannes = next(f for f in generate_festivals(2024, 2024) if f["id"] == "cannes-2024")

        self.assertEqual(cannes["festival_start_date"], date(2024, 5, 14))
        self.assertEqual(cannes["festival_end_date"], date(2024, 5, 25))
        self.assertEqual(cannes["film_submission_deadline"], date(2024, 3, 15))

    def test_template_for(self):
        self.assertEqual(template_for("sundance-2024")["name"], "Sundance Film Festival")
        self.assertIsNone(template_for("my-own-fest-2024"))
        self.assertIsNone(template_for("custom"))


class RolloverPlanTestCase(SimpleTestCase):
    def test_expired_needs_every_deadline_past(self):
        [sundance] = [f for f in generate_festivals(2024, 2024) if f["id"] == "sundance-2024"]

        # Festival over, but the submission deadline for the next edition is still open
        self.assertFalse(is_expired(sundance, date(2024, 6, 1)))
        self.assertTrue(is_expired(sundance, date(2024, 9, 2)))

    def test_nothing_to_do_mid_year(self):
        festivals = generate_festivals(2024, 2025)
        self.assertEqual(plan_rollover(festivals, date(2024, 6, 1)), ([], []))

    def test_new_year(self):
        festivals = generate_festivals(2024, 2025)

        added, dropped = plan_rollover(festivals, date(2025, 1, 10))

        self.assertEqual({f["id"] for f in dropped}, {f["id"] for f in festivals if f["year"] == 2024})
        self.assertEqual({f["year"] for f in added}, {2026})
        self.assertEqual(len(added), 6)

    def test_next_edition_of_an_expired_festival(self):
        [cannes] = [f for f in generate_festivals(2024, 2024) if f["id"] == "cannes-2024"]

        added, dropped = plan_rollover([cannes], date(2024, 6, 1))

        self.assertEqual(dropped, [])
        self.assertEqual([f["id"] for f in added], ["cannes-2025"])


class RegionTestCase(SimpleTestCase):
    def test_country_and_region_names(self):
        self.assertEqual(festival_region("España"), "europe")
        self.assertEqual(festival_region("South Korea"), "asia")
        self.assertEqual(festival_region("Norte América"), "north-america")
        self.assertIsNone(festival_region("Atlantis"))
        self.assertIsNone(festival_region(""))

    def test_project_region(self):
        self.assertEqual(project_festival_region({"region": "asia", "country": "Spain"}), "asia")
        self.assertEqual(project_festival_region({"region": "Europa"}), "europe")
        self.assertEqual(project_festival_region({"country": "Canadá"}), "north-america")
        self.assertIsNone(project_festival_region({}))
