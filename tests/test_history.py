import unittest
from datetime import datetime, timezone

from automeal_planner.models import MealPlan, PlanHistoryEntry
from automeal_planner.services import extract_used_meal_titles
from tests.fakes import make_request, plan_dict


class TestExtractUsedMealTitles(unittest.TestCase):
    def test_empty_history(self):
        self.assertEqual(extract_used_meal_titles(None), set())
        self.assertEqual(extract_used_meal_titles([]), set())

    def test_model_entries(self):
        entry = PlanHistoryEntry(
            id="1",
            created_at=datetime.now(timezone.utc),
            input=make_request(),
            plan=MealPlan.model_validate(plan_dict(meals_per_day=1)),
        )
        titles = extract_used_meal_titles([entry])
        self.assertEqual(len(titles), 7)
        self.assertIn("meal 1-1", titles)

    def test_raw_entries_are_trimmed_and_lowercased(self):
        raw = [{"id": "1", "plan": {"weeklyPlan": [{"day": "Day 1", "meals": [{"title": "  Chicken Curry "}]}]}}]
        self.assertEqual(extract_used_meal_titles(raw), {"chicken curry"})

    def test_snake_case_and_slot_keyed_days(self):
        raw = [
            {
                "plan": {
                    "weekly_plan": [
                        {
                            "day": "Day 1",
                            "breakfast": {"title": "Overnight oats with banana"},
                            "dinner": {"title": "Tomato pasta with beans"},
                        }
                    ]
                }
            }
        ]
        self.assertEqual(
            extract_used_meal_titles(raw),
            {"overnight oats with banana", "tomato pasta with beans"},
        )

    def test_entries_without_plan_are_ignored(self):
        raw = [{"id": "1"}, "not an entry", {"plan": {"weeklyPlan": [{"meals": [{"title": ""}]}]}}]
        self.assertEqual(extract_used_meal_titles(raw), set())

    def test_corrupt_history_gives_empty_set(self):
        raw = [
            {"plan": {"weeklyPlan": [{"meals": [{"title": "Kept?"}]}]}},
            {"plan": {"weeklyPlan": 42}},
        ]
        with self.assertLogs("automeal_planner.services.history", level="WARNING"):
            self.assertEqual(extract_used_meal_titles(raw), set())


if __name__ == "__main__":
    unittest.main()
