import json
import unittest

from automeal_planner.models import DEFAULT_MEAL_TYPES, MealPlan, MealType
from automeal_planner.services import ParseFailure, parse_meal_plan
from tests.fakes import plan_dict, plan_json


class TestParseMealPlan(unittest.TestCase):
    def test_direct_json(self):
        plan = parse_meal_plan(plan_json())
        self.assertIsInstance(plan, MealPlan)
        self.assertEqual(len(plan.weekly_plan), 7)
        self.assertEqual(plan.total_estimated_cost, 7.75)
        self.assertEqual(plan.grocery_list[1].estimated_cost, 4.25)

    def test_round_trip(self):
        original = MealPlan.model_validate(plan_dict(meals_per_day=2))
        parsed = parse_meal_plan(original.model_dump_json(by_alias=True))
        self.assertEqual(parsed, original)
        self.assertEqual(parsed.model_dump(), original.model_dump())

    def test_leading_sentence(self):
        raw = "Sure! " + json.dumps({"groceryList": [], "weeklyPlan": plan_dict()["weeklyPlan"], "totalEstimatedCost": 10})
        plan = parse_meal_plan(raw)
        self.assertIsInstance(plan, MealPlan)
        self.assertEqual(plan.total_estimated_cost, 10)
        self.assertEqual(plan.grocery_list, [])

    def test_markdown_fence_and_trailing_note(self):
        raw = "Here is your plan:\n```json\n" + plan_json() + "\n```\nEnjoy your week!"
        self.assertIsInstance(parse_meal_plan(raw), MealPlan)

    def test_last_object_wins(self):
        first = plan_dict(title_prefix="Draft")
        second = plan_dict(title_prefix="Final")
        raw = f"Draft: {json.dumps(first)}\nRevised: {json.dumps(second)}"
        plan = parse_meal_plan(raw)
        self.assertEqual(plan.weekly_plan[0].meals[0].title, "Final 1-1")

    def test_failures(self):
        missing_week = plan_dict()
        del missing_week["weeklyPlan"]
        six_days = plan_dict(days=6)
        untitled = plan_dict()
        untitled["weeklyPlan"][3]["meals"][0]["title"] = "  "
        cases = {
            "empty": "",
            "whitespace": "   \n",
            "truncated": plan_json()[:-40],
            "missing weeklyPlan": json.dumps(missing_week),
            "six days": json.dumps(six_days),
            "untitled meal": json.dumps(untitled),
            "array": "[1, 2, 3]",
            "prose": "I cannot help with that.",
        }
        for name, raw in cases.items():
            with self.subTest(name):
                self.assertIsInstance(parse_meal_plan(raw), ParseFailure)

    def test_none_is_failure(self):
        self.assertEqual(parse_meal_plan(None), ParseFailure("empty response"))

    def test_meal_count_follows_meal_types(self):
        raw = plan_json(meals_per_day=3)
        self.assertIsInstance(parse_meal_plan(raw, meal_types=list(DEFAULT_MEAL_TYPES)), MealPlan)
        failure = parse_meal_plan(raw, meal_types=[MealType.BREAKFAST, MealType.DINNER])
        self.assertIsInstance(failure, ParseFailure)
        self.assertIn("Day 1 has 3 meal(s), expected 2", failure.reason)

    def test_snake_case_and_slot_keyed_days(self):
        data = {
            "grocery_list": [{"item": "Oats", "quantity": 1}],
            "weekly_plan": [
                {
                    "day": f"Day {d + 1}",
                    "breakfast": {"title": "Oats", "instructions": "Soak."},
                    "dinner": {"title": "Pasta", "recipeLink": ""},
                }
                for d in range(7)
            ],
        }
        plan = parse_meal_plan(json.dumps(data), meal_types=[MealType.BREAKFAST, MealType.DINNER])
        self.assertIsInstance(plan, MealPlan)
        self.assertEqual([m.title for m in plan.weekly_plan[0].meals], ["Oats", "Pasta"])
        self.assertIsNone(plan.weekly_plan[0].meals[1].recipe_link)
        self.assertEqual(plan.grocery_list[0].quantity, "1")
        self.assertEqual(plan.total_estimated_cost, 0.0)

    def test_slot_keyed_days_follow_requested_order(self):
        data = {
            "groceryList": [],
            "weeklyPlan": [
                {"day": f"Day {d + 1}", "dinner": {"title": f"D{d}"}, "breakfast": {"title": f"B{d}"}}
                for d in range(7)
            ],
        }
        plan = parse_meal_plan(json.dumps(data), meal_types=[MealType.DINNER, MealType.BREAKFAST])
        self.assertIsInstance(plan, MealPlan)
        self.assertEqual([m.title for m in plan.weekly_plan[0].meals], ["D0", "B0"])
        self.assertEqual([m.title for m in plan.weekly_plan[6].meals], ["D6", "B6"])

    def test_slot_keyed_day_with_unrequested_slot_fails(self):
        data = {
            "groceryList": [],
            "weeklyPlan": [
                {"day": f"Day {d + 1}", "lunch": {"title": f"L{d}"}, "dinner": {"title": f"D{d}"}}
                for d in range(7)
            ],
        }
        failure = parse_meal_plan(json.dumps(data), meal_types=[MealType.DINNER])
        self.assertIsInstance(failure, ParseFailure)
        self.assertIn("expected 1", failure.reason)

    def test_numeric_and_missing_day_labels(self):
        numeric = plan_dict()
        for d, day in enumerate(numeric["weeklyPlan"]):
            day["day"] = d + 1
        unlabeled = plan_dict()
        for day in unlabeled["weeklyPlan"]:
            del day["day"]
        blank = plan_dict()
        blank["weeklyPlan"][2]["day"] = " "
        for name, data in {"numeric": numeric, "missing": unlabeled, "blank": blank}.items():
            with self.subTest(name):
                plan = parse_meal_plan(json.dumps(data))
                self.assertIsInstance(plan, MealPlan)
                self.assertEqual([d.day for d in plan.weekly_plan], [f"Day {i}" for i in range(1, 8)])


if __name__ == "__main__":
    unittest.main()
