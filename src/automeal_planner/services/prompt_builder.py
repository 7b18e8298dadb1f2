"""Prompt builder - plan request to provider instruction text."""

from collections.abc import Collection

from automeal_planner.models import DAYS_PER_PLAN, PlanRequest

ALLOWED_RECIPE_DOMAINS: tuple[str, ...] = (
    "allrecipes.com",
    "budgetbytes.com",
    "seriouseats.com",
    "simplyrecipes.com",
    "bbcgoodfood.com",
    "foodnetwork.com",
    "epicurious.com",
    "bonappetit.com",
    "cooking.nytimes.com",
    "tasty.co",
)
FAVORITE_CATEGORY_SHARE = 70

JSON_SHAPE = """{{"groceryList":[{{"item":"...","quantity":"...","estimatedCost":0.0}}],\
"weeklyPlan":[{{"day":"Day 1","meals":[{meal_examples}]}}],\
"totalEstimatedCost":0.0}}"""

MEAL_EXAMPLE = '{"title":"...","category":"...","instructions":"...","recipeLink":"https://..."}'


def _or(value: str, fallback: str) -> str:
    if not value:
        return fallback
    return value


def build_prompt(request: PlanRequest, used_titles: Collection[str] = ()) -> str:
    """Deterministic instruction string for one plan request."""
    meal_types = [t.value for t in request.selected_meal_types]
    meal_list = ", ".join(meal_types)
    per_day = len(meal_types)

    lines = [
        "You are an expert meal planner and budget-conscious chef.",
        f"Create a one-week plan ({DAYS_PER_PLAN} days) labeled \"Day 1\" through \"Day {DAYS_PER_PLAN}\".",
        f"Each day must contain exactly {per_day} meal(s), in this order: {meal_list}.",
        "Do not add meal types that were not requested.",
    ]
    if request.favorite_categories:
        lines.append(
            f"HARD CONSTRAINT: at least {FAVORITE_CATEGORY_SHARE}% of all meals must come from "
            f"these favorite categories: {request.favorite_categories}."
        )
    lines += [
        "For every meal include: title, category (cuisine), instructions (brief), "
        "and recipeLink only when you know a real recipe URL.",
        "NEVER invent recipe links. Only use real, verifiable URLs from these sites: "
        + ", ".join(ALLOWED_RECIPE_DOMAINS)
        + ". If you are not certain a URL exists, omit recipeLink.",
        "Optimize to shop at the specified store and stay within the weekly budget.",
        "Use ingredients across multiple meals to reduce waste.",
        "Respect dietary notes and available tools; keep complexity within the rating.",
        "Include an estimatedCost for each grocery item and a totalEstimatedCost for the week.",
        "",
        f"Location: {request.location}",
        f"Grocery store: {request.grocery_store}",
        f"Weekly budget (USD): {request.weekly_budget_usd:g}",
        f"Meals requested: {_or(request.meals_requested, 'General balanced meals')}",
        f"Kitchen tools: {_or(request.kitchen_tools, 'Standard kitchen tools')}",
        f"Kitchen appliances: {_or(request.kitchen_appliances, 'Standard kitchen appliances')}",
        f"Favorite categories: {_or(request.favorite_categories, 'None specified')}",
        f"Complexity rating (1-5): {request.complexity}",
        f"Dietary and cooking notes: {_or(request.cooking_notes, 'None')}",
    ]

    if used_titles:
        avoid = sorted({t.strip() for t in used_titles if t and t.strip()})
        if avoid:
            lines += [
                "",
                "These meals were used in previous plans. Do NOT repeat any of them:",
                *(f"- {t}" for t in avoid),
            ]

    meal_examples = ",".join([MEAL_EXAMPLE] * per_day)
    lines += [
        "",
        "Reply with this JSON shape (weeklyPlan has exactly "
        f"{DAYS_PER_PLAN} entries):",
        JSON_SHAPE.format(meal_examples=meal_examples),
        "",
        "Return ONLY minified JSON. Do not include markdown, prose, or commentary.",
    ]
    return "\n".join(lines)
