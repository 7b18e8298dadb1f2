"""AutoMeal Planner - weekly meal plans from LLM providers with an offline fallback."""

__version__ = "0.1.0"
