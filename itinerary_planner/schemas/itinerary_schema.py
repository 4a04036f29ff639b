from typing import Any, List
from pydantic import BaseModel, ConfigDict, Field, field_validator

MIN_DAYS = 1
MAX_DAYS = 14
ATTRACTIONS_PER_DAY = (5, 7)
DINING_PER_DAY = (2, 3)


# ============================================================
# 🎒 Itinerary Request (input schema)
# ============================================================
class ItineraryRequest(BaseModel):
    model_config = ConfigDict(frozen=True, str_strip_whitespace=True, extra="ignore")

    city: str = Field(..., min_length=1)
    budget: str = Field(..., min_length=1)
    days: int = Field(..., ge=MIN_DAYS, le=MAX_DAYS)

    # -------------------- Validators --------------------
    @field_validator("days", mode="before")
    @classmethod
    def _no_bool_days(cls, v: Any):
        # bool is an int subclass; JSON true/false is never a day count
        if isinstance(v, bool):
            raise ValueError("boolean day count")
        return v


# ============================================================
# 🍽️ Dining Option
# ============================================================
class DiningOption(BaseModel):
    name: str
    meal: str
    estimated_cost_usd: str


# ============================================================
# 📅 Daily Plan
# ============================================================
class DayPlan(BaseModel):
    day: int = Field(..., ge=1)
    title: str
    summary: str
    attractions: List[str]
    dining: List[DiningOption]


# ============================================================
# 🧳 Itinerary (response)
# ============================================================
class Itinerary(BaseModel):
    """Itinerary as returned by the model. Field names are the wire contract."""

    city: str
    budget: str
    total_days: int
    itinerary: List[DayPlan]

    def consistency_problems(self) -> List[str]:
        """
        List every way this itinerary departs from the shape the prompt asks for:
        - total_days matches the number of day entries
        - days are numbered 1..total_days in order
        - 5-7 attractions and 2-3 dining options per day
        An empty list means the itinerary is consistent.
        """
        problems = []
        if self.total_days != len(self.itinerary):
            problems.append(
                f"total_days is {self.total_days} but {len(self.itinerary)} day entries were returned"
            )

        numbers = [d.day for d in self.itinerary]
        if numbers != list(range(1, len(self.itinerary) + 1)):
            problems.append(f"day numbers {numbers} are not a contiguous 1..n sequence")

        lo_a, hi_a = ATTRACTIONS_PER_DAY
        lo_d, hi_d = DINING_PER_DAY
        for d in self.itinerary:
            if not lo_a <= len(d.attractions) <= hi_a:
                problems.append(f"day {d.day} has {len(d.attractions)} attractions (expected {lo_a}-{hi_a})")
            if not lo_d <= len(d.dining) <= hi_d:
                problems.append(f"day {d.day} has {len(d.dining)} dining options (expected {lo_d}-{hi_d})")
        return problems


# ============================================================
# ⚠️ Error bodies
# ============================================================
class ErrorResponse(BaseModel):
    error: str


class ValidationErrorResponse(ErrorResponse):
    details: dict
