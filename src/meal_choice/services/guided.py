"""Three-step guided meal choice."""

from dataclasses import dataclass, field

from meal_choice.domain.catalog import Meal, MealCategory, partition_by_category

STEPS: tuple[MealCategory, ...] = (
    MealCategory.CARB,
    MealCategory.PROTEIN,
    MealCategory.VEGETABLE,
)

STEP_TITLES = {
    MealCategory.CARB: "Choose Your Carb",
    MealCategory.PROTEIN: "Pick Your Protein",
    MealCategory.VEGETABLE: "Select Your Vegetable",
}

STEP_DESCRIPTIONS = {
    MealCategory.CARB: "What sounds good as your main carbohydrate?",
    MealCategory.PROTEIN: "What protein would you like today?",
    MealCategory.VEGETABLE: "Complete your meal with a vegetable!",
}


@dataclass(frozen=True)
class GuidedSelection:
    """One meal per category, chosen through the wizard."""

    carb: Meal
    protein: Meal
    vegetable: Meal

    def announcement(self) -> str:
        return (
            f"Great choice! {self.carb.name}, {self.protein.name}, "
            f"and {self.vegetable.name}!"
        )


@dataclass
class GuidedChoice:
    """Walks carb, protein and vegetable in order, one pick per step."""

    options_by_step: dict[MealCategory, list[Meal]] = field(
        default_factory=lambda: {step: [] for step in STEPS}
    )
    selections: dict[MealCategory, Meal] = field(default_factory=dict)
    step_index: int = 0

    @classmethod
    def from_meals(cls, meals: list[Meal]) -> "GuidedChoice":
        """Start the wizard over a full meal list."""
        return cls(options_by_step=partition_by_category(meals))

    @property
    def current_step(self) -> MealCategory:
        return STEPS[self.step_index]

    @property
    def step_number(self) -> int:
        return self.step_index + 1

    @property
    def is_last_step(self) -> bool:
        return self.step_index == len(STEPS) - 1

    @property
    def options(self) -> list[Meal]:
        return self.options_by_step.get(self.current_step, [])

    @property
    def title(self) -> str:
        return STEP_TITLES[self.current_step]

    @property
    def description(self) -> str:
        return STEP_DESCRIPTIONS[self.current_step]

    def select(self, meal: Meal) -> GuidedSelection | None:
        """Store a pick for the current step.

        Returns the full selection once the last step is picked; otherwise
        advances to the next step and returns None.
        """
        if meal not in self.options:
            raise ValueError(f"{meal.name} is not an option for {self.current_step}")
        self.selections[self.current_step] = meal
        if not self.is_last_step:
            self.step_index += 1
            return None
        return GuidedSelection(
            carb=self.selections[MealCategory.CARB],
            protein=self.selections[MealCategory.PROTEIN],
            vegetable=self.selections[MealCategory.VEGETABLE],
        )

    def previous(self) -> bool:
        """Step back one position; False means the wizard should exit."""
        if self.step_index == 0:
            return False
        self.step_index -= 1
        return True
