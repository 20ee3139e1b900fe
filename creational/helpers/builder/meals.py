from creational.internal.builder.meal_builder import Director, MealBuilder


class VegetarianMeal(MealBuilder):
    kind: str = "vegetarian"


class KidsMeal(MealBuilder):
    kind: str = "kids"


def new_vegetarian_meal() -> MealBuilder:
    return VegetarianMeal()


def new_kids_meal() -> MealBuilder:
    return KidsMeal()


def new_director(builder: MealBuilder) -> Director:
    return Director(builder)
