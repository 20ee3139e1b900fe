"""
Паттерн Builder (строитель): пошаговая сборка составного объекта отдельно
от его итогового представления.

Из чего состоит:
1.Продукт: Meal, собираемое блюдо (напиток, основное блюдо, десерт).
2.Интерфейс строителя: MealBuilder, шаги set_drink / set_main_course /
  set_dessert и итоговый build().
3.Конкретные строители: VegetarianMeal и KidsMeal
  (creational/helpers/builder/meals.py).
4.Директор: Director, знает порядок шагов и вызывает их у текущего строителя.

build() возвращает копию: если строителя потом поменять, уже выданное
блюдо останется прежним.

Строители не потокобезопасны, у каждого вызывающего должен быть свой.
"""
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, replace

logger = logging.getLogger(__name__)


@dataclass
class Meal:
    drink: str = ""
    main_course: str = ""
    dessert: str = ""


class MealBuilder(ABC):
    """
    Интерфейс строителя
    """
    def __init__(self) -> None:
        self._meal = Meal()

    @property
    @abstractmethod
    def kind(self) -> str:...

    def set_drink(self, drink: str) -> None:
        self._meal.drink = drink

    def set_main_course(self, main_course: str) -> None:
        self._meal.main_course = main_course

    def set_dessert(self, dessert: str) -> None:
        self._meal.dessert = dessert

    def build(self) -> Meal:
        return replace(self._meal)


class Director:

    def __init__(self, builder: MealBuilder) -> None:
        self._builder = builder

    @property
    def builder(self) -> MealBuilder:
        return self._builder

    def set_builder(self, builder: MealBuilder) -> None:
        self._builder = builder

    def build(self) -> Meal:
        return self._builder.build()

    def construct(self, drink: str, main_course: str, dessert: str) -> Meal:
        # Порядок шагов фиксирован: напиток -> основное блюдо -> десерт
        self._builder.set_drink(drink)
        self._builder.set_main_course(main_course)
        self._builder.set_dessert(dessert)
        logger.debug(f"Constructed {self._builder.kind} meal")
        return self._builder.build()


"""
Пример использования:

    builder = new_vegetarian_meal()
    director = Director(builder)
    meal = director.construct("Juice", "Salad", "Fruit")

    meal.drink        # Juice
    meal.main_course  # Salad
    meal.dessert      # Fruit
"""
