import pytest

from creational.helpers.builder.meals import KidsMeal, VegetarianMeal
from creational.helpers.config.app_config import Config, get_config
from creational.internal.builder.meal_builder import Director


@pytest.fixture
def vegetarian_meal() -> VegetarianMeal:
    return VegetarianMeal()


@pytest.fixture
def kids_meal() -> KidsMeal:
    return KidsMeal()


# Директор получает свежего вегетарианского строителя в каждом тесте
@pytest.fixture
def director(vegetarian_meal: VegetarianMeal) -> Director:
    return Director(vegetarian_meal)


@pytest.fixture(scope="session")
def config() -> Config:
    return get_config()
