"""
Паттерн Factory (фабрика): по названию типа вернуть одну из
взаимозаменяемых реализаций общего интерфейса.

Контекст: приложению нужны две базы данных, postgres и mysql.
1.Каждая реализует интерфейс Database (единственная операция client()).
2.Фабрика new_database() (creational/helpers/factory/databases.py) получает
  название базы и возвращает соответствующий объект.
3.Для неизвестного названия фабрика бросает UnsupportedTypeError.

client() здесь заглушка: соединение не открывается, возвращается пустой
DBClient с именем драйвера.

Пример использования:

    database = new_database("postgres")
    client = database.client()
    client.driver      # postgres
    client.connected   # False

    new_database("oracle")  # UnsupportedTypeError
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class DBClient:
    driver: str
    connected: bool = False


class Database(ABC):
    """
    Интерфейс базы данных
    """
    driver: str

    @abstractmethod
    def client(self) -> DBClient:...
