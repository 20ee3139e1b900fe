"""
Конкретные базы данных и фабрика new_database().

Таблица _DATABASES сопоставляет DBType с конструктором. Название сравнивается
точно, с учетом регистра; DBType.MYSQL и "mysql" равнозначны.

Пример использования:

    new_database(DBType.MYSQL).client()   # DBClient(driver="mysql", connected=False)
    new_database("postgres").client()     # DBClient(driver="postgres", connected=False)

    try:
        new_database("MySQL")
    except UnsupportedTypeError as e:
        e.db_type                          # MySQL
"""
import logging
from enum import Enum

from creational.internal.errors import UnsupportedTypeError
from creational.internal.factory.database import Database, DBClient

logger = logging.getLogger(__name__)


class DBType(str, Enum):
    MYSQL = "mysql"
    POSTGRES = "postgres"


class Mysql(Database):
    driver: str = DBType.MYSQL.value

    def client(self) -> DBClient:
        return DBClient(driver=self.driver)


class Postgres(Database):
    driver: str = DBType.POSTGRES.value

    def client(self) -> DBClient:
        return DBClient(driver=self.driver)


def new_mysql() -> Database:
    return Mysql()


def new_postgres() -> Database:
    return Postgres()


_DATABASES = {
    DBType.MYSQL: new_mysql,
    DBType.POSTGRES: new_postgres,
}


def new_database(db_type: DBType | str) -> Database:
    # Сравнение точное и с учетом регистра: "MySQL" не подходит
    try:
        key = DBType(db_type)
    except ValueError as e:
        raise UnsupportedTypeError(db_type) from e

    database = _DATABASES[key]()
    logger.debug(f"Created {type(database).__name__} database")
    return database
