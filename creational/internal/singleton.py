import logging
import threading
from typing import Any

logger = logging.getLogger(__name__)


class Singleton:
    # Паттерн Singleton: на весь процесс создается только один объект класса.
    # Каждый наследник получает свой собственный экземпляр.
    # Состояние заполняется в _setup(), а не в __init__: Python вызывает
    # __init__ при каждом Singleton(), а _setup() выполняется ровно один раз.
    # Потоки, пришедшие одновременно с первым, ждут на блокировке, пока
    # _setup() не закончится, и получают уже готовый объект.
    # У каждого наследника своя блокировка: _setup() одного синглтона может
    # создавать другой.
    _instance: Any | None = None
    _lock = threading.Lock()

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        cls._lock = threading.Lock()

    def __new__(cls, *args, **kwargs):
        instance = cls.__dict__.get("_instance")
        if instance is not None:
            return instance

        with cls._lock:
            instance = cls.__dict__.get("_instance")
            if instance is None:
                logger.debug(f"Creating singleton instance of {cls.__name__}")
                instance = super().__new__(cls)
                instance._setup(*args, **kwargs)
                cls._instance = instance
            return instance

    def _setup(self, *args, **kwargs) -> None:
        """Одноразовая инициализация, переопределяется наследниками."""
