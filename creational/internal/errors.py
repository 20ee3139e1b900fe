from typing import Any


class UnsupportedTypeError(ValueError):
    """Фабрика получила тип, для которого нет реализации."""

    def __init__(self, db_type: Any) -> None:
        self.db_type = db_type
        super().__init__(f"Unsupported database type: {db_type!r}")
