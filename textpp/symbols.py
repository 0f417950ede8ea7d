"""
Таблица определений (символов) препроцессора.

Хранит значения, переданные через -D флаги или файл определений,
и реализует правила разрешения имён и интерпретации значений как булевых.
"""

from __future__ import annotations

from typing import Dict, Iterable, Iterator, Optional, Tuple

# Значение, которое получает «голый» флаг -DNAME
DEFAULT_FLAG_VALUE = "TRUE"

# Значения, считающиеся ложными (сравнение без учёта регистра)
FALSE_VALUES = frozenset({"0", "F", "FALSE", "NO"})


def truthy(value: str) -> bool:
    """
    Булева интерпретация строкового значения.

    Ложно для пустой строки и для 0, F, FALSE, NO в любом регистре.
    Все остальные строки (включая "Falsey", "off", "none") истинны.
    """
    if not value:
        return False
    return value.upper() not in FALSE_VALUES


class SymbolTable:
    """
    Отображение имя -> непустое строковое значение.

    Инвариант: ключ присутствует тогда и только тогда, когда имя определено.
    Определение имени пустой строкой удаляет его, поэтому таблица
    никогда не хранит пустых значений.
    """

    def __init__(self, values: Optional[Dict[str, str]] = None):
        self._values: Dict[str, str] = {}
        for name, value in (values or {}).items():
            self.define(name, value)

    @classmethod
    def from_pairs(cls, pairs: Iterable[Tuple[str, Optional[str]]]) -> SymbolTable:
        """
        Строит таблицу из последовательности пар (имя, значение или None).

        None соответствует «голому» флагу и означает TRUE,
        пустая строка снимает определение, остальное сохраняется как есть.
        Более поздние пары перекрывают более ранние.
        """
        table = cls()
        for name, value in pairs:
            table.define(name, DEFAULT_FLAG_VALUE if value is None else value)
        return table

    def define(self, name: str, value: str) -> None:
        """Устанавливает значение; пустое значение удаляет имя."""
        if value:
            self._values[name] = value
        else:
            self._values.pop(name, None)

    def is_defined(self, name: str) -> bool:
        return name in self._values

    def resolve(self, name: str) -> str:
        """Возвращает значение имени или пустую строку, если оно не определено."""
        return self._values.get(name, "")

    def as_dict(self) -> Dict[str, str]:
        """Снимок текущих определений."""
        return dict(self._values)

    def __contains__(self, name: object) -> bool:
        return name in self._values

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"SymbolTable({self._values!r})"


__all__ = ["SymbolTable", "truthy", "DEFAULT_FLAG_VALUE", "FALSE_VALUES"]
