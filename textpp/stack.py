"""
Стек условной вложенности.

Каждый открытый #if/#ifdef добавляет кадр; строка попадает в вывод,
только если выбранная ветка истинна во всех открытых кадрах.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Union

from .errors import MismatchedElse, MismatchedEndif, UnterminatedConditional


@dataclass
class ConditionalFrame:
    """
    Один уровень условной вложенности.

    matched: исходное значение условия,
    branch_taken: истинна ли текущая выбранная ветка (if или else),
    else_seen: встречался ли уже #else для этого кадра.
    """
    matched: bool
    branch_taken: bool
    else_seen: bool = False
    line: Optional[int] = None  # строка, открывшая кадр


class ConditionalStack:
    """
    Стек кадров для одного документа.

    Не переходит границы файлов: каждое включение получает собственный стек.
    """

    def __init__(self, path: Union[str, Path, None] = None):
        self.path = path
        self._frames: List[ConditionalFrame] = []

    @property
    def depth(self) -> int:
        return len(self._frames)

    def push_if(self, cond: bool, line: Optional[int] = None) -> None:
        self._frames.append(ConditionalFrame(matched=cond, branch_taken=cond, line=line))

    def on_else(self, line: Optional[int] = None) -> None:
        if not self._frames:
            raise MismatchedElse("#else without matching #if/#ifdef", self.path, line)
        top = self._frames[-1]
        if top.else_seen:
            raise MismatchedElse("duplicate #else for the same #if/#ifdef", self.path, line)
        top.else_seen = True
        top.branch_taken = not top.matched

    def on_endif(self, line: Optional[int] = None) -> None:
        if not self._frames:
            raise MismatchedEndif("#endif without matching #if/#ifdef", self.path, line)
        self._frames.pop()

    def is_active(self) -> bool:
        return all(frame.branch_taken for frame in self._frames)

    def finish(self, line: Optional[int] = None) -> None:
        """
        Проверяет, что все кадры закрыты к концу документа.

        Raises:
            UnterminatedConditional: Если остались открытые кадры
        """
        if self._frames:
            opened = self._frames[-1].line
            where = f" (opened at line {opened})" if opened is not None else ""
            raise UnterminatedConditional(f"missing #endif{where}", self.path, line)


__all__ = ["ConditionalFrame", "ConditionalStack"]
