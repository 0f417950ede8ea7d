"""
Разворачивание директивы #include.

Путь из директивы проходит подстановку ##NAME##, разрешается относительно
каталога включающего файла и обрабатывается тем же движком рекурсивно:
с общей таблицей определений и собственным стеком условий.
Отсутствующие и нечитаемые файлы молча пропускаются.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Callable, Iterator, List, Optional, Union

from .errors import IncludeCycle
from .substitute import substitute_include_path
from .symbols import SymbolTable

logger = logging.getLogger(__name__)

# (текст документа, путь к нему) -> обработанный текст
ProcessTextFn = Callable[[str, Path], str]


def read_document(path: Path) -> str:
    """
    Читает документ целиком как UTF-8 без преобразования переводов строк.

    Raises:
        OSError: Файл отсутствует или не открывается
        UnicodeDecodeError: Содержимое не является UTF-8
    """
    with path.open("r", encoding="utf-8", newline="") as fh:
        return fh.read()


class IncludeResolver:
    """
    Резолвер включений.

    Ведёт стек файлов, обрабатываемых в данный момент,
    чтобы обнаруживать циклические включения.
    """

    def __init__(self, symbols: SymbolTable, process_text: ProcessTextFn):
        self.symbols = symbols
        self._process_text = process_text
        self._resolution_stack: List[Path] = []

    @property
    def depth(self) -> int:
        return len(self._resolution_stack)

    @contextmanager
    def entered(self, path: Path) -> Iterator[None]:
        """Отмечает файл как обрабатываемый на время вложенного вызова."""
        self._resolution_stack.append(path.resolve())
        try:
            yield
        finally:
            self._resolution_stack.pop()

    def resolve_path(self, raw_path: str, base_dir: Path) -> Optional[Path]:
        """
        Подставляет ##NAME## и разрешает путь относительно base_dir.

        Returns:
            Путь к файлу или None, если после подстановки путь пуст
        """
        rel = substitute_include_path(raw_path, self.symbols)
        if not rel:
            return None
        return base_dir / rel

    def expand(
        self,
        raw_path: str,
        base_dir: Path,
        includer: Union[str, Path, None] = None,
        line: Optional[int] = None,
    ) -> str:
        """
        Возвращает обработанное содержимое включаемого файла.

        Пустая строка, если файл не найден или не читается.

        Raises:
            IncludeCycle: Если файл уже находится в цепочке включений
            DirectiveError: Ошибки структуры директив во включаемом файле
        """
        target = self.resolve_path(raw_path, base_dir)
        if target is None:
            logger.debug(f"Include path '{raw_path}' is empty after substitution, skipping")
            return ""

        try:
            if not target.is_file():
                logger.debug(f"Include '{target}' not found, skipping")
                return ""
            key = target.resolve()
        except OSError as e:
            logger.debug(f"Include '{target}' is not accessible ({e}), skipping")
            return ""

        if key in self._resolution_stack:
            chain = " → ".join(str(p) for p in self._resolution_stack + [key])
            raise IncludeCycle(f"circular include detected: {chain}", includer, line)

        try:
            text = read_document(target)
        except (OSError, UnicodeDecodeError) as e:
            logger.debug(f"Include '{target}' is not readable ({e}), skipping")
            return ""

        logger.debug(f"Including '{target}' (depth {self.depth + 1})")
        with self.entered(target):
            return self._process_text(text, target)


__all__ = ["IncludeResolver", "read_document"]
