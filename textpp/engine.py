"""
Движок директив.

Читает документ построчно, классифицирует каждую строку и направляет её
в стек условий, вычислитель выражений, резолвер включений или подстановку.
Результат: единый текст без служебной разметки.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator, List, Optional, Union

from .conditions.evaluator import ConditionEvaluator
from .conditions.parser import ConditionParser, ParseError
from .directives import DirectiveKind, classify_line
from .errors import InvalidExpression, TextppUserError
from .includes import IncludeResolver, read_document
from .stack import ConditionalStack
from .substitute import substitute_content
from .symbols import SymbolTable

logger = logging.getLogger(__name__)


def iter_lines(text: str) -> Iterator[str]:
    """
    Разбивает текст на строки по '\\n', отбрасывая завершающий '\\r'.

    Завершающий перевод строки не порождает лишней пустой строки.
    """
    if not text:
        return
    parts = text.split("\n")
    if parts[-1] == "":
        parts.pop()
    for part in parts:
        yield part[:-1] if part.endswith("\r") else part


class Engine:
    """
    Препроцессор одного запуска.

    Таблица определений общая для документа и всех его включений
    и не изменяется движком.
    """

    def __init__(self, symbols: SymbolTable):
        self.symbols = symbols
        self.parser = ConditionParser()
        self.evaluator = ConditionEvaluator(symbols)
        self.includes = IncludeResolver(symbols, self._process_document)

    def process_file(self, path: Union[str, Path]) -> str:
        """
        Обрабатывает файл верхнего уровня.

        Raises:
            TextppUserError: Файл не найден или не читается
            DirectiveError: Ошибка структуры директив или выражения
        """
        path = Path(path)
        try:
            text = read_document(path)
        except FileNotFoundError:
            raise TextppUserError(f"Input file not found: {path}")
        except (OSError, UnicodeDecodeError) as e:
            raise TextppUserError(f"Failed to read input file {path}: {e}")

        return self.process_text(text, path)

    def process_text(self, text: str, source: Union[str, Path, None] = None) -> str:
        """
        Обрабатывает текст документа.

        Args:
            text: Содержимое документа
            source: Путь к документу; его каталог служит базой для #include,
                    а сам документ входит в цепочку включений.
                    Без пути включения разрешаются относительно текущего каталога.

        Returns:
            Развёрнутый документ; каждая выведенная строка завершается '\\n'
        """
        if source is None:
            return self._process_document(text, None)
        with self.includes.entered(Path(source)):
            return self._process_document(text, source)

    def _process_document(self, text: str, source: Union[str, Path, None]) -> str:
        base_dir = Path(source).parent if source is not None else Path.cwd()
        stack = ConditionalStack(source)
        out: List[str] = []
        line_no = 0

        for line_no, line in enumerate(iter_lines(text), start=1):
            directive = classify_line(line)
            kind = directive.kind

            if kind is DirectiveKind.INCLUDE:
                if stack.is_active():
                    out.append(self.includes.expand(directive.argument, base_dir, source, line_no))
            elif kind is DirectiveKind.IFDEF:
                stack.push_if(self.symbols.is_defined(directive.argument), line_no)
            elif kind is DirectiveKind.IF:
                stack.push_if(self._evaluate(directive.argument, source, line_no), line_no)
            elif kind is DirectiveKind.ELSE:
                stack.on_else(line_no)
            elif kind is DirectiveKind.ENDIF:
                stack.on_endif(line_no)
            elif stack.is_active():
                out.append(substitute_content(line, self.symbols) + "\n")

        stack.finish(line_no)
        return "".join(out)

    def _evaluate(self, expression: str, source: Union[str, Path, None], line: int) -> bool:
        try:
            condition = self.parser.parse(expression)
        except ParseError as e:
            raise InvalidExpression(
                f"{e.message} at position {e.position} in '{expression}'", source, line
            ) from e
        result = self.evaluator.evaluate(condition)
        logger.debug(f"#if {condition} -> {result} ({source or '<string>'}:{line})")
        return result


def render_file(path: Union[str, Path], symbols: Optional[SymbolTable] = None) -> str:
    """Обрабатывает файл с заданной таблицей определений."""
    return Engine(symbols if symbols is not None else SymbolTable()).process_file(path)


def render_text(text: str, symbols: Optional[SymbolTable] = None, source: Union[str, Path, None] = None) -> str:
    """Обрабатывает текст документа с заданной таблицей определений."""
    return Engine(symbols if symbols is not None else SymbolTable()).process_text(text, source)


__all__ = ["Engine", "iter_lines", "render_file", "render_text"]
