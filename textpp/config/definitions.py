"""
Загрузчик определений.

Источники (в порядке применения):
- YAML файл определений (--defs FILE), корень: отображение имя -> скаляр;
- флаги командной строки -DNAME[=VALUE].
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Optional, Tuple

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from ..errors import ConfigError
from ..symbols import DEFAULT_FLAG_VALUE, SymbolTable

_yaml = YAML(typ="safe")

# (имя, значение или None для «голого» флага)
Definition = Tuple[str, Optional[str]]


def parse_define(spec: str) -> Definition:
    """
    Парсит значение флага -D.

    NAME        -> (NAME, None)   «голый» флаг, означает TRUE
    NAME=       -> (NAME, "")     снимает определение
    NAME=VALUE  -> (NAME, VALUE)  значение сохраняется как есть

    Raises:
        ConfigError: При пустом имени
    """
    name, sep, value = spec.partition("=")
    if not name:
        raise ConfigError(f"Invalid definition '-D{spec}'. Expected NAME[=VALUE]")
    return name, (value if sep else None)


def _scalar_to_value(name: str, raw: object, path: Path) -> Optional[str]:
    if raw is None:
        return None
    if isinstance(raw, bool):
        return DEFAULT_FLAG_VALUE if raw else "FALSE"
    if isinstance(raw, (str, int, float)):
        return str(raw)
    raise ConfigError(f"Definition '{name}' in {path} must be a scalar, got {type(raw).__name__}")


def load_definitions_file(path: Path) -> List[Definition]:
    """
    Читает YAML файл определений.

    null -> «голый» флаг (TRUE), true/false -> TRUE/FALSE,
    "" -> снятие определения, числа и строки -> их текст.

    Raises:
        ConfigError: Файл не найден, не читается, не является YAML-отображением
                     или содержит не скалярные значения
    """
    try:
        if not path.is_file():
            raise ConfigError(f"Definitions file not found: {path}")
        raw = _yaml.load(path.read_text(encoding="utf-8")) or {}
    except (OSError, UnicodeDecodeError, YAMLError) as e:
        raise ConfigError(f"Failed to parse definitions file {path}: {e}")
    if not isinstance(raw, dict):
        raise ConfigError(f"YAML must be a mapping: {path}")

    return [(str(name), _scalar_to_value(str(name), value, path)) for name, value in raw.items()]


def build_symbol_table(
    defines: Iterable[str] = (),
    defs_file: Optional[Path] = None,
) -> SymbolTable:
    """
    Собирает таблицу определений: сначала файл, затем флаги -D поверх него.
    """
    pairs: List[Definition] = []
    if defs_file is not None:
        pairs.extend(load_definitions_file(defs_file))
    pairs.extend(parse_define(spec) for spec in defines)
    return SymbolTable.from_pairs(pairs)


__all__ = ["Definition", "parse_define", "load_definitions_file", "build_symbol_table"]
