from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

from .config import build_symbol_table
from .engine import Engine
from .errors import ConfigError, TextppUserError
from .version import tool_version

_LOG_FORMAT = "[%(levelname)s] %(message)s"


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="textpp",
        description="Line-oriented text preprocessor (#ifdef/#if/#else/#endif/#include, $$VAR$$)",
        add_help=True,
    )
    p.add_argument("-v", "--version", action="version", version=f"%(prog)s {tool_version()}")
    p.add_argument(
        "-D",
        dest="defines",
        action="append",
        default=[],
        metavar="NAME[=VALUE]",
        help="определить переменную: NAME (=TRUE), NAME=VALUE, NAME= (снять определение)",
    )
    p.add_argument(
        "--defs",
        type=Path,
        metavar="FILE",
        help="YAML файл определений (флаги -D применяются поверх него)",
    )
    p.add_argument(
        "-o",
        "--output",
        type=Path,
        metavar="FILE",
        help="записать результат в файл вместо stdout",
    )
    p.add_argument(
        "--verbose",
        action="store_true",
        help="отладочный лог в stderr (также TEXTPP_DEBUG=1)",
    )
    p.add_argument("input", type=Path, help="входной документ")
    return p


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose or os.environ.get("TEXTPP_DEBUG") else logging.WARNING
    log = logging.getLogger("textpp")
    log.setLevel(level)
    if not log.handlers:
        h = logging.StreamHandler(sys.stderr)
        h.setFormatter(logging.Formatter(_LOG_FORMAT))
        log.addHandler(h)


def main(argv: list[str] | None = None) -> int:
    ns = _build_parser().parse_args(argv)
    _setup_logging(ns.verbose)

    try:
        symbols = build_symbol_table(ns.defines, ns.defs)
        doc_text = Engine(symbols).process_file(ns.input)
    except ConfigError as e:
        sys.stderr.write(str(e).rstrip() + "\n")
        return 2
    except TextppUserError as e:
        sys.stderr.write(str(e).rstrip() + "\n")
        return 1

    # Вывод только после успешной обработки всего документа
    if ns.output is not None:
        ns.output.parent.mkdir(parents=True, exist_ok=True)
        with ns.output.open("w", encoding="utf-8", newline="") as fh:
            fh.write(doc_text)
    else:
        sys.stdout.write(doc_text)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
