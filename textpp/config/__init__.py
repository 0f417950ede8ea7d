from .definitions import Definition, build_symbol_table, load_definitions_file, parse_define

__all__ = ["Definition", "build_symbol_table", "load_definitions_file", "parse_define"]
