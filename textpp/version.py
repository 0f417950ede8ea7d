from __future__ import annotations

from importlib import metadata


def tool_version() -> str:
    """
    Единый способ получить версию установленного пакета.
    Не зависит от остальных модулей (во избежание циклов).
    """
    try:
        return metadata.version("textpp")
    except metadata.PackageNotFoundError:
        return "0.0.0"

__all__ = ["tool_version"]
