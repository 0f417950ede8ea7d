from pathlib import Path

import pytest

# Импорт из унифицированной инфраструктуры
from tests.infrastructure.file_utils import write


@pytest.fixture
def tmpproj(tmp_path: Path):
    """Минимальный набор документов: главный файл и фрагменты во вложенном каталоге."""
    root = tmp_path
    write(root / "README.md", (
        "# Project $$NAME$$\n"
        "#ifdef PRO\n"
        "#include \"parts/pro.md\"\n"
        "#else\n"
        "#include \"parts/free.md\"\n"
        "#endif\n"
        "#include \"parts/footer_##LANG##.md\"\n"
    ))
    write(root / "parts" / "pro.md", "Pro edition, licensed to $$OWNER$$\n")
    write(root / "parts" / "free.md", "Free edition\n")
    write(root / "parts" / "footer_en.md", "-- footer\n")
    return root
