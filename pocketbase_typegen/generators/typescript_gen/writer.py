"""File writer for TypeScript generation."""
from pathlib import Path
from pocketbase_typegen.generators.typescript_gen.types import GeneratedFile


def write_file(file: GeneratedFile) -> Path:
    """
    Write a generated file, creating parent directories if needed.

    Args:
        file: GeneratedFile to write

    Returns:
        Path the content was written to
    """
    file_path = Path(file.path)
    file_path.parent.mkdir(parents=True, exist_ok=True)
    file_path.write_text(file.content, encoding="utf-8")
    return file_path


def save_file(out_path: str, content: str) -> Path:
    return write_file(GeneratedFile(path=out_path, content=content))
