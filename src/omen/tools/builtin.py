"""Tools shipped with omen."""

from pathlib import Path
from typing import Annotated

from omen.tools.base import Tool
from omen.tools.description import Description


@Description("Read the contents of a file at the given path")
class ReadFile(Tool):
    """Read UTF-8 text files relative to a base directory."""

    def __init__(self, base_dir: Path | str = ".") -> None:
        self.base_dir = Path(base_dir)

    def handle(
        self,
        path: Annotated[
            str,
            Description(
                'The path to the file to read (e.g., "pyproject.toml", "README.md")'
            ),
        ],
    ) -> str:
        root = self.base_dir.resolve()
        full_path = (root / path).resolve()

        # Absolute paths and ".." segments must not leave base_dir
        if not full_path.is_relative_to(root):
            raise PermissionError(f"File is not readable: {path}")

        if not full_path.is_file():
            raise FileNotFoundError(f"File not found: {path}")

        try:
            return full_path.read_text(encoding="utf-8")
        except PermissionError:
            raise PermissionError(f"File is not readable: {path}") from None
