"""Save generated declarations to disk."""
from pathlib import Path
from typing import List
from typegen.generators.types import GeneratedFile


def write_files(files: List[GeneratedFile], out_dir: Path) -> List[Path]:
    """Write each generated file under ``out_dir``, creating directories as needed, and return the paths."""
    written = []
    for generated in files:
        target = out_dir / generated.path
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(generated.content, encoding="utf-8")
        written.append(target)
    return written
