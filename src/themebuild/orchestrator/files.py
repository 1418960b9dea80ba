"""File primitives shared by the asset tasks: select, concatenate, copy, delete."""

from __future__ import annotations

import glob
import os
import shutil
from pathlib import Path
from typing import Iterable


def is_glob(pattern: str) -> bool:
    return any(ch in pattern for ch in "*?[")


def _in_base(pattern: str, base: Path | None) -> str:
    if base is None:
        return pattern
    return os.path.join(glob.escape(str(base)), pattern)


def expand_globs(patterns: Iterable[str], base: Path | None = None) -> list[Path]:
    """Expand patterns into an ordered list of existing files.

    Patterns are relative to `base` when it is given; only the pattern itself
    decides whether it is a glob, so `base` may contain `[`, `*` or `?`.
    Patterns are processed in the order given; matches of a single glob are
    sorted. A literal path must exist, otherwise FileNotFoundError is raised.
    A file selected by several patterns keeps its first position.
    """
    seen: set[Path] = set()
    paths: list[Path] = []
    for pat in patterns:
        pat = str(pat)
        if is_glob(pat):
            found = glob.glob(_in_base(pat, base), recursive=True)
            matches = [Path(m) for m in sorted(found)]
            matches = [m for m in matches if m.is_file()]
        else:
            p = Path(pat) if base is None else Path(base) / pat
            if not p.is_file():
                raise FileNotFoundError(f"File not found with singular glob: {p}")
            matches = [p]
        for m in matches:
            key = m.resolve()
            if key in seen:
                continue
            seen.add(key)
            paths.append(m)
    return paths


def concat_contents(
    chunks: Iterable[bytes], dest: Path, separator: str = "\n"
) -> Path | None:
    chunks = list(chunks)
    if not chunks:
        return None
    dest = Path(dest)
    dest.parent.mkdir(parents=True, exist_ok=True)
    dest.write_bytes(separator.encode("utf-8").join(chunks))
    return dest


def concat_files(
    sources: Iterable[Path], dest: Path, separator: str = "\n"
) -> Path | None:
    return concat_contents((Path(s).read_bytes() for s in sources), dest, separator)


def copy_files(sources: Iterable[Path], dest_dir: Path) -> list[Path]:
    dest_dir = Path(dest_dir)
    dest_dir.mkdir(parents=True, exist_ok=True)
    copied: list[Path] = []
    for src in sources:
        target = dest_dir / Path(src).name
        shutil.copyfile(src, target)
        copied.append(target)
    return copied


def delete_globs(patterns: Iterable[str], base: Path | None = None) -> list[Path]:
    deleted: list[Path] = []
    for pat in patterns:
        for m in sorted(glob.glob(_in_base(str(pat), base), recursive=True)):
            p = Path(m)
            if p.is_file():
                p.unlink()
                deleted.append(p)
    return deleted
