from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import List, Tuple


logger = logging.getLogger(__name__)

DOCUMENT_EXT = ".abstr"
REFERENCE_EXT = ".uncontr"


class CorpusError(RuntimeError):
    pass


@dataclass(frozen=True)
class Document:
    name: str
    text: str
    reference: Tuple[str, ...]


def filter_files(folder: str | Path, extension: str) -> List[Path]:
    """Files in ``folder`` ending with ``extension``, sorted by name."""

    folder = Path(folder)
    if not folder.is_dir():
        raise FileNotFoundError(str(folder))
    return sorted((p for p in folder.iterdir() if p.is_file() and p.name.endswith(extension)), key=lambda p: p.name)


def parse_reference(text: str) -> Tuple[str, ...]:
    """Split a reference keyword file ("kw one; kw two; ...") into keywords."""

    text = re.sub(r"\s+", " ", text).strip()
    if not text:
        return ()
    return tuple(text.split("; "))


def _stem(path: Path, extension: str) -> str:
    return path.name[: -len(extension)]


def _read_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise CorpusError(f"{path.name} is not valid UTF-8: {e}") from e


def load_corpus(
    folder: str | Path,
    document_ext: str = DOCUMENT_EXT,
    reference_ext: str = REFERENCE_EXT,
) -> Tuple[Document, ...]:
    """Load paired document/reference files in lexicographic filename order."""

    doc_files = filter_files(folder, document_ext)
    ref_files = filter_files(folder, reference_ext)

    if not doc_files:
        raise CorpusError(f"no '{document_ext}' documents found in {folder}")
    if len(doc_files) != len(ref_files):
        raise CorpusError(
            f"{len(doc_files)} '{document_ext}' documents but {len(ref_files)} '{reference_ext}' reference files in {folder}"
        )

    docs: List[Document] = []
    for doc_path, ref_path in zip(doc_files, ref_files):
        name = _stem(doc_path, document_ext)
        if _stem(ref_path, reference_ext) != name:
            raise CorpusError(f"reference file {ref_path.name} does not match document {doc_path.name}")
        docs.append(
            Document(
                name=name,
                text=_read_text(doc_path),
                reference=parse_reference(_read_text(ref_path)),
            )
        )

    logger.info("Loaded %d documents from %s", len(docs), folder)
    return tuple(docs)
