"""
Export rendered Markdown recipes to other document formats (e.g. PDF, HTML or
DOCX) using `Pandoc <https://pandoc.org/>`_.

Pandoc is an external collaborator: it is invoked as::

    pandoc [--pdf-engine=ENGINE] INPUT.md -o OUTPUT.FORMAT --quiet

with its stderr discarded and only its exit status consulted. No timeout is
applied.

Images referenced by the Markdown are given relative to the Markdown file but
Pandoc resolves them relative to its working directory. Before conversion, a
temporary copy of the Markdown file is written with all local image references
made absolute. The copy is always removed afterwards.
"""

from typing import Callable, Iterator, List, Optional, Sequence

from pathlib import Path

from contextlib import contextmanager

from dataclasses import dataclass, field

from urllib.parse import urlsplit, quote

import logging

import shutil

import subprocess

import tempfile

from marko import Markdown  # type: ignore
from marko import inline  # type: ignore

from cooklang_md.conversion.exceptions import (
    ConverterUnavailableError,
    ConverterFailedError,
)


logger = logging.getLogger(__name__)


PDF_ENGINES: Sequence[str] = ("pdflatex", "xelatex", "lualatex")
"""PDF engines to use, in order of preference, if installed."""

FALLBACK_PDF_ENGINE = "wkhtmltopdf"
"""The PDF engine used when none of :py:data:`PDF_ENGINES` are installed."""


def is_installed(executable: str) -> bool:
    """True if the named executable can be found on the PATH."""
    return shutil.which(executable) is not None


def select_first_available(
    candidates: Sequence[str],
    fallback: str,
    is_available: Callable[[str], bool] = is_installed,
) -> str:
    """
    Return the first candidate for which ``is_available`` is true, or
    ``fallback`` if none are.
    """
    for candidate in candidates:
        if is_available(candidate):
            return candidate
    return fallback


def iter_image_destinations(markdown: str) -> Iterator[str]:
    """Iterate over the destinations of all images in a Markdown document."""

    def walk(element: object) -> Iterator[str]:
        if isinstance(element, inline.Image):
            yield element.dest
        children = getattr(element, "children", None)
        if isinstance(children, list):
            for child in children:
                yield from walk(child)

    yield from walk(Markdown().parse(markdown))


def make_image_references_absolute(markdown: str, base_dir: Path) -> str:
    """
    Rewrite local (relative) image destinations in a Markdown document so that
    they are absolute paths within ``base_dir``. URLs and absolute paths are
    left unchanged.
    """
    base_href = quote(base_dir.resolve().as_posix())
    for dest in set(iter_image_destinations(markdown)):
        parts = urlsplit(dest)

        # Don't rewrite external links or absolute paths
        if parts.scheme != "" or parts.netloc != "" or parts.path.startswith("/"):
            continue

        markdown = markdown.replace(f"]({dest})", f"]({base_href}/{dest})")
    return markdown


@contextmanager
def absolute_image_copy(md_file: Path) -> Iterator[Path]:
    """
    Context manager which creates a temporary copy of ``md_file`` (in the
    same directory) with image references made absolute, yielding its path.
    The copy is removed on exit, whether or not an exception occurred.

    Raises
    ======
    ConverterFailedError
        If the copy cannot be written (e.g. the disk is full).
    """
    temp_file: Optional[Path] = None
    try:
        markdown = md_file.read_text(encoding="utf-8")

        with tempfile.NamedTemporaryFile(
            "w",
            encoding="utf-8",
            dir=md_file.parent,
            prefix=f".{md_file.stem}-",
            suffix=".md",
            delete=False,
        ) as f:
            temp_file = Path(f.name)
            f.write(make_image_references_absolute(markdown, md_file.parent))
    except (OSError, UnicodeDecodeError) as e:
        if temp_file is not None:
            remove_temporary_file(temp_file)
        raise ConverterFailedError(
            f"Failed to convert {md_file}: cannot prepare a temporary copy: {e}"
        )

    assert temp_file is not None

    try:
        yield temp_file
    finally:
        remove_temporary_file(temp_file)


def remove_temporary_file(temp_file: Path) -> None:
    try:
        temp_file.unlink()
    except FileNotFoundError:
        pass
    except OSError as e:
        logger.error("Failed to remove temporary file %s: %s", temp_file, e)


@dataclass
class PandocExporter:
    """
    Converts Markdown files into ``export_format`` using Pandoc.

    Parameters
    ==========
    export_format : str
        The Pandoc output format and output filename extension (e.g. "pdf").
    converter : str
        The name (or path) of the Pandoc executable.
    """

    export_format: str
    converter: str = "pandoc"

    _pdf_engine: Optional[str] = field(default=None, init=False, repr=False)

    @property
    def pdf_engine(self) -> str:
        """
        The PDF engine to use, chosen the first time it is needed. Warns if
        the fallback engine must be used.
        """
        if self._pdf_engine is None:
            engine = select_first_available(PDF_ENGINES, FALLBACK_PDF_ENGINE)
            if engine == FALLBACK_PDF_ENGINE:
                logger.warning(
                    "No LaTeX engine found (tried %s), falling back to %s",
                    ", ".join(PDF_ENGINES),
                    FALLBACK_PDF_ENGINE,
                )
            self._pdf_engine = engine
        return self._pdf_engine

    def output_path(self, md_file: Path) -> Path:
        return md_file.with_suffix(f".{self.export_format}")

    def command(self, input_file: Path, output_file: Path) -> List[str]:
        cmd = [self.converter]
        if self.export_format == "pdf":
            cmd.append(f"--pdf-engine={self.pdf_engine}")
        cmd.extend([str(input_file), "-o", str(output_file), "--quiet"])
        return cmd

    def export(self, md_file: Path) -> Path:
        """
        Convert ``md_file`` into a file with the same name but the
        :py:attr:`export_format` extension, returning its path.

        Raises
        ======
        ConverterUnavailableError
            If Pandoc is not installed.
        ConverterFailedError
            If Pandoc cannot be run or exits with an error.
        """
        if not is_installed(self.converter):
            raise ConverterUnavailableError(
                f"{self.converter} is not installed, cannot convert to "
                f"{self.export_format} format "
                f"(see https://pandoc.org/installing.html)"
            )

        output_file = self.output_path(md_file)
        with absolute_image_copy(md_file) as input_file:
            cmd = self.command(input_file, output_file)
            logger.debug("Running %s", " ".join(cmd))
            try:
                result = subprocess.run(cmd, stderr=subprocess.DEVNULL)
            except OSError as e:
                raise ConverterFailedError(
                    f"Failed to convert {md_file} to {self.export_format}: {e}"
                )

        if result.returncode != 0:
            raise ConverterFailedError(
                f"Failed to convert {md_file} to {self.export_format} "
                f"({self.converter} exited with status {result.returncode})"
            )

        return output_file
