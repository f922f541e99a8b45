"""
Batch conversion of a directory hierarchy of recipe files into Markdown (and
optionally other document formats).

Files are processed one at a time, each being completely converted (and
exported, if requested) before the next is started. Problems with an
individual file are logged and recorded but never abort the batch, so an
interrupted or partially failed run still leaves every completed file valid.
"""

from typing import List, Optional

from pathlib import Path

from dataclasses import dataclass, field

from shutil import copyfile

import logging

from cooklang_md.compiler import compile_recipe, filename_to_title

from cooklang_md.images import find_image, NO_IMAGE

from cooklang_md.renderer import render_recipe

from cooklang_md.conversion.exceptions import (
    ConversionError,
    ExportError,
    ConverterUnavailableError,
    SourceFolderMissingError,
    DestinationFolderError,
    RecipeUnreadableError,
    MarkdownWriteError,
    ImageCopyError,
    IntermediateRemovalError,
)

from cooklang_md.conversion.export import PandocExporter

from cooklang_md.conversion.progress import ProgressCallback

from cooklang_md.conversion.recipe_directory import (
    enumerate_recipes,
    destination_for,
)


logger = logging.getLogger(__name__)


@dataclass
class RecipeOutcome:
    """The result of converting a single recipe file."""

    recipe_source: Path

    markdown_file: Optional[Path] = None
    """The Markdown file written, or None if it could not be written."""

    image_file: Optional[Path] = None
    """The copied image, or None if there was none (or the copy failed)."""

    exported_file: Optional[Path] = None
    """The exported document, if exported successfully."""

    errors: List[ConversionError] = field(default_factory=list)
    """Any (non-fatal) problems encountered."""

    @property
    def ok(self) -> bool:
        return not self.errors


@dataclass
class ConversionSummary:
    """The result of converting a directory of recipe files."""

    total: int = 0
    """The number of recipe files found."""

    converted: List[Path] = field(default_factory=list)
    """Recipe files successfully rendered to Markdown."""

    exported: List[Path] = field(default_factory=list)
    """Exported documents (if an export format was requested)."""

    failed: List[Path] = field(default_factory=list)
    """Recipe files for which at least one problem occurred."""


def read_recipe(recipe_source: Path) -> str:
    try:
        return recipe_source.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise RecipeUnreadableError(f"Cannot read {recipe_source}, skipping: {e}")


def copy_image(recipe_source: Path, image_name: str, destination_dir: Path) -> Path:
    image_destination = destination_dir / image_name
    try:
        copyfile(recipe_source.parent / image_name, image_destination)
    except OSError as e:
        raise ImageCopyError(
            f"Failed to copy image {image_name} for {recipe_source}: {e}"
        )
    return image_destination


def write_markdown(markdown_file: Path, markdown: str) -> None:
    try:
        # NB: newline="\n" keeps output byte-identical across platforms
        with markdown_file.open("w", encoding="utf-8", newline="\n") as f:
            f.write(markdown)
    except OSError as e:
        raise MarkdownWriteError(
            f"Failed to create markdown file {markdown_file}: {e}"
        )


def convert_recipe(
    recipe_source: Path,
    source_root: Path,
    destination_root: Path,
    exporter: Optional[PandocExporter] = None,
) -> RecipeOutcome:
    """
    Convert a single recipe file into Markdown in the mirrored location within
    ``destination_root``, copying its image (if any) alongside.

    If an ``exporter`` is given, the Markdown is then exported and, if
    successful, the Markdown file and copied image are removed, leaving the
    exported document as the only output.

    Problems are logged and recorded in the returned
    :py:class:`RecipeOutcome` rather than raised.
    """
    outcome = RecipeOutcome(recipe_source)

    try:
        content = read_recipe(recipe_source)

        destination_dir = destination_for(recipe_source, source_root, destination_root)
        try:
            destination_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise MarkdownWriteError(
                f"Failed to create directory {destination_dir}: {e}"
            )

        recipe = compile_recipe(content, filename_to_title(recipe_source.name))

        image_name = find_image(recipe_source)
        if image_name != NO_IMAGE:
            try:
                outcome.image_file = copy_image(
                    recipe_source, image_name, destination_dir
                )
            except ImageCopyError as e:
                # Non-fatal: the recipe is still produced
                logger.error("%s", e)
                outcome.errors.append(e)

        markdown_file = destination_dir / f"{recipe_source.stem}.md"
        write_markdown(markdown_file, render_recipe(recipe, image_name))
        outcome.markdown_file = markdown_file
    except ConversionError as e:
        logger.error("%s", e)
        outcome.errors.append(e)
        return outcome

    if exporter is not None:
        try:
            outcome.exported_file = exporter.export(markdown_file)
        except ConverterUnavailableError as e:
            logger.warning("%s", e)
            outcome.errors.append(e)
        except ExportError as e:
            logger.error("%s", e)
            outcome.errors.append(e)
        else:
            remove_intermediates(outcome)

    return outcome


def remove_intermediates(outcome: RecipeOutcome) -> None:
    """Remove the Markdown file and copied image once a recipe is exported."""
    for attr in ("markdown_file", "image_file"):
        path = getattr(outcome, attr)
        if path is None:
            continue
        try:
            path.unlink()
        except OSError as e:
            error = IntermediateRemovalError(
                f"Failed to remove intermediate file {path}: {e}"
            )
            logger.error("%s", error)
            outcome.errors.append(error)
        else:
            setattr(outcome, attr, None)


def convert_directory(
    source_root: Path,
    destination_root: Path,
    export_format: Optional[str] = None,
    progress: Optional[ProgressCallback] = None,
    exporter: Optional[PandocExporter] = None,
) -> ConversionSummary:
    """
    Convert every recipe file found below ``source_root`` into the same
    relative location below ``destination_root``.

    Parameters
    ==========
    source_root : Path
        The directory containing recipe (``.cook``) files.
    destination_root : Path
        The directory to write the converted files to. Will be created if it
        does not exist. Existing files may be overwritten silently.
    export_format : str or None
        If given, each Markdown file is exported to this format (e.g. "pdf")
        using Pandoc, and the intermediate Markdown files removed.
    progress : callable(done, total) or None
        If given, called once with done=0 before processing starts and then
        after each recipe file has been processed.
    exporter : :py:class:`~cooklang_md.conversion.export.PandocExporter` or None
        The exporter to use. Defaults to a
        :py:class:`~cooklang_md.conversion.export.PandocExporter` for
        ``export_format``.

    Raises
    ======
    SourceFolderMissingError
        If ``source_root`` is not a directory.
    DestinationFolderError
        If ``destination_root`` cannot be created.

    No other errors are raised: per-file problems are recorded in the
    returned summary.
    """
    if not source_root.is_dir():
        raise SourceFolderMissingError(
            f"Error: Source folder '{source_root}' does not exist"
        )

    if exporter is None and export_format:
        exporter = PandocExporter(export_format)

    try:
        destination_root.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise DestinationFolderError(
            f"Error: Cannot create destination folder '{destination_root}': {e}"
        )

    recipe_sources = enumerate_recipes(source_root)
    summary = ConversionSummary(total=len(recipe_sources))

    logger.debug("Found %d recipe files in %s", summary.total, source_root)

    if progress is not None:
        progress(0, summary.total)

    for done, recipe_source in enumerate(recipe_sources, start=1):
        outcome = convert_recipe(
            recipe_source, source_root, destination_root, exporter
        )

        if outcome.markdown_file is not None or outcome.exported_file is not None:
            summary.converted.append(recipe_source)
        if outcome.exported_file is not None:
            summary.exported.append(outcome.exported_file)
        if not outcome.ok:
            summary.failed.append(recipe_source)

        if progress is not None:
            progress(done, summary.total)

    return summary
