"""
The ``cooklang-md`` command converts a directory hierarchy of Cooklang recipe
files into Markdown documents and, optionally, into other document formats.

.. highlight:: bash

Basic usage
===========

.. code:: text

    $ cooklang-md SOURCE_FOLDER DESTINATION_FOLDER [EXPORT_FORMAT]

Every ``.cook`` file found (at any depth) in ``SOURCE_FOLDER`` is converted
into a Markdown file of the same name in the corresponding subdirectory of
``DESTINATION_FOLDER``, which is created if necessary. An image with the same
base name as the recipe (e.g. ``tomato_soup.jpg`` for ``tomato_soup.cook``) is
copied alongside the Markdown file.

Recipe files
============

Recipes are plain text, one step per line, annotated like so::

    >> servings: 4
    >> source: https://example.com/tomato-soup
    Fry the @onion{1} in @olive oil{2%tbsp} using a #saucepan{}.
    Add the @tomatoes{800%g} and simmer.

Lines starting with ``>>`` give metadata, ``@name{quantity}`` marks an
ingredient (a ``%`` separates a quantity from its unit) and ``#name{}`` marks
a piece of equipment.

Exporting
=========

If ``EXPORT_FORMAT`` is given (e.g. ``pdf``, ``html``, ``docx`` or ``epub``),
each Markdown file is converted to that format using `Pandoc
<https://pandoc.org/>`_, after which the Markdown file and copied image are
removed. If the conversion fails, they are left in place.

For PDF output, the first installed of ``pdflatex``, ``xelatex`` and
``lualatex`` is used, falling back on ``wkhtmltopdf``.

Errors
======

A missing source folder, a destination folder which cannot be created or the
wrong number of arguments result in an exit status of 1. Problems with
individual recipes are reported but do not stop the conversion nor change the
exit status.
"""

from typing import NoReturn

import sys

import logging

from argparse import ArgumentParser

from pathlib import Path

from cooklang_md.conversion import convert_directory

from cooklang_md.conversion.exceptions import ConversionError

from cooklang_md.conversion.export import PandocExporter

from cooklang_md.conversion.progress import ProgressBar


class UsageErrorArgumentParser(ArgumentParser):
    """An :py:class:`ArgumentParser` which exits with status 1 on usage errors."""

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def main() -> None:
    parser = UsageErrorArgumentParser(
        description="""
            Convert a directory hierarchy of Cooklang recipe files into
            Markdown, and optionally other document formats.
        """,
        epilog="""
            Example: %(prog)s ./examples ./converted_recipes pdf
        """,
    )

    parser.add_argument(
        "source",
        type=Path,
        help="""
            The directory containing the recipe (.cook) files.
        """,
    )
    parser.add_argument(
        "destination",
        type=Path,
        help="""
            The directory to write the converted recipes to. Will be created
            if it does not exist. Existing files may be overwritten silently.
        """,
    )
    parser.add_argument(
        "export_format",
        nargs="?",
        default=None,
        help="""
            If given, convert each recipe to this format (e.g. pdf, html, docx,
            epub) using pandoc, removing the intermediate Markdown files.
        """,
    )

    parser.add_argument(
        "--converter",
        default="pandoc",
        metavar="PANDOC",
        help="""
            The pandoc executable to use for exporting. Default: %(default)s.
        """,
    )
    parser.add_argument(
        "--no-progress",
        action="store_false",
        dest="progress",
        help="""
            Don't display a progress bar.
        """,
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="""
            Log additional debugging information.
        """,
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="\n%(levelname)s: %(message)s",
    )

    exporter = None
    if args.export_format:
        exporter = PandocExporter(args.export_format, converter=args.converter)

    progress_bar = ProgressBar() if args.progress else None

    try:
        summary = convert_directory(
            args.source,
            args.destination,
            export_format=args.export_format,
            progress=progress_bar,
            exporter=exporter,
        )
    except ConversionError as e:
        sys.stderr.write(f"{e}\n")
        sys.exit(1)

    if progress_bar is not None:
        progress_bar.finish()

    print()
    print(f"✅ Conversion completed! ({len(summary.converted)}/{summary.total})")
    print(f"📁 Files saved to: {args.destination}")
    if args.export_format:
        print(
            f"📄 Format: {len(summary.exported)} {args.export_format} files created"
        )
        if summary.exported:
            print("🧹 Cleaned up intermediate files")
    if summary.failed:
        print(f"⚠️  {len(summary.failed)} file(s) had problems, see messages above")


if __name__ == "__main__":
    main()
