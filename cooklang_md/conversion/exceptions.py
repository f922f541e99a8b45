class ConversionError(Exception):
    """Base class for exceptions thrown while converting recipes."""


class SourceFolderMissingError(ConversionError):
    """Thrown when the source folder given does not exist."""


class DestinationFolderError(ConversionError):
    """Thrown when the destination folder cannot be created."""


class RecipeUnreadableError(ConversionError):
    """Thrown when a recipe file cannot be read (or is not valid UTF-8)."""


class MarkdownWriteError(ConversionError):
    """Thrown when a Markdown output file cannot be written."""


class ImageCopyError(ConversionError):
    """Thrown when a recipe's image cannot be copied to the destination."""


class IntermediateRemovalError(ConversionError):
    """Thrown when an intermediate file cannot be removed after exporting."""


class ExportError(ConversionError):
    """Base class for exceptions thrown while exporting a Markdown file."""


class ConverterUnavailableError(ExportError):
    """Thrown when the external document converter is not installed."""


class ConverterFailedError(ExportError):
    """Thrown when the external document converter fails."""
