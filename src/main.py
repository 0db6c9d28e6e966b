"""CLI entry point for pdf2svg."""

import logging
import sys
from pathlib import Path

import click

from .config import Config
from .errors import (
    ConversionError,
    DocumentOpenError,
    ExitCode,
    InvalidRangeError,
    OptionParseError,
    PageNotFoundError,
    PDF2SVGError,
    RangeTooLargeError,
    UsageError,
)
from .file_manager import (
    document_locator,
    format_output_path,
    has_page_placeholder,
    resolve_input_path,
)
from .page_selector import PageRange, PageSpec, select_pages
from .pdf_converter import PDFPageConverter

USAGE = "Usage: pdf2svg <in file.pdf> <out file.svg> [<page no>]"

# Configure logging
logging.basicConfig(
    level=logging.WARNING,
    format="%(asctime)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger(__name__)


class PDF2SVG:
    """Main application class that drives one conversion run."""

    def __init__(self, config: Config):
        """Initialize pdf2svg.

        Args:
            config: Application configuration
        """
        self.config = config
        self.pdf_converter = PDFPageConverter(text_as_path=config.text_as_path)

    def run(
        self,
        input_path: str | Path,
        output_path: str,
        page_label: str | None = None,
        first: int = 0,
        last: int = 0,
    ) -> ExitCode:
        """Convert the selected pages of a PDF to SVG files.

        Args:
            input_path: PDF file, absolute or relative to the current directory
            output_path: SVG path, or a template with a page-number
                placeholder in range mode
            page_label: Page label, "all", or None
            first: 1-based first page for range mode, 0 when unset
            last: 1-based last page for range mode, 0 when unset

        Returns:
            Exit code for the run
        """
        absolute_path = resolve_input_path(input_path)
        logger.debug(f"Opening {document_locator(absolute_path)}")

        try:
            doc = self.pdf_converter.open_document(absolute_path)
        except DocumentOpenError as e:
            logger.error(str(e))
            return e.exit_code

        with doc:
            try:
                spec = select_pages(len(doc), page_label, first, last)
            except (InvalidRangeError, RangeTooLargeError) as e:
                logger.error(str(e))
                return e.exit_code

            succeeded = self._convert(doc, spec, output_path)

        if not succeeded:
            return ExitCode.CONVERSION_FAILED
        return ExitCode.SUCCESS

    def _convert(self, doc, spec: PageSpec, output_path: str) -> bool:
        """Convert every page in a page spec.

        Returns:
            True if all pages converted, False if any page failed
        """
        if not isinstance(spec, PageRange):
            if spec.label is not None:
                page = self.pdf_converter.load_page_by_label(doc, spec.label)
            else:
                page = self.pdf_converter.load_page(doc, spec.index)
            return self._convert_page(page, output_path)

        if len(spec) > 1 and not has_page_placeholder(output_path):
            logger.warning(
                f"Output path {output_path} has no page number placeholder; "
                "each page will overwrite the previous one"
            )

        # Only whether some page failed is tracked, not which one
        all_converted = True
        for page_number in spec.page_numbers():
            try:
                svg_path = format_output_path(output_path, page_number)
            except (TypeError, ValueError) as e:
                error = ConversionError(f"Invalid output path template {output_path!r}: {e}")
                logger.error(str(error))
                all_converted = False
                continue
            page = self.pdf_converter.load_page(doc, page_number - 1)
            if not self._convert_page(page, svg_path):
                all_converted = False

        return all_converted

    def _convert_page(self, page, svg_path: str) -> bool:
        """Convert one page, reporting failure instead of raising."""
        try:
            self.pdf_converter.convert_page(page, svg_path)
        except (PageNotFoundError, ConversionError) as e:
            logger.debug(f"Skipping {svg_path}: {e}")
            return False
        return True


def load_config() -> Config:
    """Load configuration, reporting bad settings as an option error."""
    try:
        return Config()
    except ValueError as e:
        raise OptionParseError(str(e)) from e


@click.command(
    context_settings={"help_option_names": ["-h", "--help"]},
    epilog='Use a page label of "all" or --first/--last to convert a range of pages; '
    "the output file name may then contain a %d style placeholder for the page number.",
)
@click.version_option(version="1.0.0", prog_name="pdf2svg")
@click.option("-f", "--first", type=int, default=0, metavar="<int>", help="First page")
@click.option("-l", "--last", type=int, default=0, metavar="<int>", help="Last page")
@click.argument("args", nargs=-1, metavar="<in file.pdf> <out file.svg> [<page no>]")
def cli(first: int, last: int, args: tuple[str, ...]) -> ExitCode:
    """Convert pages of a PDF document to SVG files."""
    if len(args) not in (2, 3):
        raise UsageError(USAGE)

    config = load_config()
    logging.getLogger().setLevel(config.log_level)
    logger.debug(config.display())

    input_path, output_path = args[0], args[1]
    page_label = args[2] if len(args) == 3 else None

    app = PDF2SVG(config)
    return app.run(input_path, output_path, page_label, first, last)


def run(argv: list[str] | None = None) -> int:
    """Parse arguments, run a conversion and return the exit code."""
    try:
        rv = cli.main(args=argv, prog_name="pdf2svg", standalone_mode=False)
    except click.ClickException as e:
        error = OptionParseError(e.format_message())
        logger.error(f"option parsing failed: {error}")
        return error.exit_code
    except UsageError as e:
        click.echo(str(e))
        return e.exit_code
    except PDF2SVGError as e:
        logger.error(str(e))
        return e.exit_code

    return int(rv)


def main():
    """Main entry point."""
    sys.exit(run())


if __name__ == "__main__":
    main()
