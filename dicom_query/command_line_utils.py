import argparse
import logging

from dicom_query.query.query_spec import QuerySpecification
from dicom_query.query_reader.query_reader import QueryFileError, QueryReader


def add_query_args(parser: argparse.ArgumentParser) -> None:
    """Add query file related arguments to argument parser."""
    parser.add_argument(
        "queryfiles",
        help="Path(s) of query files",
        nargs="+",
    )
    parser.add_argument(
        "--encoding",
        help="Text encoding of the query files",
        default="utf8",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Outputs diagnostic information"
    )


def query_from_args(
    args: argparse.Namespace, file_path: str
) -> QuerySpecification | None:
    """Read a query file using query related parser arguments.
    Returns `None` if the file cannot be read."""
    log_level = logging.DEBUG if args.verbose else logging.INFO
    reader = QueryReader(log_level=log_level, encoding=args.encoding)
    try:
        return reader.read(file_path)
    except QueryFileError as e:
        reader.logger.error(str(e))
        return None
