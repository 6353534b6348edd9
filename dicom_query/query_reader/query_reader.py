"""
QueryReader reads query files describing a DICOM query.

Each line of a query file is either:
  # a comment
  GGGGEEEE              (a tag to be returned)
  GGGGEEEE=PATTERN      (a pattern that must match)
  GGGGEEEE:VR=PATTERN   (a pattern with explicit VR)
  [CREATOR]GGGGEEEE     (a private tag with its private creator)
"""

import functools
import io
import logging
import os
from collections.abc import Iterable
from os import PathLike

from pydicom.tag import BaseTag

from dicom_query.query.diagnostic_handler import (
    DiagnosticHandler,
    default_diagnostic_handler,
)
from dicom_query.query.query_spec import (
    Diagnostic,
    DiagnosticCode,
    QuerySpecification,
)
from dicom_query.query_reader.cursor import LineCursor
from dicom_query.query_reader.dictionary import (
    DicomDictionary,
    PrivateTagResolver,
    VRDictionary,
)
from dicom_query.query_reader.line_scanner import scan_lines
from dicom_query.query_reader.tag_parser import Reporter, parse_tag
from dicom_query.query_reader.value_decoder import decode_value
from dicom_query.query_reader.vr_resolver import resolve_vr


class QueryReaderError(Exception):
    pass


class QueryFileError(QueryReaderError):
    """Raised if the query file cannot be read. This is the only problem
    that stops reading a query."""

    def __init__(self, file_path: str, reason: str) -> None:
        super().__init__(f"Can't open query file {file_path}: {reason}")
        self.file_path = file_path


class QueryReader:
    def __init__(
        self,
        dictionary: VRDictionary | None = None,
        resolver: PrivateTagResolver | None = None,
        handler: DiagnosticHandler | None = None,
        log_level: int = logging.INFO,
        encoding: str = "utf8",
    ) -> None:
        """Create a QueryReader instance.

        Parameters
        ----------
        dictionary : VRDictionary
            Provides the dictionary VR of the tags.
            Defaults to a lookup in the `pydicom` dictionaries.
        resolver : PrivateTagResolver
            Maps private tags to the block of their private creator.
            Defaults to a new `DicomDictionary` for each read query, shared
            with the dictionary if that is not given either.
        handler : DiagnosticHandler
            Handles problems found in the query lines.
            Defaults to a handler that logs all problems to the console.
        log_level : int
            The log level of the used logger.
        encoding : str
            The text encoding of the query files.
        """
        self._dictionary = dictionary
        self._resolver = resolver
        self.encoding = encoding
        self.logger = logging.getLogger("dicom_query")
        self.handler = handler or default_diagnostic_handler(log_level)

    def read(self, file_path: str | PathLike) -> QuerySpecification:
        """Read the query file at `file_path`.

        Raises
        ------
        QueryFileError
            If the file cannot be opened or decoded.
        """
        file_path = os.fspath(file_path)
        try:
            with open(file_path, encoding=self.encoding) as query_file:
                return self.parse_lines(query_file, file_path)
        except (OSError, UnicodeDecodeError) as e:
            raise QueryFileError(file_path, str(e)) from e

    def parse(self, text: str, file_path: str = "") -> QuerySpecification:
        """Read a query from the query file content `text`."""
        return self.parse_lines(io.StringIO(text, newline=None), file_path)

    def parse_lines(
        self, lines: Iterable[str], file_path: str = ""
    ) -> QuerySpecification:
        """Read a query from the lines of a query file."""
        dictionary, resolver = self._collaborators()
        query = QuerySpecification(file_path=file_path)
        for line_number, line in scan_lines(lines):
            report = functools.partial(self._report, query, line_number)
            self._read_line(query, LineCursor(line), dictionary, resolver, report)
        self.handler.handle_query_result(query)
        return query

    def _collaborators(self) -> tuple[VRDictionary, PrivateTagResolver]:
        if self._dictionary is not None and self._resolver is not None:
            return self._dictionary, self._resolver
        # both defaults shall share the private blocks
        default = DicomDictionary()
        return (
            default if self._dictionary is None else self._dictionary,
            default if self._resolver is None else self._resolver,
        )

    def _read_line(
        self,
        query: QuerySpecification,
        cursor: LineCursor,
        dictionary: VRDictionary,
        resolver: PrivateTagResolver,
        report: Reporter,
    ) -> None:
        result = parse_tag(cursor, report)
        if result is None:
            return
        parsed_tag, cursor = result
        # the tag is returned even if it turns out to be unusable
        query_tag = query.add_tag(parsed_tag.tag, parsed_tag.creator)

        tag = parsed_tag.tag
        if parsed_tag.creator:
            tag = BaseTag(resolver.resolve_private_tag(parsed_tag.creator, tag))
            query.add_resolved_tag(query_tag, tag)

        vr, cursor = resolve_vr(cursor, parsed_tag, tag, dictionary, report)
        if vr is None:
            return
        value, _ = decode_value(cursor)
        query.set_attribute(tag, vr, value)
        if parsed_tag.creator:
            query.add_private_creator(tag, parsed_tag.creator)
        self.logger.debug("Query attribute %s %s: %r", tag, vr, value)

    def _report(
        self,
        query: QuerySpecification,
        line_number: int,
        code: DiagnosticCode,
        message: str,
    ) -> None:
        diagnostic = Diagnostic(code, line_number, message)
        query.diagnostics.append(diagnostic)
        self.handler.handle_diagnostic(query, diagnostic)


def read_query_file(
    file_path: str | PathLike, encoding: str = "utf8", **kwargs
) -> QuerySpecification:
    """Read the query file at `file_path` using a new `QueryReader`.
    `kwargs` are passed to the reader."""
    return QueryReader(encoding=encoding, **kwargs).read(file_path)


def parse_query(text: str, **kwargs) -> QuerySpecification:
    """Read a query from the query file content `text` using a new `QueryReader`.
    `kwargs` are passed to the reader."""
    return QueryReader(**kwargs).parse(text)
