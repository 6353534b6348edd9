import logging
import sys
from abc import abstractmethod
from typing import Protocol

from dicom_query.query.query_spec import Diagnostic, QuerySpecification


class DiagnosticHandler(Protocol):
    """Protocol to be implemented by any diagnostic handler
    passed to the QueryReader."""

    @abstractmethod
    def handle_diagnostic(self, query: QuerySpecification, diagnostic: Diagnostic):
        """Called for each problem found in a query file line.
        The diagnostic is already recorded in the query at this point."""
        ...

    @abstractmethod
    def handle_query_result(self, query: QuerySpecification):
        """Called after the query file has been read completely."""
        ...


class DiagnosticHandlerBase(DiagnosticHandler):
    """Provides a skeleton implementation for a diagnostic handler.
    Derived classes implement the actual handling in some or all methods.
    """

    def handle_diagnostic(
        self, query: QuerySpecification, diagnostic: Diagnostic
    ) -> None:
        """Placeholder method."""
        pass

    def handle_query_result(self, query: QuerySpecification) -> None:
        """Placeholder method."""
        pass


class LoggingDiagnosticHandler(DiagnosticHandlerBase):
    """Logs all problems found in a query file as warnings."""

    def __init__(self, logger: logging.Logger) -> None:
        self.logger = logger

    def handle_diagnostic(
        self, query: QuerySpecification, diagnostic: Diagnostic
    ) -> None:
        self.logger.warning(
            "Error %s line %d: %s",
            query.file_path or "<query>",
            diagnostic.line_number,
            diagnostic.message,
        )

    def handle_query_result(self, query: QuerySpecification) -> None:
        self.logger.debug(
            "Read %d tag(s) and %d attribute(s) from %s with %d problem(s)",
            len(query.tags),
            len(query.attributes),
            query.file_path or "<query>",
            len(query.diagnostics),
        )


def default_diagnostic_handler(log_level: int = logging.INFO):
    logger = logging.getLogger("dicom_query")
    if not logger.hasHandlers():
        logger.addHandler(logging.StreamHandler(sys.stdout))
    logger.level = log_level
    return LoggingDiagnosticHandler(logger)
