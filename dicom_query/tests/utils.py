from pydicom.tag import BaseTag

from dicom_query.query.diagnostic_handler import DiagnosticHandlerBase
from dicom_query.query.query_spec import (
    Diagnostic,
    DiagnosticCode,
    QuerySpecification,
)


class FakeDictionary:
    def __init__(self, vrs: dict[int, str]):
        self.vrs = vrs
        self.looked_up = []

    def dictionary_vr(self, tag: BaseTag) -> str:
        self.looked_up.append(tag)
        return self.vrs.get(tag, "")


class FakeResolver:
    def __init__(self, resolved_tag: int):
        self.resolved_tag = resolved_tag
        self.calls = []

    def resolve_private_tag(self, creator: str, tag: BaseTag) -> BaseTag:
        self.calls.append((creator, tag))
        return BaseTag(self.resolved_tag)


class RecordingHandler(DiagnosticHandlerBase):
    def __init__(self):
        self.diagnostics: list[Diagnostic] = []
        self.results: list[QuerySpecification] = []

    def handle_diagnostic(
        self, query: QuerySpecification, diagnostic: Diagnostic
    ) -> None:
        self.diagnostics.append(diagnostic)

    def handle_query_result(self, query: QuerySpecification) -> None:
        self.results.append(query)

    @property
    def codes(self) -> list[DiagnosticCode]:
        return [d.code for d in self.diagnostics]
