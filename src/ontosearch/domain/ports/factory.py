"""Port for synthesizing new statements."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ontosearch.domain.model import (
        IRI,
        Annotation,
        AnnotationAssertion,
        AnnotationSubject,
        AnnotationValue,
    )


@runtime_checkable
class StatementFactory(Protocol):
    def annotation(self, property_iri: IRI, value: AnnotationValue) -> Annotation: ...

    def annotation_assertion(
        self,
        subject: AnnotationSubject,
        property_iri: IRI,
        value: AnnotationValue,
    ) -> AnnotationAssertion: ...
