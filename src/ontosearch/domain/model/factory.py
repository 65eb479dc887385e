"""Statement factory used by planners that synthesize new statements."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ontosearch.domain.model.statements import AnnotationAssertion
from ontosearch.domain.model.terms import Annotation, AnnotationProperty, require_iri

if TYPE_CHECKING:
    from collections.abc import Iterable

    from ontosearch.domain.model.terms import IRI, AnnotationSubject, AnnotationValue


class DefaultStatementFactory:
    """Build annotation statements from bare identifiers."""

    def annotation(self, property_iri: IRI, value: AnnotationValue) -> Annotation:
        return Annotation(AnnotationProperty(require_iri(property_iri, role="property")), value)

    def annotation_assertion(
        self,
        subject: AnnotationSubject,
        property_iri: IRI,
        value: AnnotationValue,
        *,
        annotations: Iterable[Annotation] = (),
    ) -> AnnotationAssertion:
        return AnnotationAssertion(
            AnnotationProperty(require_iri(property_iri, role="property")),
            subject,
            value,
            annotations=frozenset(annotations),
        )
