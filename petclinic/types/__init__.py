"""共享类型定义."""

from petclinic.types.owners import (
    OwnerForm,
    OwnerRepository,
    OwnerSearchFilters,
    OwnerSearchForm,
    OwnerSearchKind,
    OwnerSearchOutcome,
)
from petclinic.types.resources import (
    ResourceContext,
    ResourceIdentifier,
    ResourceInstance,
    ResourcePayload,
    SupportsResourceId,
)
from petclinic.types.structures import (
    ContextDict,
    ContextMapping,
    FieldErrors,
    JsonDict,
    JsonValue,
    LoggerExtra,
    PayloadMapping,
    PayloadValue,
    ScalarValue,
    StructlogEventDict,
    TemplateContext,
)

__all__ = [
    "ContextDict",
    "ContextMapping",
    "FieldErrors",
    "JsonDict",
    "JsonValue",
    "LoggerExtra",
    "OwnerForm",
    "OwnerRepository",
    "OwnerSearchFilters",
    "OwnerSearchForm",
    "OwnerSearchKind",
    "OwnerSearchOutcome",
    "PayloadMapping",
    "PayloadValue",
    "ResourceContext",
    "ResourceIdentifier",
    "ResourceInstance",
    "ResourcePayload",
    "ScalarValue",
    "StructlogEventDict",
    "SupportsResourceId",
    "TemplateContext",
]
