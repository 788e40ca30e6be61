"""资源表单定义."""

from petclinic.forms.definitions.base import (
    FieldComponent,
    ResourceFormDefinition,
    ResourceFormField,
    ResourceFormHandler,
)

__all__ = [
    "FieldComponent",
    "ResourceFormDefinition",
    "ResourceFormField",
    "ResourceFormHandler",
]
