"""宠物主人表单处理器."""

from __future__ import annotations

from typing import TYPE_CHECKING

from petclinic.schemas.owners import bind_owner_form
from petclinic.services.owners.owner_detail_read_service import OwnerDetailReadService
from petclinic.services.owners.owner_write_service import OwnerWriteService
from petclinic.types import OwnerForm

if TYPE_CHECKING:
    from petclinic.models.owner import Owner
    from petclinic.types import ResourceContext, ResourceIdentifier, ResourcePayload


class OwnerFormHandler:
    """宠物主人表单处理器."""

    def __init__(
        self,
        write_service: OwnerWriteService | None = None,
        read_service: OwnerDetailReadService | None = None,
    ) -> None:
        self._write_service = write_service or OwnerWriteService()
        self._read_service = read_service or OwnerDetailReadService()

    def load(self, resource_id: ResourceIdentifier) -> Owner:
        return self._read_service.get_owner_or_error(int(resource_id))

    def upsert(self, payload: ResourcePayload, resource: Owner | None = None) -> Owner:
        if resource is None:
            return self._write_service.create(payload)
        return self._write_service.update(resource.id, payload)

    def build_context(
        self,
        *,
        resource: Owner | None,
        form: object | None = None,
        form_data: ResourcePayload | None = None,
    ) -> ResourceContext:
        if isinstance(form, OwnerForm):
            owner_form = form
        elif form_data is not None:
            owner_form = bind_owner_form(form_data, owner_id=resource.id if resource else None).form
        elif resource is not None:
            owner_form = OwnerForm.from_owner(resource)
        else:
            owner_form = OwnerForm()
        return {"owner": owner_form}
