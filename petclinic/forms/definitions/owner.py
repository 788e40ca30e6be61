"""宠物主人表单定义."""

from petclinic.constants.validation_limits import TELEPHONE_MAX_DIGITS
from petclinic.forms.definitions.base import FieldComponent, ResourceFormDefinition, ResourceFormField
from petclinic.forms.handlers.owner_form_handler import OwnerFormHandler

OWNER_FORM_DEFINITION = ResourceFormDefinition(
    name="owner",
    template="owners/createOrUpdateOwnerForm.html",
    service_class=OwnerFormHandler,
    resource_id_arg="owner_id",
    success_message="宠物主人保存成功",
    redirect_endpoint="owners.show_owner",
    fields=[
        ResourceFormField(name="firstName", label="名", attribute="first_name", required=True),
        ResourceFormField(name="lastName", label="姓", attribute="last_name", required=True),
        ResourceFormField(name="address", label="地址", attribute="address", required=True),
        ResourceFormField(name="city", label="城市", attribute="city", required=True),
        ResourceFormField(
            name="telephone",
            label="电话",
            attribute="telephone",
            component=FieldComponent.TEL,
            required=True,
            help_text=f"仅限数字,最多 {TELEPHONE_MAX_DIGITS} 位",
        ),
    ],
)
