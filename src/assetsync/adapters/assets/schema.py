"""Pydantic models describing the Assets REST API payloads."""

from __future__ import annotations

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


def _none_to_blank(value: object) -> object:
    return "" if value is None else value


class AssetsBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


# --- responses -------------------------------------------------------------


class GroupPayload(AssetsBaseModel):
    avatar_url: str = Field(default="", alias="avatarUrl")
    name: str = ""

    _normalize = field_validator("avatar_url", "name", mode="before")(_none_to_blank)


class StatusPayload(AssetsBaseModel):
    id: str = ""
    name: str = ""
    category: int = 0

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, value: object) -> object:
        return str(value) if isinstance(value, int) else _none_to_blank(value)


class ObjectAttributeValuePayload(AssetsBaseModel):
    value: str = ""
    display_value: str = Field(default="", alias="displayValue")
    search_value: str = Field(default="", alias="searchValue")
    additional_value: str = Field(default="", alias="additionalValue")
    group: GroupPayload | None = None
    status: StatusPayload | None = None

    _normalize = field_validator(
        "value", "display_value", "search_value", "additional_value", mode="before"
    )(_none_to_blank)


class AttributeDefinitionRef(AssetsBaseModel):
    """Subset of the object type attribute embedded in an object attribute."""

    id: str = ""
    name: str = ""
    label: bool = False


class ObjectAttributePayload(AssetsBaseModel):
    id: str = ""
    workspace_id: str = Field(default="", alias="workspaceId")
    global_id: str = Field(default="", alias="globalId")
    object_type_attribute_id: str = Field(alias="objectTypeAttributeId")
    object_type_attribute: AttributeDefinitionRef | None = Field(
        default=None, alias="objectTypeAttribute"
    )
    object_attribute_values: list[ObjectAttributeValuePayload] = Field(
        default_factory=list["ObjectAttributeValuePayload"], alias="objectAttributeValues"
    )

    @property
    def is_label_source(self) -> bool:
        return self.object_type_attribute is not None and self.object_type_attribute.label


class AvatarPayload(AssetsBaseModel):
    workspace_id: str = Field(default="", alias="workspaceId")
    global_id: str = Field(default="", alias="globalId")
    avatar_uuid: str = Field(default="", alias="avatarUUID")
    url16: str = ""
    url48: str = ""
    url72: str = ""
    url144: str = ""
    url288: str = ""
    object_id: str = Field(default="", alias="objectId")

    _normalize = field_validator(
        "workspace_id",
        "global_id",
        "avatar_uuid",
        "url16",
        "url48",
        "url72",
        "url144",
        "url288",
        "object_id",
        mode="before",
    )(_none_to_blank)


class ObjectTypeRef(AssetsBaseModel):
    id: str
    name: str = ""


class LinksPayload(AssetsBaseModel):
    self_url: str = Field(default="", alias="self")


class ObjectPayloadResponse(AssetsBaseModel):
    workspace_id: str = Field(default="", alias="workspaceId")
    global_id: str = Field(default="", alias="globalId")
    id: str
    label: str = ""
    object_key: str = Field(default="", alias="objectKey")
    object_type: ObjectTypeRef = Field(alias="objectType")
    created: str = ""
    updated: str = ""
    has_avatar: bool = Field(default=False, alias="hasAvatar")
    avatar: AvatarPayload | None = None
    attributes: list[ObjectAttributePayload] = Field(
        default_factory=list["ObjectAttributePayload"]
    )
    links: LinksPayload = Field(default_factory=LinksPayload, alias="_links")


class DefaultTypePayload(AssetsBaseModel):
    id: int
    name: str = ""


class ReferenceTypePayload(AssetsBaseModel):
    workspace_id: str = Field(default="", alias="workspaceId")
    global_id: str = Field(default="", alias="globalId")
    name: str = ""

    _normalize = field_validator("workspace_id", "global_id", "name", mode="before")(
        _none_to_blank
    )


class ObjectTypeAttributePayload(AssetsBaseModel):
    workspace_id: str = Field(default="", alias="workspaceId")
    global_id: str = Field(default="", alias="globalId")
    id: str
    name: str = ""
    object_type: ObjectTypeRef | None = Field(default=None, alias="objectType")
    label: bool = False
    type: int = 0
    description: str = ""
    default_type: DefaultTypePayload | None = Field(default=None, alias="defaultType")
    type_value: str = Field(default="", alias="typeValue")
    type_value_multi: list[str] = Field(default_factory=list, alias="typeValueMulti")
    additional_value: str = Field(default="", alias="additionalValue")
    reference_type: ReferenceTypePayload | None = Field(default=None, alias="referenceType")
    reference_object_type_id: str = Field(default="", alias="referenceObjectTypeId")
    editable: bool = True
    system: bool = False
    indexed: bool = False
    sortable: bool = False
    summable: bool = False
    hidden: bool = False
    unique_attribute: bool = Field(default=False, alias="uniqueAttribute")
    minimum_cardinality: int = Field(default=0, alias="minimumCardinality")
    maximum_cardinality: int = Field(default=1, alias="maximumCardinality")
    suffix: str = ""
    removable: bool = True
    object_attribute_exists: bool = Field(default=False, alias="objectAttributeExists")
    include_child_object_types: bool = Field(default=False, alias="includeChildObjectTypes")
    regex_validation: str = Field(default="", alias="regexValidation")
    ql_query: str = Field(default="", alias="qlQuery")
    options: str = ""
    position: int = 0

    _normalize = field_validator(
        "description",
        "type_value",
        "additional_value",
        "reference_object_type_id",
        "suffix",
        "regex_validation",
        "ql_query",
        "options",
        mode="before",
    )(_none_to_blank)

    @field_validator("type_value_multi", mode="before")
    @classmethod
    def _none_to_empty(cls, value: object) -> object:
        return [] if value is None else value


class IconPayload(AssetsBaseModel):
    id: str
    name: str = ""
    url16: str = ""
    url48: str = ""

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, value: object) -> object:
        return str(value) if isinstance(value, int) else value


class ObjectSchemaPayloadResponse(AssetsBaseModel):
    workspace_id: str = Field(default="", alias="workspaceId")
    global_id: str = Field(default="", alias="globalId")
    id: str
    name: str = ""
    object_schema_key: str = Field(default="", alias="objectSchemaKey")
    description: str = ""
    status: str = ""
    created: str = ""
    updated: str = ""
    object_count: int = Field(default=0, alias="objectCount")
    object_type_count: int = Field(default=0, alias="objectTypeCount")
    can_manage: bool = Field(default=False, alias="canManage")

    _normalize = field_validator("description", "status", mode="before")(_none_to_blank)


class ObjectTypePayloadResponse(AssetsBaseModel):
    workspace_id: str = Field(default="", alias="workspaceId")
    global_id: str = Field(default="", alias="globalId")
    id: str
    name: str = ""
    description: str = ""
    icon: IconPayload | None = None
    position: int = 0
    created: str = ""
    updated: str = ""
    object_count: int = Field(default=0, alias="objectCount")
    parent_object_type_id: str = Field(default="", alias="parentObjectTypeId")
    object_schema_id: str = Field(default="", alias="objectSchemaId")
    inherited: bool = False
    abstract_object_type: bool = Field(default=False, alias="abstractObjectType")
    parent_object_type_inherited: bool = Field(
        default=False, alias="parentObjectTypeInherited"
    )

    _normalize = field_validator("description", "parent_object_type_id", mode="before")(
        _none_to_blank
    )


class ErrorResponse(AssetsBaseModel):
    error_messages: list[str] = Field(default_factory=list, alias="errorMessages")
    errors: dict[str, str] = Field(default_factory=dict)

    def message(self) -> str:
        parts = list(self.error_messages)
        parts.extend(f"{key}: {value}" for key, value in sorted(self.errors.items()))
        return "; ".join(parts)


# --- requests --------------------------------------------------------------


class ObjectPayloadAttributeValue(AssetsBaseModel):
    value: str


class ObjectPayloadAttribute(AssetsBaseModel):
    object_type_attribute_id: str = Field(alias="objectTypeAttributeId")
    object_attribute_values: list[ObjectPayloadAttributeValue] = Field(
        alias="objectAttributeValues"
    )


class ObjectPayload(AssetsBaseModel):
    """Body of the create-object and update-object calls."""

    object_type_id: str = Field(alias="objectTypeId")
    attributes: list[ObjectPayloadAttribute]
    has_avatar: bool | None = Field(default=None, alias="hasAvatar")
    avatar_uuid: str | None = Field(default=None, alias="avatarUUID")

    def to_request_body(self) -> dict[str, object]:
        return self.model_dump(by_alias=True, exclude_none=True)


class ObjectSchemaRequest(AssetsBaseModel):
    name: str
    object_schema_key: str = Field(alias="objectSchemaKey")
    description: str = ""

    def to_request_body(self) -> dict[str, object]:
        return self.model_dump(by_alias=True)


class ObjectTypeRequest(AssetsBaseModel):
    name: str
    icon_id: str = Field(alias="iconId")
    object_schema_id: str = Field(alias="objectSchemaId")
    description: str = ""
    parent_object_type_id: str | None = Field(default=None, alias="parentObjectTypeId")
    inherited: bool = False
    abstract_object_type: bool = Field(default=False, alias="abstractObjectType")

    def to_request_body(self) -> dict[str, object]:
        return self.model_dump(by_alias=True, exclude_none=True)


class ObjectTypeAttributeRequest(AssetsBaseModel):
    """Body of the create and update object type attribute calls.

    Optional numeric settings are left out when undeclared so the service keeps
    its defaults.
    """

    name: str
    label: bool = False
    type: int | None = None
    description: str = ""
    default_type_id: int | None = Field(default=None, alias="defaultTypeId")
    type_value: str = Field(default="", alias="typeValue")
    type_value_multi: list[str] | None = Field(default=None, alias="typeValueMulti")
    additional_value: str = Field(default="", alias="additionalValue")
    summable: bool = False
    minimum_cardinality: int | None = Field(default=None, alias="minimumCardinality")
    maximum_cardinality: int | None = Field(default=None, alias="maximumCardinality")
    suffix: str = ""
    hidden: bool = False
    include_child_object_types: bool = Field(default=False, alias="includeChildObjectTypes")
    unique_attribute: bool = Field(default=False, alias="uniqueAttribute")
    regex_validation: str = Field(default="", alias="regexValidation")
    ql_query: str = Field(default="", alias="qlQuery")
    options: str = ""

    def to_request_body(self) -> dict[str, object]:
        return self.model_dump(by_alias=True, exclude_none=True)


# --- declared input documents ----------------------------------------------


class DeclaredValueInput(AssetsBaseModel):
    value: str


class DeclaredAttributeInput(AssetsBaseModel):
    type_attribute_id: str = Field(
        validation_alias=AliasChoices(
            "typeAttributeId", "objectTypeAttributeId", "type_attribute_id"
        )
    )
    values: list[DeclaredValueInput] = Field(
        default_factory=list["DeclaredValueInput"],
        validation_alias=AliasChoices("values", "objectAttributeValues"),
    )

    @field_validator("type_attribute_id", mode="before")
    @classmethod
    def _coerce_id(cls, value: object) -> object:
        return str(value) if isinstance(value, int) else value
