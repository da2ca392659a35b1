"""HTTP gateway for the Assets REST API."""

from __future__ import annotations

import asyncio
from logging import getLogger
from typing import TYPE_CHECKING

import httpx
from pydantic import ValidationError as PydanticValidationError

from assetsync.adapters.http_resilience import ResilientClient
from assetsync.domain.errors import RemoteError

from .schema import (
    ErrorResponse,
    IconPayload,
    ObjectPayloadResponse,
    ObjectSchemaPayloadResponse,
    ObjectTypeAttributePayload,
    ObjectTypePayloadResponse,
)
from .translator import (
    translate_icon,
    translate_object,
    translate_object_schema,
    translate_object_type,
    translate_object_type_attribute,
)

if TYPE_CHECKING:
    from collections.abc import Callable

    from pydantic import BaseModel

    from assetsync.config.assets import AssetsConfig
    from assetsync.config.http_resilience import ResilienceConfig
    from assetsync.domain.model import (
        AssetObject,
        Icon,
        ObjectSchema,
        ObjectType,
        ObjectTypeAttribute,
    )

    from .schema import (
        ObjectPayload,
        ObjectSchemaRequest,
        ObjectTypeAttributeRequest,
        ObjectTypeRequest,
    )

log = getLogger(__name__)


def _default_client_factory(config: ResilienceConfig) -> ResilientClient:
    return ResilientClient(config)


class AssetsClient:
    """Synchronous facade over the async Assets API calls.

    Every call opens its own HTTP client and closes it before returning, so no
    connection state is shared between resource instances.
    """

    def __init__(
        self,
        *,
        config: AssetsConfig,
        client_factory: Callable[[ResilienceConfig], ResilientClient] | None = None,
    ) -> None:
        self._config = config
        self._resilience = config.resilience
        self._client_factory = client_factory or _default_client_factory

    @property
    def workspace_id(self) -> str:
        return self._config.workspace_id

    # --- objects ------------------------------------------------------------

    def get_object(self, object_id: str) -> AssetObject:
        return asyncio.run(self._get_object_async(object_id))

    def create_object(self, payload: ObjectPayload) -> AssetObject:
        return asyncio.run(self._create_object_async(payload))

    def update_object(self, object_id: str, payload: ObjectPayload) -> AssetObject:
        return asyncio.run(self._update_object_async(object_id, payload))

    def delete_object(self, object_id: str) -> None:
        asyncio.run(
            self._perform_request("DELETE", f"object/{object_id}", operation="delete object")
        )

    def list_object_type_attributes(self, object_type_id: str) -> tuple[ObjectTypeAttribute, ...]:
        return asyncio.run(self._list_object_type_attributes_async(object_type_id))

    # --- object schemas -----------------------------------------------------

    def get_object_schema(self, object_schema_id: str) -> ObjectSchema:
        return asyncio.run(self._object_schema_call("GET", f"objectschema/{object_schema_id}"))

    def create_object_schema(self, payload: ObjectSchemaRequest) -> ObjectSchema:
        return asyncio.run(
            self._object_schema_call("POST", "objectschema/create", body=payload.to_request_body())
        )

    def update_object_schema(
        self, object_schema_id: str, payload: ObjectSchemaRequest
    ) -> ObjectSchema:
        return asyncio.run(
            self._object_schema_call(
                "PUT", f"objectschema/{object_schema_id}", body=payload.to_request_body()
            )
        )

    def delete_object_schema(self, object_schema_id: str) -> None:
        asyncio.run(
            self._perform_request(
                "DELETE", f"objectschema/{object_schema_id}", operation="delete object schema"
            )
        )

    def list_object_schema_attributes(
        self, object_schema_id: str
    ) -> tuple[ObjectTypeAttribute, ...]:
        return asyncio.run(self._list_object_schema_attributes_async(object_schema_id))

    # --- object types -------------------------------------------------------

    def get_object_type(self, object_type_id: str) -> ObjectType:
        return asyncio.run(self._object_type_call("GET", f"objecttype/{object_type_id}"))

    def create_object_type(self, payload: ObjectTypeRequest) -> ObjectType:
        return asyncio.run(
            self._object_type_call("POST", "objecttype/create", body=payload.to_request_body())
        )

    def update_object_type(self, object_type_id: str, payload: ObjectTypeRequest) -> ObjectType:
        return asyncio.run(
            self._object_type_call(
                "PUT", f"objecttype/{object_type_id}", body=payload.to_request_body()
            )
        )

    def delete_object_type(self, object_type_id: str) -> None:
        asyncio.run(
            self._perform_request(
                "DELETE", f"objecttype/{object_type_id}", operation="delete object type"
            )
        )

    # --- object type attributes ---------------------------------------------

    def create_object_type_attribute(
        self, object_type_id: str, payload: ObjectTypeAttributeRequest
    ) -> ObjectTypeAttribute:
        return asyncio.run(
            self._object_type_attribute_call(
                "POST",
                f"objecttypeattribute/{object_type_id}",
                object_type_id=object_type_id,
                body=payload.to_request_body(),
            )
        )

    def update_object_type_attribute(
        self, object_type_id: str, attribute_id: str, payload: ObjectTypeAttributeRequest
    ) -> ObjectTypeAttribute:
        return asyncio.run(
            self._object_type_attribute_call(
                "PUT",
                f"objecttypeattribute/{object_type_id}/{attribute_id}",
                object_type_id=object_type_id,
                body=payload.to_request_body(),
            )
        )

    def delete_object_type_attribute(self, attribute_id: str) -> None:
        asyncio.run(
            self._perform_request(
                "DELETE",
                f"objecttypeattribute/{attribute_id}",
                operation="delete object type attribute",
            )
        )

    # --- icons --------------------------------------------------------------

    def get_icon(self, icon_id: str) -> Icon:
        return asyncio.run(self._get_icon_async(icon_id))

    def list_global_icons(self) -> tuple[Icon, ...]:
        return asyncio.run(self._list_global_icons_async())

    # --- async implementations ----------------------------------------------

    async def _get_object_async(self, object_id: str) -> AssetObject:
        operation = "get object"
        payload = await self._perform_request("GET", f"object/{object_id}", operation=operation)
        return translate_object(_validate(payload, ObjectPayloadResponse, operation=operation))

    async def _create_object_async(self, payload: ObjectPayload) -> AssetObject:
        operation = "create object"
        response = await self._perform_request(
            "POST", "object/create", operation=operation, body=payload.to_request_body()
        )
        return translate_object(_validate(response, ObjectPayloadResponse, operation=operation))

    async def _update_object_async(self, object_id: str, payload: ObjectPayload) -> AssetObject:
        operation = "update object"
        response = await self._perform_request(
            "PUT", f"object/{object_id}", operation=operation, body=payload.to_request_body()
        )
        return translate_object(_validate(response, ObjectPayloadResponse, operation=operation))

    async def _list_object_type_attributes_async(
        self, object_type_id: str
    ) -> tuple[ObjectTypeAttribute, ...]:
        operation = "list object type attributes"
        payload = await self._perform_request(
            "GET", f"objecttype/{object_type_id}/attributes", operation=operation
        )
        definitions = _validate_list(payload, ObjectTypeAttributePayload, operation=operation)
        return tuple(
            translate_object_type_attribute(definition, object_type_id=object_type_id)
            for definition in definitions
        )

    async def _list_object_schema_attributes_async(
        self, object_schema_id: str
    ) -> tuple[ObjectTypeAttribute, ...]:
        operation = "list object schema attributes"
        # extended listings carry the owning object type of every attribute
        payload = await self._perform_request(
            "GET",
            f"objectschema/{object_schema_id}/attributes",
            operation=operation,
            params={"extended": "true"},
        )
        definitions = _validate_list(payload, ObjectTypeAttributePayload, operation=operation)
        return tuple(translate_object_type_attribute(definition) for definition in definitions)

    async def _object_schema_call(
        self, method: str, path: str, *, body: dict[str, object] | None = None
    ) -> ObjectSchema:
        operation = f"{_VERBS[method]} object schema"
        payload = await self._perform_request(method, path, operation=operation, body=body)
        return translate_object_schema(
            _validate(payload, ObjectSchemaPayloadResponse, operation=operation)
        )

    async def _object_type_call(
        self, method: str, path: str, *, body: dict[str, object] | None = None
    ) -> ObjectType:
        operation = f"{_VERBS[method]} object type"
        payload = await self._perform_request(method, path, operation=operation, body=body)
        return translate_object_type(
            _validate(payload, ObjectTypePayloadResponse, operation=operation)
        )

    async def _object_type_attribute_call(
        self,
        method: str,
        path: str,
        *,
        object_type_id: str,
        body: dict[str, object],
    ) -> ObjectTypeAttribute:
        operation = f"{_VERBS[method]} object type attribute"
        payload = await self._perform_request(method, path, operation=operation, body=body)
        return translate_object_type_attribute(
            _validate(payload, ObjectTypeAttributePayload, operation=operation),
            object_type_id=object_type_id,
        )

    async def _get_icon_async(self, icon_id: str) -> Icon:
        operation = "get icon"
        payload = await self._perform_request("GET", f"icon/{icon_id}", operation=operation)
        return translate_icon(_validate(payload, IconPayload, operation=operation))

    async def _list_global_icons_async(self) -> tuple[Icon, ...]:
        operation = "list global icons"
        payload = await self._perform_request("GET", "icon/global", operation=operation)
        icons = _validate_list(payload, IconPayload, operation=operation)
        return tuple(translate_icon(icon) for icon in icons)

    async def _perform_request(
        self,
        method: str,
        path: str,
        *,
        operation: str,
        body: dict[str, object] | None = None,
        params: dict[str, str] | None = None,
    ) -> object:
        log.debug("Assets %s %s", method, path)
        try:
            async with self._client_factory(self._resilience) as client:
                if body is None:
                    response = await client.request(method, path, params=params)
                else:
                    response = await client.request(method, path, json=body, params=params)
                response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise RemoteError(
                _error_message(exc.response),
                operation=operation,
                status_code=exc.response.status_code,
            ) from exc
        except httpx.HTTPError as exc:
            raise RemoteError(str(exc) or type(exc).__name__, operation=operation) from exc

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as exc:
            raise RemoteError(
                "Assets API returned a non-JSON body",
                operation=operation,
                status_code=response.status_code,
            ) from exc


_VERBS = {"GET": "get", "POST": "create", "PUT": "update"}


def _validate[M: BaseModel](payload: object, model: type[M], *, operation: str) -> M:
    if not isinstance(payload, dict):
        raise RemoteError("Unexpected Assets response payload", operation=operation)
    try:
        return model.model_validate(payload)
    except PydanticValidationError as exc:
        raise RemoteError("Unexpected Assets response payload", operation=operation) from exc


def _validate_list[M: BaseModel](payload: object, model: type[M], *, operation: str) -> list[M]:
    if not isinstance(payload, list):
        raise RemoteError("Unexpected Assets response payload", operation=operation)
    try:
        return [model.model_validate(item) for item in payload]
    except PydanticValidationError as exc:
        raise RemoteError("Unexpected Assets response payload", operation=operation) from exc


def _error_message(response: httpx.Response) -> str:
    try:
        payload = response.json()
    except ValueError:
        return response.text or response.reason_phrase
    if isinstance(payload, dict):
        try:
            message = ErrorResponse.model_validate(payload).message()
        except PydanticValidationError:
            message = ""
        if message:
            return message
    return response.text or response.reason_phrase
