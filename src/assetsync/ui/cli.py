from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import fields, is_dataclass
from enum import Enum
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from assetsync.adapters.assets import parse_declared_attributes
from assetsync.app import (
    delete_object,
    list_global_icons,
    list_object_type_attributes,
    plan_object,
    read_icon,
    read_object,
    read_object_schema,
    read_object_type,
)
from assetsync.config import configure_logging
from assetsync.domain.diagnostics import Severity

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

    from assetsync.domain.diagnostics import Diagnostics
    from assetsync.domain.model import DeclaredAttribute

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Synchronise Atlassian Assets objects")
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    obj = subparsers.add_parser("object", help="Asset object commands")
    obj_sub = obj.add_subparsers(dest="object_command", required=True)

    obj_get = obj_sub.add_parser("get", help="Print an object as JSON")
    obj_get.add_argument("object_id", type=str, help="Id of the object")

    obj_plan = obj_sub.add_parser(
        "plan",
        help="Resolve label and avatar for declared attributes against the remote object",
    )
    obj_plan.add_argument("object_id", type=str, help="Id of the object")
    obj_plan.add_argument(
        "--attributes",
        type=Path,
        required=True,
        help="JSON file with [{typeAttributeId, values: [{value}]}]",
    )
    obj_plan.add_argument(
        "--avatar-uuid",
        type=str,
        help="Proposed avatar uuid (defaults to the current one, empty string for none)",
    )

    obj_delete = obj_sub.add_parser(
        "delete", help="Delete an object, or mark it obsolete when destroy is disabled"
    )
    obj_delete.add_argument("object_id", type=str, help="Id of the object")

    attributes = subparsers.add_parser(
        "attributes", help="List attributes of an object type or of a whole object schema"
    )
    attributes.add_argument(
        "object_type_id", type=str, nargs="?", default="", help="Id of the object type"
    )
    attributes.add_argument(
        "--schema",
        dest="object_schema_id",
        type=str,
        default="",
        help="List the attributes of every object type in this object schema",
    )

    schema = subparsers.add_parser("schema", help="Object schema commands")
    schema_sub = schema.add_subparsers(dest="schema_command", required=True)
    schema_get = schema_sub.add_parser("get", help="Print an object schema as JSON")
    schema_get.add_argument("object_schema_id", type=str, help="Id of the object schema")

    objecttype = subparsers.add_parser("objecttype", help="Object type commands")
    objecttype_sub = objecttype.add_subparsers(dest="objecttype_command", required=True)
    objecttype_get = objecttype_sub.add_parser("get", help="Print an object type as JSON")
    objecttype_get.add_argument("object_type_id", type=str, help="Id of the object type")

    icon = subparsers.add_parser("icon", help="Icon lookups")
    icon_sub = icon.add_subparsers(dest="icon_command", required=True)
    icon_get = icon_sub.add_parser("get", help="Print an icon as JSON")
    icon_get.add_argument("icon_id", type=str, help="Id of the icon")
    icon_sub.add_parser("global", help="List the icons shared by all schemas")

    parsed = parser.parse_args(list(argv))
    if parsed.command == "attributes" and not (parsed.object_type_id or parsed.object_schema_id):
        parser.error("attributes needs an object type id or --schema")
    return parsed


def _load_declared_attributes(path: Path) -> tuple[DeclaredAttribute, ...]:
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ValueError(f"Cannot read attributes file {path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise ValueError(f"Attributes file {path} is not valid JSON: {exc}") from exc
    return parse_declared_attributes(raw)


def _to_jsonable(value: object) -> object:
    if is_dataclass(value) and not isinstance(value, type):
        return {item.name: _to_jsonable(getattr(value, item.name)) for item in fields(value)}
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, frozenset):
        return sorted((_to_jsonable(item) for item in value), key=json.dumps)
    if isinstance(value, (list, tuple)):
        return [_to_jsonable(item) for item in value]
    return value


def _emit(value: object) -> None:
    print(json.dumps(_to_jsonable(value), indent=2, sort_keys=True))  # noqa: T201


def _report(diagnostics: Diagnostics) -> bool:
    for diagnostic in diagnostics:
        if diagnostic.severity is Severity.ERROR:
            log.error("%s", diagnostic)
        else:
            log.warning("%s", diagnostic)
    return not diagnostics.has_error()


def _run_catalog(parsed_args: argparse.Namespace) -> bool:
    if parsed_args.command == "attributes":
        attributes_lookup = list_object_type_attributes(
            parsed_args.object_type_id, object_schema_id=parsed_args.object_schema_id
        )
        found: object = attributes_lookup.attributes
        diagnostics = attributes_lookup.diagnostics
    elif parsed_args.command == "schema":
        schema_lookup = read_object_schema(parsed_args.object_schema_id)
        found, diagnostics = schema_lookup.object_schema, schema_lookup.diagnostics
    elif parsed_args.command == "objecttype":
        type_lookup = read_object_type(parsed_args.object_type_id)
        found, diagnostics = type_lookup.object_type, type_lookup.diagnostics
    elif parsed_args.command == "icon" and parsed_args.icon_command == "global":
        icons_lookup = list_global_icons()
        found, diagnostics = icons_lookup.icons, icons_lookup.diagnostics
    elif parsed_args.command == "icon":
        icon_lookup = read_icon(parsed_args.icon_id)
        found, diagnostics = icon_lookup.icon, icon_lookup.diagnostics
    else:
        raise ValueError(f"Unsupported command: {parsed_args.command}")

    if not diagnostics.has_error():
        _emit(found)
    return _report(diagnostics)


def _run(parsed_args: argparse.Namespace, declared: tuple[DeclaredAttribute, ...]) -> bool:
    if parsed_args.command != "object":
        return _run_catalog(parsed_args)

    command = parsed_args.object_command
    if command == "get":
        object_lookup = read_object(parsed_args.object_id)
        if object_lookup.object is not None:
            _emit(object_lookup.object)
        return _report(object_lookup.diagnostics)
    if command == "plan":
        resolution, diagnostics = plan_object(
            parsed_args.object_id,
            declared,
            avatar_uuid=parsed_args.avatar_uuid,
        )
        if resolution is None:
            return _report(diagnostics)
        if resolution.planned is not None:
            _emit(resolution.planned)
        return _report(resolution.diagnostics)
    if command == "delete":
        ok = _report(delete_object(parsed_args.object_id))
        if ok:
            log.info("Object %s removed", parsed_args.object_id)
        return ok
    raise ValueError(f"Unsupported command: {parsed_args.command}")


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    parsed_args: argparse.Namespace
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    declared: tuple[DeclaredAttribute, ...] = ()
    try:
        parsed_args = _parse_args(args_list)
        configure_logging(level=logging.DEBUG if parsed_args.verbose else logging.INFO)
        if parsed_args.command == "object" and parsed_args.object_command == "plan":
            declared = _load_declared_attributes(parsed_args.attributes)
    except ValueError:
        log.exception("CLI validation error")
        sys.exit(2)

    try:
        ok = _run(parsed_args, declared)
    except Exception:
        log.exception("Fatal error during %s", parsed_args.command)
        sys.exit(1)
    if not ok:
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    """Console script entry point."""
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
