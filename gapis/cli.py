"""Command line engine shared by the per-API console scripts.

Every API exposes its methods as ``<api> <resource> <method> <positional...>``
with ``-r`` to set request fields, ``-p`` to set parameters and ``-o`` to
choose where the JSON result goes.
"""
from __future__ import annotations
import argparse
import difflib
import json
import logging
import os
import re
import sys
import typing
from dataclasses import dataclass, field
from typing import IO, Any, Dict, List, Optional, Sequence, Tuple, Type

from . import __version__
from .auth import Authenticator, authorized_user_authenticator, default_authenticator, env_authenticator
from .client import CallBuilder, Hub, Param
from .config import (DEFAULT_CONFIG_DIR, application_secret_from_directory,
                     assure_config_dir_exists, default_secret_json, token_path)
from .errors import (ApiError, CLIError, ConfigurationError, FieldError, InvalidKeyValueSyntax,
                     InvalidOptionsError, ParseError, TokenError, UnknownParameter)
from .schema import FieldInfo, Schema, is_schema, remove_json_null_values, schema_fields

_LOGGER = logging.getLogger(__name__)

FIELD_SEP = "."

# Parameters every method accepts, as typed on the command line.
GLOBAL_PARAMS = ["$-xgafv", "access-token", "alt", "callback", "fields", "key", "oauth-token",
                 "pretty-print", "quota-user", "upload-type", "upload-protocol"]
# Wire names of the global parameters, where they differ.
GLOBAL_PARAM_MAP = {
    "$-xgafv": "$.xgafv",
    "access-token": "access_token",
    "oauth-token": "oauth_token",
    "pretty-print": "prettyPrint",
    "quota-user": "quotaUser",
    "upload-type": "uploadType",
    "upload-protocol": "upload_protocol",
}


def kebab_case(name: str) -> str:
    """``cvssV3`` -> ``cvss-v3``, ``_type`` -> ``-type``."""
    return re.sub(r"[A-Z]", lambda m: "-" + m.group(0).lower(), name).replace("_", "-")


def snake_case(name: str) -> str:
    return re.sub(r"[A-Z]", lambda m: "_" + m.group(0).lower(), name)


def did_you_mean(value: str, candidates: Sequence[str]) -> Optional[str]:
    matches = difflib.get_close_matches(value, list(candidates), n=1, cutoff=0.6)
    return matches[0] if matches else None


def parse_kv_arg(kv: str, is_hashmap: bool = False) -> Tuple[str, str]:
    """Split ``key=value`` on the first ``=``; the value must not be empty."""
    key, sep, value = kv.partition("=")
    if not sep or not value:
        raise InvalidKeyValueSyntax(kv, is_hashmap)
    return key, value


class FieldCursor:
    """Position in a nested request structure, moved by dotted keys.

    ``a.b`` descends relative to the current position, ``.a`` starts from the
    root, each extra ``.`` after the first moves one level up and a lone
    ``.`` goes back to the root.
    """

    def __init__(self, path: Optional[Sequence[str]] = None):
        self.path: List[str] = list(path or [])

    def copy(self) -> "FieldCursor":
        return FieldCursor(self.path)

    def set(self, value: str) -> None:
        if not value:
            raise FieldError("Field names must not be empty")
        fields = list(self.path)
        current = ""
        first_is_sep = False
        consecutive_seps = 0
        last = FIELD_SEP
        for i, c in enumerate(value):
            if c == FIELD_SEP:
                if i == 0:
                    first_is_sep = True
                consecutive_seps += 1
                if i > 0 and last == FIELD_SEP:
                    if not fields:
                        raise FieldError(f"'{value}': Cannot move up on empty field cursor")
                    fields.pop()
                elif current:
                    fields.append(current)
                    current = ""
            else:
                consecutive_seps = 0
                if i == 1 and first_is_sep:
                    fields = []
                current += c
            last = c
        if current:
            fields.append(current)
        if len(value) == 1 and first_is_sep:
            fields = []
        if len(value) > 1 and consecutive_seps == 1:
            raise FieldError(f"'{value}': Single field separator may not be last character")
        self.path = fields

    def resolve(self, schema: Type[Schema]) -> List[FieldInfo]:
        """Map the kebab-case path onto the fields of ``schema``, outermost first."""
        if not self.path:
            raise FieldError("Field names must not be empty")
        chain: List[FieldInfo] = []
        cls: Any = schema
        for depth, part in enumerate(self.path):
            by_name = {kebab_case(wire): info for wire, info in schema_fields(cls).items()}
            info = by_name.get(part)
            nested = depth + 1 < len(self.path)
            if info is None or (nested and (info.container != "scalar" or not is_schema(info.item_type))):
                suggestion = did_you_mean(part, list(by_name))
                hint = f" Did you mean '{suggestion}'?" if suggestion else ""
                raise FieldError(f"Field '{self}' does not exist.{hint}")
            chain.append(info)
            cls = info.item_type
        return chain

    def __str__(self) -> str:
        return FIELD_SEP.join(self.path)


def arg_from_str(arg: str, arg_name: str, kind: Any) -> Any:
    if kind is bool:
        if arg not in ("true", "false"):
            raise ParseError(arg_name, "boolean", arg, "provided string was not `true` or `false`")
        return arg == "true"
    if kind in (int, float):
        try:
            return kind(arg)
        except ValueError as e:
            raise ParseError(arg_name, kind.__name__, arg, str(e)) from e
    return arg


def set_json_value(obj: Dict[str, Any], chain: List[FieldInfo], value: str, arg_name: str) -> None:
    """Store ``value`` at the field described by ``chain`` inside ``obj``."""
    leaf = chain[-1]
    if is_schema(leaf.item_type):
        raise FieldError(f"Field '{arg_name}' is a structure and cannot be set from a value")
    target = obj
    for info in chain[:-1]:
        target = target.setdefault(info.wire, {})
    if leaf.container == "list":
        target.setdefault(leaf.wire, []).append(arg_from_str(value, arg_name, leaf.item_type))
    elif leaf.container == "map":
        key, item = parse_kv_arg(value, is_hashmap=True)
        target.setdefault(leaf.wire, {})[key] = arg_from_str(item, arg_name, leaf.item_type)
    else:
        target[leaf.wire] = arg_from_str(value, arg_name, leaf.item_type)


def request_from_kv_args(schema: Type[Schema], kv_args: Sequence[str],
                         issues: List[CLIError]) -> Schema:
    """Build a request object from ``-r`` arguments, appending problems to ``issues``."""
    cursor = FieldCursor()
    obj: Dict[str, Any] = {}
    for kv in kv_args:
        key, sep, value = kv.partition("=")
        temp = cursor.copy()
        try:
            temp.set(key)
        except FieldError as e:
            issues.append(e)
            continue
        if not sep:
            cursor = temp
            continue
        try:
            if not value:
                raise InvalidKeyValueSyntax(kv)
            set_json_value(obj, temp.resolve(schema), value, str(temp))
        except CLIError as e:
            issues.append(e)
    return schema.from_dict(obj)


def apply_params(call: CallBuilder, params: Sequence[str], issues: List[CLIError]) -> None:
    """Apply ``-p`` arguments: method parameters through their setters, globals via ``param``."""
    declared: Dict[str, Param] = {kebab_case(p.name): p for p in call.query_params()}
    for kv in params:
        try:
            key, value = parse_kv_arg(kv)
        except InvalidKeyValueSyntax as e:
            issues.append(e)
            continue
        p = declared.get(key)
        if p is not None:
            setter = ("add_" if p.repeated else "") + snake_case(p.name)
            try:
                getattr(call, setter)(arg_from_str(value, key, p.kind))
            except ParseError as e:
                issues.append(e)
        elif key in GLOBAL_PARAMS:
            call.param(GLOBAL_PARAM_MAP.get(key, key), value)
        else:
            issues.append(UnknownParameter(key, did_you_mean(key, GLOBAL_PARAMS + list(declared))))


@dataclass(frozen=True)
class Method:
    """One CLI subcommand: ``name`` under its resource, calling ``builder`` on the resource."""
    name: str
    builder: str
    positionals: Tuple[Tuple[str, str], ...] = ()
    about: str = ""


@dataclass(frozen=True)
class Api:
    name: str
    hub: Type[Hub]
    description: str = ""
    resources: Dict[str, List[Method]] = field(default_factory=dict)

    def method(self, resource: str, name: str) -> Method:
        for m in self.resources[resource]:
            if m.name == name:
                return m
        raise KeyError(f"{resource} {name}")

    def call_class(self, resource: str, method: Method) -> Type[CallBuilder]:
        return method_call_class(self.hub, resource, method.builder)


def method_call_class(hub: Type[Hub], resource: str, builder: str) -> Type[CallBuilder]:
    """The CallBuilder subclass a builder method returns, read from its return annotations."""
    methods = typing.get_type_hints(getattr(hub, resource))["return"]
    return typing.get_type_hints(getattr(methods, builder))["return"]


def build_parser(api: Api) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog=api.name, description=api.description)
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--scope", dest="scopes", action="append", metavar="URL",
                        help="Authorization scope for the method; defaults to the method's scope.")
    parser.add_argument("--config-dir", default=DEFAULT_CONFIG_DIR,
                        help=f"Directory for persistent data. [default: {DEFAULT_CONFIG_DIR}]")
    parser.add_argument("--debug", action="store_true", help="Debug print all errors")
    resources = parser.add_subparsers(dest="resource", metavar="<resource>", required=True)
    for resource, methods in api.resources.items():
        rparser = resources.add_parser(resource, help="methods: " + ", ".join(m.name for m in methods))
        msub = rparser.add_subparsers(dest="method", metavar="<method>", required=True)
        for m in methods:
            mparser = msub.add_parser(m.name, help=m.about, description=m.about)
            for name, help_text in m.positionals:
                mparser.add_argument(name, help=help_text)
            if api.call_class(resource, m)._request is not None:
                mparser.add_argument("-r", dest="kv", action="append", required=True, metavar="KEY=VALUE",
                                     help="Set various fields of the request structure, matching the key=value form")
            mparser.add_argument("-p", dest="params", action="append", default=[], metavar="KEY=VALUE",
                                 help="Set various optional parameters, matching the key=value form")
            mparser.add_argument("-o", dest="out", default="-", metavar="FILE",
                                 help="Specify the file into which to write the program's output")
    return parser


def build_call(hub: Hub, method: Method, resource: str, ns: argparse.Namespace) -> CallBuilder:
    """Turn parsed options into a ready call, raising InvalidOptionsError with every issue found."""
    issues: List[CLIError] = []
    args: List[Any] = []
    request_type = method_call_class(type(hub), resource, method.builder)._request
    if request_type is not None:
        args.append(request_from_kv_args(request_type, ns.kv or [], issues))
    args.extend(getattr(ns, name) for name, _ in method.positionals)
    call = getattr(getattr(hub, resource)(), method.builder)(*args)
    apply_params(call, ns.params, issues)
    if issues:
        raise InvalidOptionsError(issues)
    for scope in ns.scopes or []:
        call.add_scope(scope)
    return call


def resolve_authenticator(config_dir: str, api_name: str,
                          secret: Dict[str, Any]) -> Optional[Authenticator]:
    """Stored user token first, then the access token variable, then Application Default Credentials."""
    path = token_path(config_dir, api_name)
    if os.path.exists(path):
        try:
            return authorized_user_authenticator(path, secret.get("client_id") or None,
                                                 secret.get("client_secret") or None)
        except (OSError, ValueError, TokenError) as e:
            _LOGGER.warning("Ignoring token file %s: %s", path, e)
    auth = env_authenticator()
    if auth is not None:
        return auth
    try:
        return default_authenticator()
    except TokenError as e:
        _LOGGER.warning("No credentials found, calls need an API key: %s", e)
        return None


def _open_output(path: str) -> IO[str]:
    if path == "-":
        return sys.stdout
    return open(path, "w", encoding="utf-8")


def run(api: Api, argv: Optional[Sequence[str]] = None, **hub_kwargs: Any) -> int:
    """Execute one command line; returns the process exit code."""
    ns = build_parser(api).parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if ns.debug else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    try:
        config_dir = assure_config_dir_exists(ns.config_dir)
    except ConfigurationError as e:
        err = InvalidOptionsError.single(e, 3)
        print(err, file=sys.stderr)
        return err.exit_code
    try:
        secret = application_secret_from_directory(config_dir, f"{api.name}-secret.json",
                                                   default_secret_json())
    except ConfigurationError as e:
        err = InvalidOptionsError.single(e, 4)
        print(err, file=sys.stderr)
        return err.exit_code

    method = api.method(ns.resource, ns.method)
    with api.hub(**hub_kwargs) as hub:
        try:
            call = build_call(hub, method, ns.resource, ns)
        except InvalidOptionsError as err:
            print(err, file=sys.stderr)
            return err.exit_code

        hub.auth = resolve_authenticator(config_dir, api.name, secret)
        try:
            out = _open_output(ns.out)
        except OSError as e:
            print(f"Failed to open output file '{ns.out}': {e}", file=sys.stderr)
            return 1
        try:
            try:
                _, result = call.execute()
            except ApiError as e:
                print(repr(e) if ns.debug else e, file=sys.stderr)
                return 1
            out.write(json.dumps(remove_json_null_values(result.to_dict()), indent=2))
            out.write("\n")
            out.flush()
        finally:
            if out is not sys.stdout:
                out.close()
    return 0
