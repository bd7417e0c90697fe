"""Minimal command line surface for inspecting the PATH tool policy."""

from __future__ import annotations

import argparse
import json
import logging
from typing import Sequence

from toolpolicy_core.app import ToolPolicyApp
from toolpolicy_core.config import ConfigError, LOG_LEVELS, SettingsResolver
from toolpolicy_core.policy import PRESETS, PolicyRecord, preset_name

CLI_VERSION = "0.1.0"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="toolpolicy",
        description="Inspect which $PATH tools the build interposer allows, logs or refuses.",
    )
    parser.add_argument("--version", action="version", version=f"toolpolicy v{CLI_VERSION}")
    parser.add_argument("--platform", help="host platform to adjust for (default: detected)")
    parser.add_argument(
        "--log-level",
        dest="log_level",
        type=str.upper,
        choices=LOG_LEVELS,
        help="logging level (default: WARNING)",
    )
    parser.add_argument("--config", dest="config_file", help="alternative config.toml")
    subparsers = parser.add_subparsers(dest="command")
    subparsers.required = False

    lookup_cmd = subparsers.add_parser("lookup", help="show the policy for tool names")
    lookup_cmd.add_argument("names", nargs="+", help="executable names as invoked from PATH")
    lookup_cmd.add_argument("--format", choices=["text", "json"], default="text")
    lookup_cmd.set_defaults(func=_handle_lookup)

    list_cmd = subparsers.add_parser("list", help="list every registered tool")
    list_cmd.add_argument("--preset", choices=sorted(PRESETS), help="only show this preset")
    list_cmd.add_argument("--format", choices=["text", "json"], default="text")
    list_cmd.set_defaults(func=_handle_list)

    status_cmd = subparsers.add_parser("status", help="show the resolved platform and table size")
    status_cmd.set_defaults(func=_handle_status)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    func = getattr(args, "func", None)
    if func is None:
        parser.print_help()
        return 0

    resolver = SettingsResolver(
        cli_overrides={
            "platform": args.platform,
            "log_level": args.log_level,
            "config_file": args.config_file,
        }
    )
    try:
        settings = resolver.resolve()
    except ConfigError as exc:
        print(f"[toolpolicy] error: {exc}")
        return 1
    logging.basicConfig(level=settings.log_level_value)

    app = ToolPolicyApp(settings=settings)
    app.bootstrap()
    return func(app, args)


def _handle_lookup(app: ToolPolicyApp, args: argparse.Namespace) -> int:
    results = [(name, app.registry.lookup(name)) for name in args.names]
    if args.format == "json":
        payload = [_record_payload(name, record) for name, record in results]
        print(json.dumps({"platform": app.settings.platform, "tools": payload}, indent=2))
        return 0

    for name, record in results:
        print(f"[toolpolicy:lookup] {_record_line(name, record)}")
    return 0


def _handle_list(app: ToolPolicyApp, args: argparse.Namespace) -> int:
    entries = app.registry.entries()
    if args.preset:
        entries = tuple(
            (name, record) for name, record in entries if preset_name(record) == args.preset
        )
    if args.format == "json":
        payload = [_record_payload(name, record) for name, record in entries]
        print(json.dumps({"platform": app.settings.platform, "tools": payload}, indent=2))
        return 0

    if not entries:
        print("[toolpolicy:list] no matching tools")
        return 0
    for name, record in entries:
        print(f"[toolpolicy:list] {_record_line(name, record)}")
    return 0


def _handle_status(app: ToolPolicyApp, _: argparse.Namespace) -> int:
    status = app.bootstrap()
    print(f"[toolpolicy:status] platform={status.platform}")
    print(f"[toolpolicy:status] adjusted={_flag(status.adjusted)}")
    print(f"[toolpolicy:status] entries={status.entries}")
    print(f"[toolpolicy:status] config={status.config_path}")
    return 0


def _record_payload(name: str, record: PolicyRecord) -> dict[str, object]:
    return {"name": name, "preset": preset_name(record), **record.as_dict()}


def _record_line(name: str, record: PolicyRecord) -> str:
    return (
        f"{name} preset={preset_name(record)} symlink={_flag(record.symlink)} "
        f"log={_flag(record.log)} error={_flag(record.error)}"
    )


def _flag(value: bool) -> str:
    return "true" if value else "false"
