"""The ``splash`` command line: collection aliases, settings and logout."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import Any

from splash_cli.aliases import get_all, remove_alias, resolve, set_alias
from splash_cli.colors import colorize
from splash_cli.settings_store import SettingsStore
from splash_cli.templating import render_template

CONFIG_FILE_NAME = "splash-cli.json"

SETTINGS_AUTO_LIKE = "auto_like_photos"
SETTINGS_DOWNLOADS_DIR = "download_dir"
SETTINGS_STORE_BY_USERNAME = "store_by_username"

KEY_MAPPING = {
    "downloads-dir": SETTINGS_DOWNLOADS_DIR,
    "auto-like": SETTINGS_AUTO_LIKE,
    "username-storage": SETTINGS_STORE_BY_USERNAME,
}

_HIGHLIGHT = "yellow+u+b"

_UNKNOWN_KEY_TEMPLATE = (
    'Settings key: {{ color("cyan+b", key) }} {{ color("red+b", "NOT") }} available.\n'
)
_SETTING_TEMPLATE = 'Setting {{ color("yellow+u+b", Key) }} is {{ color("yellow+u+b", Value) }}'

Handler = Callable[[argparse.Namespace, SettingsStore], int]
Ask = Callable[[str, Any], Any]


def find_config_path(home: str | Path | None = None) -> Path:
    """The settings file: the first existing candidate, else where a new one is created."""
    base = Path.home() if home is None else Path(home)
    candidates = [base / ".config" / CONFIG_FILE_NAME, base / ".splash-cli" / CONFIG_FILE_NAME]
    for candidate in candidates:
        if candidate.is_file():
            return candidate
    return candidates[0]


def unknown_key_message(key: str) -> str:
    """The text shown when ``key`` is not a known settings key."""
    text = render_template(_UNKNOWN_KEY_TEMPLATE, {"key": key})
    lines = ["", text, "Available keys:"]
    lines.extend(f"  - {name}" for name in KEY_MAPPING)
    return "\n".join(lines)


def _prompt(message: str, default: Any) -> Any:
    """Ask on the terminal; a bool default makes it a yes/no question."""
    if isinstance(default, bool):
        hint = "(Y/n)" if default else "(y/N)"
        answer = input(f"? {message} {hint} ").strip().lower()
        if not answer:
            return default
        return answer in ("y", "yes")
    hint = f" ({default})" if default else ""
    answer = input(f"? {message}{hint} ").strip()
    return answer or default


def ask_all_settings(store: SettingsStore, ask: Ask | None = None) -> dict[str, Any]:
    """Ask for every user setting and return the answers keyed by setting name."""
    ask = ask or _prompt
    return {
        SETTINGS_AUTO_LIKE: bool(ask("Would you like to `like` every downloaded photo?", False)),
        SETTINGS_DOWNLOADS_DIR: str(
            ask(
                "Where would you like to download your photos?",
                store.get_string(SETTINGS_DOWNLOADS_DIR),
            )
        ),
        SETTINGS_STORE_BY_USERNAME: bool(
            ask("Would you like to store your photos by author username?", False)
        ),
    }


# ----------------------------------------------------------------- handlers


def _show_help(parser: argparse.ArgumentParser) -> Handler:
    def handler(_args: argparse.Namespace, _store: SettingsStore) -> int:
        parser.print_help()
        return 0

    return handler


def _alias_set(args: argparse.Namespace, store: SettingsStore) -> int:
    set_alias(store, args.name, args.id)
    print("")
    print(f"Collection {colorize(args.id, _HIGHLIGHT)} aliased to {colorize(args.name, _HIGHLIGHT)}")
    print("")
    return 0


def _alias_get(args: argparse.Namespace, store: SettingsStore) -> int:
    plain = args.plain
    if args.name is None:
        entries = get_all(store)
        if plain:
            print("\n".join(f"{name}={collection}" for name, collection in entries.items()))
            return 0
        print("Aliases:")
        for name, collection in entries.items():
            print(f"> {colorize(name, _HIGHLIGHT)} => {colorize(collection, _HIGHLIGHT)}")
        return 0

    collection = resolve(store, args.name)
    if plain:
        print(collection)
        return 0
    print("")
    print(
        f"Collection {colorize(collection, _HIGHLIGHT)} is aliased to "
        f"{colorize(args.name, _HIGHLIGHT)}"
    )
    print("")
    return 0


def _alias_remove(args: argparse.Namespace, store: SettingsStore) -> int:
    collection = resolve(store, args.name)
    remove_alias(store, args.name)
    print(f'Alias for collection "{collection}" ({args.name}) removed.', end="")
    return 0


def _alias_rename(args: argparse.Namespace, store: SettingsStore) -> int:
    collection = resolve(store, args.old_name)
    set_alias(store, args.new_name, collection)
    print(f"Alias {args.old_name} renamed to {args.new_name}", end="")
    return 0


def _settings_survey(_args: argparse.Namespace, store: SettingsStore) -> int:
    for key, value in ask_all_settings(store).items():
        store.set(key, value)
    return 0


def _settings_get(args: argparse.Namespace, store: SettingsStore) -> int:
    setting = KEY_MAPPING.get(args.key)
    if setting is None:
        print(unknown_key_message(args.key))
        return 1
    output = render_template(
        _SETTING_TEMPLATE, {"Key": args.key, "Value": store.get_string(setting)}
    )
    print("")
    print(output)
    print("")
    return 0


def _settings_set(args: argparse.Namespace, store: SettingsStore) -> int:
    setting = KEY_MAPPING.get(args.key)
    if setting is None:
        print(unknown_key_message(args.key))
        return 1
    store.set(setting, args.value)
    store.write()
    print("")
    print(f"Setting updated to {colorize(store.get_string(setting), _HIGHLIGHT)}")
    print("")
    return 0


def _logout(_args: argparse.Namespace, store: SettingsStore) -> int:
    print("Logging out...")
    store.set("auth.access_token", "")
    store.set("auth.refresh_token", "")
    try:
        store.write()
    except OSError as exc:
        print(exc, file=sys.stderr)
        return 0
    print("You have been logged out.")
    return 0


# ------------------------------------------------------------------- parser


def build_parser() -> argparse.ArgumentParser:
    """The argument parser for every command."""
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--plain", action="store_true", default=argparse.SUPPRESS,
        help="Plain output. Good for tty",
    )

    parser = argparse.ArgumentParser(prog="splash", description="Get a photo")
    parser.add_argument("--plain", action="store_true", default=False,
                        help="Plain output. Good for tty")
    parser.set_defaults(handler=_show_help(parser))
    commands = parser.add_subparsers(dest="command")

    alias = commands.add_parser(
        "alias", aliases=["aliases"], parents=[common], help="Manage collection aliases"
    )
    alias.set_defaults(handler=_show_help(alias))
    alias_commands = alias.add_subparsers(dest="alias_command")

    alias_set = alias_commands.add_parser("set", parents=[common], help="Alias a collection")
    alias_set.add_argument("name")
    alias_set.add_argument("id")
    alias_set.set_defaults(handler=_alias_set)

    alias_get = alias_commands.add_parser("get", parents=[common], help="Show aliases")
    alias_get.add_argument("name", nargs="?")
    alias_get.set_defaults(handler=_alias_get)

    alias_remove = alias_commands.add_parser(
        "remove", aliases=["delete", "rm"], parents=[common], help="Remove an alias"
    )
    alias_remove.add_argument("name")
    alias_remove.set_defaults(handler=_alias_remove)

    alias_rename = alias_commands.add_parser(
        "rename", aliases=["mv"], parents=[common], help="Rename an alias"
    )
    alias_rename.add_argument("old_name")
    alias_rename.add_argument("new_name")
    alias_rename.set_defaults(handler=_alias_rename)

    settings = commands.add_parser(
        "settings", aliases=["config"], parents=[common], help="Manage user settings"
    )
    settings.set_defaults(handler=_settings_survey)
    settings_commands = settings.add_subparsers(dest="settings_command")

    settings_get = settings_commands.add_parser("get", parents=[common], help="Show a setting")
    settings_get.add_argument("key")
    settings_get.set_defaults(handler=_settings_get)

    settings_set = settings_commands.add_parser("set", parents=[common], help="Change a setting")
    settings_set.add_argument("key")
    settings_set.add_argument("value")
    settings_set.set_defaults(handler=_settings_set)

    auth = commands.add_parser("auth", parents=[common], help="Authenticate with Unsplash")
    auth.set_defaults(handler=_show_help(auth))
    auth_commands = auth.add_subparsers(dest="auth_command")

    logout = auth_commands.add_parser("logout", parents=[common], help="Logout from Unsplash")
    logout.set_defaults(handler=_logout)

    return parser


def _open_store() -> SettingsStore:
    store = SettingsStore(find_config_path())
    try:
        store.read()
    except FileNotFoundError:
        store.safe_write()
    return store


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line and return its exit status."""
    parser = build_parser()
    try:
        args = parser.parse_args(sys.argv[1:] if argv is None else list(argv))
    except SystemExit as exc:
        return 1 if exc.code else 0

    try:
        store = _open_store()
        return args.handler(args, store)
    except (OSError, ValueError, EOFError, KeyboardInterrupt) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())