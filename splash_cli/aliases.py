"""Named aliases for collection ids, kept in the settings store."""

from __future__ import annotations

from splash_cli.settings_store import SettingsStore

ALIAS_KEY = "aliases"


def get_all(store: SettingsStore) -> dict[str, str]:
    """Every alias mapped to its collection id."""
    return store.get_string_map(ALIAS_KEY)


def resolve(store: SettingsStore, alias: str) -> str:
    """The collection id for ``alias``, or "" if there is none."""
    return get_all(store).get(alias, "")


def set_alias(store: SettingsStore, key: str, value: str) -> None:
    """Point alias ``key`` at collection ``value`` and save the settings."""
    remove_alias(store, key)
    aliases = get_all(store)
    aliases[key] = value
    store.set(ALIAS_KEY, aliases)
    store.write()


def remove_alias(store: SettingsStore, key: str) -> None:
    """Drop alias ``key`` if present and save the settings."""
    aliases = get_all(store)
    aliases.pop(key, None)
    store.set(ALIAS_KEY, aliases)
    store.write()