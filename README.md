# splash-cli

Command-line helpers for working with Unsplash wallpapers. The `splash`
command keeps short names (aliases) for Unsplash collections, shows and
changes your user settings, and clears your stored Unsplash sign-in. The
`splash_cli` package also exposes the helpers behind it for use from your
own Python code.

## Installation

```
pip install .
```

Python 3.10 or newer is required. To run the tests:

```
pip install ".[test]"
pytest
```

## The `splash` command

Settings live in a JSON file named `splash-cli.json`. The command uses
`~/.config/splash-cli.json` or, if only that one exists,
`~/.splash-cli/splash-cli.json`. When neither exists, a new file holding
the default settings is created at `~/.config/splash-cli.json`.

Running `splash` with no command prints the help text.

### Collection aliases

```
splash alias set landscapes 3644553
splash alias get landscapes
splash alias get
splash alias get --plain
splash alias rename landscapes landscapes-wallpapers
splash alias remove landscapes-wallpapers
```

- `alias set NAME ID` points `NAME` at collection `ID` and saves it.
- `alias get` with no name lists every alias; `alias get NAME` shows the
  collection that `NAME` stands for. With `--plain` the output carries no
  colours: one `name=id` line per alias, or only the id for a single one.
- `alias rename OLD NEW` stores the collection of `OLD` under `NEW`. The
  old name is kept as well.
- `alias remove NAME` deletes the alias.

`aliases` is accepted for `alias`, `rm` and `delete` for `remove`, and
`mv` for `rename`.

### Settings

```
splash settings get downloads-dir
splash settings set downloads-dir ~/Downloads
splash settings set auto-like true
splash settings
```

The keys understood by `get` and `set` are:

| Key                | Setting stored       |
|--------------------|----------------------|
| `downloads-dir`    | `download_dir`       |
| `auto-like`        | `auto_like_photos`   |
| `username-storage` | `store_by_username`  |

`set` writes the value to the settings file as the text given. An unknown
key prints the available keys and exits with status 1.

`splash settings` on its own asks a question for each of the three
settings. The answers are applied only for that run; they are not written
to the settings file. `config` is accepted for `settings`.

### Account

```
splash auth logout
```

Clears the stored access and refresh tokens.

## What the package does not do

The package does not fetch photos, download them as wallpapers or set the
desktop wallpaper, and there is no `splash auth login` or `whoami`
command. `splash_cli.unsplash.UnsplashApi` covers only the sign-in steps:
building the authorization URL and exchanging a code for tokens. There is
no update check run by the command, and no usage analytics.

## Using the library

```python
from splash_cli.expressions import extract_collection_id
from splash_cli.parsing import parse_photo_id_from_url
from splash_cli.templating import format_number
from splash_cli.versions import parse_version

parse_photo_id_from_url(
    "https://unsplash.com/photos/a-valley-with-a-river-running-through-it-6NAbqcv3fpg"
)
# '6NAbqcv3fpg'

extract_collection_id("https://unsplash.com/collections/3644553/stockpapers")
# ('3644553', 'stockpapers')

format_number(1500)
# '1.5K'

parse_version("2.1.0").is_newer_than(parse_version("2.0.3"))
# True
```

`Version.is_newer_than` returns True when any one of major, minor or
patch is greater than the same component of the other version.

Modules:

- `splash_cli.expressions` – `is_photo_url`, `is_collection_url`,
  `cleanup_url`, `extract_photo_id`, `extract_collection_id`.
- `splash_cli.parsing` – `parse_photo_id_from_url`, `parse_collections`
  (collection URLs to ids, aliases to their ids), `parse_string_value`
  (`"true"`/`"false"` to booleans, integer text to ints), `expand_path`.
- `splash_cli.query` – `url_param` declares dataclass fields sent as query
  parameters; `stringify` encodes such a dataclass as a query string.
- `splash_cli.models` – dataclasses for photos, users, collections, topics
  and sign-in responses, each built from API JSON with `from_dict`;
  `RandomPhotoParams` is ready for `stringify`.
- `splash_cli.network` – `build_request`, `add_authorization`,
  `execute_request` (raises `HttpError` on statuses of 300 and above) and
  `is_error`.
- `splash_cli.unsplash` – `UnsplashApi` with `build_authentication_url`
  and `authenticate` (raises `AuthenticationError` when refused).
- `splash_cli.settings_store` – `SettingsStore`, a JSON settings file with
  dotted keys over `default_settings()`, with `read`, `write`,
  `safe_write`, `get`, `set` and typed getters.
- `splash_cli.aliases` – `get_all`, `resolve`, `set_alias` and
  `remove_alias` over a settings store.
- `splash_cli.templating` – `Template`, `render_template`, `color` and
  `format_number` for coloured text templates.
- `splash_cli.colors` – `color_code`, `colorize`, `yellow`, `blue`.
- `splash_cli.terminal` – `supports_hyperlinks`, `format_hyperlink` and
  `parse_term_version` for clickable terminal links.
- `splash_cli.paths` – `home_path`, `insert_home_if_needed`,
  `file_exists` and `download_file`.
- `splash_cli.github` – `fetch_latest_version`, `current_version` and
  `needs_to_update` for checking whether a newer release is published.
- `splash_cli.slices` – `map_items`, `filter_items`, `reduce_items`,
  `some` and `every`.