"""Console styles.

Every markup tag and table style the CLI prints with is a named Rich
style. Defaults ship in ``data/theme.toml``; a ``theme.toml`` in the
config directory can restyle any of them with a Rich style string such
as ``"bold #0e8ac8"`` or ``"dim italic"``.
"""

import logging
import tomllib
from functools import cache
from importlib import resources
from pathlib import Path

from rich.errors import StyleSyntaxError
from rich.style import Style
from rich.theme import Theme

from shellstrap.core.paths import get_config_dir

logger = logging.getLogger(__name__)

STYLE_NAMES: tuple[str, ...] = (
    "muted",
    "border",
    "bold_header",
    "success",
    "warning",
    "error",
    "info",
    "stage",
    "command",
    "skipped",
)


def get_user_theme_path() -> Path:
    """Return the user's theme override file, ``<config dir>/theme.toml``."""
    return get_config_dir() / "theme.toml"


def parse_styles(text: str, origin: str) -> dict[str, Style]:
    """Parse the ``[styles]`` table of a theme file.

    Unknown names and invalid style strings are logged and left out, so
    one bad entry doesn't discard the rest.

    Args:
        text: TOML document.
        origin: Where the document came from, for log messages.

    Returns:
        Mapping of style name to parsed Rich style.

    Raises:
        tomllib.TOMLDecodeError: If the document is not valid TOML.
    """
    table = tomllib.loads(text).get("styles", {})
    if not isinstance(table, dict):
        logger.warning("%s: [styles] must be a table", origin)
        return {}

    styles: dict[str, Style] = {}
    for name, value in table.items():
        if name not in STYLE_NAMES:
            logger.warning("%s: unknown style %r", origin, name)
            continue
        try:
            styles[name] = Style.parse(str(value))
        except StyleSyntaxError as e:
            logger.warning("%s: style %r ignored: %s", origin, name, e)
    return styles


def load_styles(user_path: Path | None = None) -> dict[str, Style]:
    """Load the bundled styles with the user's overrides on top.

    An unreadable or malformed user file is ignored with a warning.

    Args:
        user_path: Override file. Defaults to get_user_theme_path().
    """
    bundled = resources.files("shellstrap.data").joinpath("theme.toml")
    styles = parse_styles(bundled.read_text(encoding="utf-8"), "bundled theme")

    path = user_path or get_user_theme_path()
    try:
        overrides = parse_styles(path.read_text(encoding="utf-8"), str(path))
    except FileNotFoundError:
        return styles
    except (OSError, UnicodeDecodeError, tomllib.TOMLDecodeError) as e:
        logger.warning("Ignoring theme file %s: %s", path, e)
        return styles

    logger.debug("Loaded %d style overrides from %s", len(overrides), path)
    return {**styles, **overrides}


@cache
def get_theme() -> Theme:
    """Return the Rich theme for the shared consoles, loaded once."""
    return Theme(load_styles())
