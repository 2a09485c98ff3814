"""Main entry point for the typedcache command-line tool.

Acts as the Composition Root: builds the process-wide TypedCacheFacade from
configuration (disk store + LRU memory cache) and exposes a small Typer CLI
for inspecting and editing the store from a shell.
"""

import json
import logging
from enum import Enum
from typing import Any, Dict, Optional

import typer
from typing_extensions import Annotated

from typedcache.core.typed_cache import TypedCacheFacade
from typedcache.domain.exceptions import TypedCacheError
from typedcache.domain.models.common import ValueKind
from typedcache.infrastructure.cache.memory_cache import LRUMemoryCache
from typedcache.infrastructure.cli.display import ConsoleDisplay
from typedcache.infrastructure.config.settings import (
    get_cache_max_items,
    get_store_directory,
    get_store_timeout,
    load_configuration,
)
from typedcache.infrastructure.monitoring.logger_setup import setup_logging_from_config
from typedcache.infrastructure.store.disk_store import DiskValueStore

logger = logging.getLogger(__name__)

# --- Dependency Injection Container (Manual) ---

_dependencies: Optional[Dict[str, Any]] = None


def create_dependencies() -> Dict[str, Any]:
    """Creates and wires up all dependencies for the application.

    This acts as the Composition Root.
    """
    load_configuration()
    setup_logging_from_config()

    dependencies: Dict[str, Any] = {}
    dependencies["ui"] = ConsoleDisplay()
    dependencies["value_store"] = DiskValueStore(
        directory=get_store_directory(),
        timeout=get_store_timeout(),
    )
    dependencies["memory_cache"] = LRUMemoryCache(max_items=get_cache_max_items())
    dependencies["cache"] = TypedCacheFacade(
        value_store=dependencies["value_store"],
        memory_cache=dependencies["memory_cache"],
    )
    logger.info("All dependencies initialized successfully.")
    return dependencies


def get_dependencies() -> Dict[str, Any]:
    """Returns the process-wide dependencies, creating them on first use."""
    global _dependencies
    if _dependencies is None:
        _dependencies = create_dependencies()
    return _dependencies


def shared_cache() -> TypedCacheFacade:
    """The default process-wide facade."""
    return get_dependencies()["cache"]


def reset_dependencies() -> None:
    """Closes the shared store and forgets the wired dependencies."""
    global _dependencies
    if _dependencies is not None:
        _dependencies["value_store"].close()
    _dependencies = None


# --- Typer App Definition ---
app = typer.Typer(
    name="typedcache",
    help="Read and write typed values in the typedcache store.",
    add_completion=False,
)


class CliKind(str, Enum):
    """Kinds that can be expressed on the command line."""

    INTEGER = "integer"
    FLOAT = "float"
    DOUBLE = "double"
    BOOL = "bool"
    OBJECT = "object"
    URL = "url"

    def to_value_kind(self) -> ValueKind:
        return ValueKind(self.value)


KindOption = Annotated[
    CliKind,
    typer.Option("--kind", "-k", case_sensitive=False, help="Accessor family to use."),
]

TRUE_WORDS = {"true", "yes", "1", "on"}
FALSE_WORDS = {"false", "no", "0", "off"}


def parse_cli_value(raw: str, kind: CliKind) -> Any:
    """Converts a command-line string into a native value for kind.

    Raises:
        typer.BadParameter: If raw cannot be read as kind.
    """
    try:
        if kind is CliKind.INTEGER:
            return int(raw)
        if kind in (CliKind.FLOAT, CliKind.DOUBLE):
            return float(raw)
        if kind is CliKind.BOOL:
            word = raw.strip().lower()
            if word in TRUE_WORDS:
                return True
            if word in FALSE_WORDS:
                return False
            raise ValueError(f"expected one of {sorted(TRUE_WORDS | FALSE_WORDS)}")
        if kind is CliKind.OBJECT:
            return json.loads(raw)
    except ValueError as e:
        raise typer.BadParameter(f"Cannot read {raw!r} as {kind.value}: {e}") from e
    return raw


def _fail(error: Exception) -> None:
    logger.error(f"Command failed: {error}")
    get_dependencies()["ui"].display_error(str(error))
    raise typer.Exit(code=1)


# --- CLI Commands ---

@app.command()
def get(
    key: Annotated[str, typer.Argument(help="Key to read.")],
    kind: KindOption = CliKind.OBJECT,
    default: Annotated[
        Optional[str], typer.Option("--default", "-d", help="Value returned when the key is absent.")
    ] = None,
):
    """Read a value through the memory cache."""
    default_value = parse_cli_value(default, kind) if default is not None else None
    try:
        value = shared_cache().get(key, kind.to_value_kind(), default_value)
    except TypedCacheError as e:
        _fail(e)
    get_dependencies()["ui"].display_value(key, kind.to_value_kind(), value)


@app.command(name="set")
def set_command(
    key: Annotated[str, typer.Argument(help="Key to write.")],
    value: Annotated[str, typer.Argument(help="Value to store (JSON for --kind object).")],
    kind: KindOption = CliKind.OBJECT,
):
    """Write a value to the store and the memory cache."""
    native = parse_cli_value(value, kind)
    try:
        shared_cache().set(key, native, kind.to_value_kind())
    except TypedCacheError as e:
        _fail(e)
    get_dependencies()["ui"].display_info(f"Stored {kind.value} under '{key}'.")


@app.command()
def contains(key: Annotated[str, typer.Argument(help="Key to check.")]):
    """Report whether the store holds a key. Exits with 1 if it does not."""
    try:
        present = shared_cache().contains_key(key)
    except TypedCacheError as e:
        _fail(e)
    ui = get_dependencies()["ui"]
    if present:
        ui.display_info(f"'{key}' is present.")
    else:
        ui.display_info(f"'{key}' is not present.")
        raise typer.Exit(code=1)


@app.command()
def remove(key: Annotated[str, typer.Argument(help="Key to delete.")]):
    """Delete a key from the store and the memory cache."""
    try:
        shared_cache().remove(key)
    except TypedCacheError as e:
        _fail(e)
    get_dependencies()["ui"].display_info(f"Removed '{key}'.")


@app.command()
def clear(
    yes: Annotated[bool, typer.Option("--yes", "-y", help="Confirm deleting every stored key.")] = False,
):
    """Delete every key in the store."""
    ui = get_dependencies()["ui"]
    if not yes:
        ui.display_warning("This deletes every key in the store. Re-run with --yes to confirm.")
        raise typer.Exit(code=1)
    shared_cache().remove_all()
    ui.display_info("Store cleared.")


# --- Main Execution Guard ---

def cli_entry_point():
    """Function to be called by the script entry point in pyproject.toml."""
    try:
        app()
    finally:
        reset_dependencies()


if __name__ == "__main__":
    cli_entry_point()
