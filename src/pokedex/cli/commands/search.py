"""Search command for the Pokedex CLI."""

from ...core.config import Config
from ...core.exceptions import CatalogError
from ...core.types import CatalogEntity
from ...effectiveness.calculator import types_label
from ...services.catalog import Catalog, format_dex_number, load_catalog
from ...services.search import SearchService


def add_search_arguments(parser) -> None:
    """Add arguments for the search command.

    Args:
        parser: Argument parser for the command.
    """
    parser.add_argument(
        "query",
        nargs="*",
        help='Search terms, e.g. "fire flying gen1 legendary" or "#025"',
    )
    parser.add_argument(
        "-c",
        "--catalog",
        help="Catalog JSON path or fsspec URL (default: $POKEDEX_CATALOG)",
    )
    parser.add_argument(
        "-l",
        "--limit",
        type=int,
        default=0,
        help="Maximum results to print (default: all)",
    )


def resolve_catalog(args, config: Config) -> Catalog:
    """Load the catalog named on the command line or in the configuration.

    Raises:
        CatalogError: If no catalog source is configured.
    """
    source = getattr(args, "catalog", None) or config.catalog.path
    if not source:
        raise CatalogError("No catalog given; pass --catalog or set POKEDEX_CATALOG")
    return load_catalog(source)


def handle_search(args, config: Config) -> None:
    """Handle search command.

    Args:
        args: Parsed command arguments.
        config: Application configuration.
    """
    catalog = resolve_catalog(args, config)
    service = SearchService(catalog)

    raw = " ".join(args.query)
    results = service.search(raw)
    shown = results[: args.limit] if args.limit > 0 else results

    print(f"{len(results)} of {len(catalog)} species")
    for entity in shown:
        print(_format_row(entity, catalog.types_of(entity.id)))
    if len(shown) < len(results):
        print(f"... {len(results) - len(shown)} more")


def _format_row(entity: CatalogEntity, types: list[str]) -> str:
    flags = ""
    if entity.is_legendary:
        flags += " [legendary]"
    if entity.is_mythical:
        flags += " [mythical]"
    generation = f"gen{entity.generation_id}" if entity.generation_id is not None else "gen?"
    return (
        f"#{format_dex_number(entity.id)}  {entity.name:<14} "
        f"{types_label(types):<16} {generation}{flags}"
    )
