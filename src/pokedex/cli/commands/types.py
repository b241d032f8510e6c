"""Type effectiveness command for the Pokedex CLI."""

from ...core.config import Config
from ...core.exceptions import CatalogError
from ...core.types import EffectivenessReport, TypeEffectivenessPage
from ...effectiveness.calculator import (
    calculate_effectiveness,
    format_multiplier,
    is_quad_weakness,
    types_label,
)
from ...effectiveness.chart import TYPE_NAMES
from .search import resolve_catalog

_PAGE_LABELS = {
    TypeEffectivenessPage.WEAK: "WEAK",
    TypeEffectivenessPage.RESIST: "RESIST",
    TypeEffectivenessPage.IMMUNE: "IMMUNE",
}


def add_types_arguments(parser) -> None:
    """Add arguments for the types command.

    Args:
        parser: Argument parser for the command.
    """
    parser.add_argument(
        "types",
        nargs="*",
        metavar="TYPE",
        help="One or two defending types, e.g. fire flying",
    )
    parser.add_argument(
        "-d",
        "--dex",
        type=int,
        help="Look up the types of this dex number in the catalog instead",
    )
    parser.add_argument(
        "-c",
        "--catalog",
        help="Catalog JSON path or fsspec URL, used with --dex",
    )


def handle_types(args, config: Config) -> None:
    """Handle types command.

    Args:
        args: Parsed command arguments.
        config: Application configuration.
    """
    if args.dex is not None and args.types:
        raise ValueError("Give either types or --dex, not both")

    if args.dex is not None:
        catalog = resolve_catalog(args, config)
        types = catalog.types_of(args.dex)
        if not types:
            raise CatalogError(f"No types known for dex number {args.dex}")
    else:
        types = [t.lower() for t in args.types]
        if not types:
            raise ValueError("Give one or two types, or --dex")
        unknown = [t for t in types if t not in TYPE_NAMES]
        if unknown:
            raise ValueError(f"Unknown type(s): {', '.join(unknown)}")

    report = calculate_effectiveness(types)
    print(types_label(types))
    for line in format_report(report):
        print(line)


def format_report(report: EffectivenessReport) -> list[str]:
    """Render each panel page as a labelled line."""
    lines = []
    for page in TypeEffectivenessPage:
        entries = report.entries_for(page)
        if not entries:
            body = "NONE"
        else:
            body = " ".join(_format_entry(page, name, value) for name, value in entries)
        lines.append(f"{_PAGE_LABELS[page]:<7}{body}")
    return lines


def _format_entry(page: TypeEffectivenessPage, name: str, value: float) -> str:
    if page is TypeEffectivenessPage.WEAK:
        return f"{name}(x4)" if is_quad_weakness(value) else name
    if page is TypeEffectivenessPage.IMMUNE:
        return name
    return f"{name}({format_multiplier(value)})"
