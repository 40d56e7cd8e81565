import argparse
import sys
import structlog
from typing import Dict, List, Optional

from .infrastructure.logging import setup_logging
from .infrastructure.resource_loader import FtlResourceLoader
from .application.localizer import Localizer
from .application.locale_negotiation import detect_system_locale
from .application.validator import compare_tables
from .domain.errors import LocalizationError, MissingKeyError
from src.config import get_settings

logger = structlog.get_logger()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="print_l10n", description="Inspect Print UI menu translations")
    parser.add_argument("--resources", help="Override the resources directory")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("locales", help="List available locales")

    lookup = sub.add_parser("lookup", help="Print the resolved text of a message")
    lookup.add_argument("identifier")
    lookup.add_argument("--locale", help="Locale to use (defaults to configured/system locale)")

    dump = sub.add_parser("dump", help="Print every message grouped by section")
    dump.add_argument("--locale", help="Locale to use (defaults to configured/system locale)")

    sub.add_parser("check", help="Validate all locales against the default locale")
    return parser


def _localizer(loader: FtlResourceLoader, requested: Optional[str]) -> Localizer:
    settings = get_settings()
    return Localizer.for_locale(
        loader,
        requested or settings.l10n.locale or detect_system_locale(),
        settings.l10n.default_locale,
        settings.l10n.missing_key_policy,
    )


def cmd_locales(loader: FtlResourceLoader, args: argparse.Namespace) -> int:
    for code in loader.available_locales():
        print(code)
    return 0


def cmd_lookup(loader: FtlResourceLoader, args: argparse.Namespace) -> int:
    localizer = _localizer(loader, args.locale)
    try:
        print(localizer.format(args.identifier))
    except MissingKeyError as e:
        logger.error("lookup_failed", error=str(e))
        return 1
    return 0


def cmd_dump(loader: FtlResourceLoader, args: argparse.Namespace) -> int:
    localizer = _localizer(loader, args.locale)

    # Fallback messages are listed under the heading of the table that supplies them
    groups: Dict[Optional[str], List[str]] = {}
    for identifier in localizer.identifiers():
        groups.setdefault(localizer.entry(identifier).group, []).append(identifier)

    for group, identifiers in groups.items():
        if group:
            print(f"# {group}")
        for identifier in identifiers:
            print(f"{identifier} = {localizer.format(identifier)}")
        print()
    return 0


def cmd_check(loader: FtlResourceLoader, args: argparse.Namespace) -> int:
    default_locale = get_settings().l10n.default_locale
    failed = False
    tables = {}

    for code in loader.available_locales():
        try:
            tables[code] = loader.load(code)
            print(f"{code}: ok ({len(tables[code])} entries)")
        except LocalizationError as e:
            failed = True
            print(f"{code}: FAILED {e}")

    reference = tables.get(default_locale)
    if reference is None:
        print(f"default locale '{default_locale}' is not available")
        return 1

    for code, table in tables.items():
        if code == default_locale:
            continue
        report = compare_tables(table, reference)
        for identifier in report.missing:
            print(f"{code}: missing {identifier} (falls back to {default_locale})")
        for identifier in report.extra:
            print(f"{code}: extra {identifier}")
        for identifier in report.untranslated:
            print(f"{code}: untranslated {identifier}")

    return 1 if failed else 0


COMMANDS = {
    "locales": cmd_locales,
    "lookup": cmd_lookup,
    "dump": cmd_dump,
    "check": cmd_check,
}


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    settings = get_settings()
    setup_logging(settings.env)

    loader = FtlResourceLoader(args.resources or settings.l10n.resources_path)
    try:
        return COMMANDS[args.command](loader, args)
    except LocalizationError as e:
        logger.critical("l10n_command_failed", command=args.command, error=str(e))
        return 1


if __name__ == "__main__":
    sys.exit(main())
