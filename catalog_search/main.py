# catalog_search/main.py
"""
Entry point for catalog-search.

- Parses CLI flags (page, query, facet, page number, settings, log level)
- Builds AppContext (document, logger, bus) and loads the page
- Replays the given inputs as page events
- Writes the resulting document (stdout or --output)
"""

from __future__ import annotations

import sys
import argparse
from pathlib import Path
import logging

from .app import build_default_context
from .models.settings_model import SettingsModel
from .services.settings_service import SettingsService
from . import constants
from .ui.catalog_page import CatalogPage


def _parse_args(argv: list[str]) -> argparse.Namespace:
    p = argparse.ArgumentParser(prog="catalog-search", add_help=True)
    p.add_argument("page", type=Path,
                   help="Pre-rendered listing page (HTML).")
    p.add_argument("--kind", choices=("auto",) + constants.RECORD_KINDS, default="auto",
                   help="Record kind of the listing (default: detect).")
    p.add_argument("--query", default=None, help="Text typed into the search box.")
    p.add_argument("--facet", default=None, help="Major framework version to filter on, e.g. 6.")
    p.add_argument("--page-number", type=int, default=None, dest="page_number",
                   help="Page link to click after filtering.")
    p.add_argument("--fragment", default="", help="Initial location fragment, e.g. '#featured'.")
    p.add_argument("--settings", type=Path, default=None,
                   help="Settings JSON file (created from defaults if missing).")
    p.add_argument("--output", type=Path, default=None,
                   help="Write the rendered page here instead of stdout.")
    p.add_argument("--page-size", type=int, default=None, dest="page_size",
                   help="Items per page (saved to --settings when given).")
    p.add_argument("--list-facets", action="store_true",
                   help="Print the known major framework versions and exit.")
    p.add_argument("--log-level", type=str, default=None,
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                   help="Console log level (overrides settings).")
    return p.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    argv = argv if argv is not None else sys.argv[1:]
    args = _parse_args(argv)

    # Load settings, then build context around the page
    settings_svc = SettingsService(args.settings)
    model = settings_svc.init_defaults() if args.settings else settings_svc.load()
    # CLI overrides (page size persists, log level is per run)
    if args.page_size is not None:
        model = SettingsModel.from_dict({**model.to_dict(), "page_size": args.page_size})
        if args.settings:
            settings_svc.save(model)
    if args.log_level:
        model.log_level = args.log_level

    try:
        html = args.page.read_text(encoding="utf-8")
    except OSError as e:
        logging.getLogger("catalog_search").error("Cannot read %s: %s", args.page, e)
        return 2

    ctx = build_default_context(html, source_path=args.page)
    settings_svc.apply_to_context(ctx, model)
    ctx.fragment = args.fragment
    page = CatalogPage(ctx, kind=None if args.kind == "auto" else args.kind).load()

    if args.list_facets:
        for major in page.index.framework_majors():
            print(major)
        return 0

    if args.query is not None:
        ctx.bus.query_edited.emit(args.query)
    if args.facet is not None:
        ctx.bus.facet_selected.emit(args.facet)
    if args.page_number is not None:
        _click_page(ctx, args.page_number)

    out = page.html()
    if args.output:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        args.output.write_text(out, encoding="utf-8")
        ctx.logger.info("Wrote %s", args.output)
    else:
        sys.stdout.write(out)
    return 0


def _click_page(ctx, number: int) -> None:
    handle = ctx.active_paginator
    if handle is None or not handle.mounts:
        ctx.logger.warning("No pagination on this page; ignoring --page-number")
        return
    for a in handle.links(handle.mounts[0]):
        if a.get_text() == str(number):
            ctx.events.click(a)
            return
    ctx.logger.warning("No page %d (of %d)", number, handle.total_pages)


if __name__ == "__main__":
    raise SystemExit(main())
