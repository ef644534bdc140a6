import logging
import os
import shutil
import sys

import pagetable_config
from cell_format import page_frame
from dataset_store import InvalidArgument
from default_rows import DefaultRowsInitializer
from nav_render import render_navigation, render_status
from page_table import PageTable
from table_loader import TableLoader, TableLoadError

try:
    from _version import __version__
except Exception:
    __version__ = "0.0.0"


SAMPLE_ROW_COUNT = 500

USAGE = (
    "pagetable - paginated table viewer\n\nUsage:\n"
    "  pagetable [path] [-p PAGE] [-s PAGE_SIZE] [-m MIDDLE_BUTTONS]\n"
    "  pagetable -v\n"
)

_INT_FLAGS = {"-p": "page", "-s": "page_size", "-m": "middle_button_count"}


def _parse_args(args):
    opts = {"path": None, "page": 1, "page_size": None, "middle_button_count": None}
    i = 0
    while i < len(args):
        arg = args[i]
        if arg in _INT_FLAGS:
            if i + 1 >= len(args):
                raise ValueError(f"{arg} requires a value")
            try:
                opts[_INT_FLAGS[arg]] = int(args[i + 1])
            except ValueError:
                raise ValueError(f"{arg} expects an integer, got {args[i + 1]!r}") from None
            i += 2
            continue
        if arg.startswith("-"):
            raise ValueError(f"Unknown option: {arg}")
        if opts["path"] is not None:
            raise ValueError("Only one path may be given")
        opts["path"] = arg
        i += 1
    return opts


def _configure_logging():
    level = os.environ.get("PAGETABLE_LOG_LEVEL", "WARNING").upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
    )


def build_table(opts, cfg):
    page_size = opts["page_size"] if opts["page_size"] is not None else cfg["PAGE_SIZE"]
    middle = opts["middle_button_count"]
    if middle is None:
        middle = cfg["MIDDLE_BUTTON_COUNT"]
    if opts["path"]:
        header, rows = TableLoader(opts["path"]).load()
    else:
        header, rows = None, DefaultRowsInitializer().create(SAMPLE_ROW_COUNT)
    table = PageTable(rows, header=header, page_size=page_size, middle_button_count=middle)
    table.set_current_page(opts["page"])
    return table


def render(table, path, width):
    frame = page_frame(table.current_page_data(), table.header)
    start, end = table.current_page_bounds()
    if len(frame):
        frame.index = range(start, end)
        body = frame.to_string()
    else:
        body = "(no rows)"
    status = render_status(
        {
            "file_path": path,
            "page_index": table.current_page,
            "page_total": table.page_count,
            "page_start": start,
            "page_end": end,
            "total_rows": table.total,
        },
        width,
    )
    nav = render_navigation(table.buttons(), width)
    return "\n".join([body, "", nav.rstrip(), status.rstrip()])


def main():
    args = sys.argv[1:]

    if "-v" in args or "-V" in args:
        print(__version__)
        return

    if "-h" in args:
        print(USAGE)
        return

    _configure_logging()

    try:
        opts = _parse_args(args)
    except ValueError as exc:
        print(exc, file=sys.stderr)
        print(USAGE, file=sys.stderr)
        sys.exit(2)

    cfg = pagetable_config.load_config()
    try:
        table = build_table(opts, cfg)
    except (TableLoadError, InvalidArgument) as exc:
        print(f"Load failed: {exc}", file=sys.stderr)
        sys.exit(1)

    width = shutil.get_terminal_size((100, 24)).columns
    print(render(table, opts["path"], width))


if __name__ == "__main__":
    main()
