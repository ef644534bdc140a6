import os


def render_navigation(buttons, width=None):
    """Render visible button descriptors as one text line.

    The current page is bracketed and disabled prev/next arrows are blanked.
    """
    parts = []
    for b in buttons:
        if not b.visible:
            continue
        if b.role == "total":
            parts.append(f"{b.label} |")
        elif b.role in ("prev", "next"):
            parts.append(b.label if b.enabled else " ")
        elif b.current:
            parts.append(f"[{b.label}]")
        else:
            parts.append(b.label)
    text = " " + " ".join(parts)
    if width is None:
        return text
    return text.ljust(width)[:width]


def render_status(context, width):
    """
    context keys: file_path, page_index, page_total, page_start, page_end, total_rows
    """
    fname = context.get('file_path') or '<sample>'
    fname = os.path.basename(fname)
    page_total = context.get('page_total', 1)
    page_index = context.get('page_index', 1)
    page_start = context.get('page_start', 0)
    page_end = context.get('page_end', page_start)
    total_rows = context.get('total_rows', 0)
    if page_end > page_start:
        rows = f"rows {page_start}-{page_end - 1} of {total_rows}"
    else:
        rows = f"no rows of {total_rows}"
    text = f" {fname} | Page {page_index}/{page_total} {rows}"
    return text.ljust(width)[:width]
