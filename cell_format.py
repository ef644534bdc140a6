import pandas as pd

BLANK_CELL = "--"


def display_cell(text) -> str:
    if text is None:
        return BLANK_CELL
    text = str(text)
    if text.strip() == "" or text == "nan":
        return BLANK_CELL
    return text


def page_frame(records, header) -> pd.DataFrame:
    """Build a display frame for one page of records.

    Rows narrower than the header are padded with blanks; fields past the
    header width get ``Column N`` labels so nothing is silently dropped.
    """
    header = list(header)
    width = max([len(header)] + [len(r) for r in records])
    columns = header + [f"Column {i}" for i in range(len(header) + 1, width + 1)]
    rows = [
        [display_cell(r[i]) if i < len(r) else BLANK_CELL for i in range(width)]
        for r in records
    ]
    return pd.DataFrame(rows, columns=columns, dtype=object)
