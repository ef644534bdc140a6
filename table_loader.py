import logging
import os
import zipfile

import pandas as pd

logger = logging.getLogger("pagetable.table_loader")

SUPPORTED_EXTENSIONS = {".csv", ".parquet", ".xlsx"}


class TableLoadError(Exception):
    pass


class TableLoader:
    """Reads a header and string rows from a tabular file (read only)."""

    def __init__(self, path: str):
        self.path = path
        _, ext = os.path.splitext(path)
        self.ext = ext.lower()

        if self.ext not in SUPPORTED_EXTENSIONS:
            raise TableLoadError("Unsupported file type (use .csv, .parquet, or .xlsx)")

    def load(self) -> tuple[list[str], list[list[str]]]:
        if not os.path.exists(self.path):
            raise TableLoadError(f"No such file: {self.path}")
        if os.path.isdir(self.path):
            raise TableLoadError(f"Not a file: {self.path}")
        if os.path.getsize(self.path) == 0:
            return [], []

        try:
            df = self._read()
        except (
            OSError,
            UnicodeDecodeError,
            ValueError,
            pd.errors.ParserError,
            zipfile.BadZipFile,
        ) as exc:
            raise TableLoadError(f"Cannot read {self.path}: {exc}") from exc
        if df is None or df.shape[1] == 0:
            return [], []
        df = df.fillna("").astype(str)
        header = [str(c) for c in df.columns]
        rows = df.values.tolist()
        logger.debug("Loaded %d rows x %d columns from %s", len(rows), len(header), self.path)
        return header, rows

    def _read(self) -> pd.DataFrame:
        if self.ext == ".csv":
            try:
                return pd.read_csv(self.path, dtype=str, keep_default_na=False)
            except pd.errors.EmptyDataError:
                return pd.DataFrame()
        if self.ext == ".parquet":
            self._ensure_engine("pyarrow", "Parquet")
            return pd.read_parquet(self.path)
        self._ensure_engine("openpyxl", "XLSX")
        return pd.read_excel(self.path, sheet_name=0, dtype=str, keep_default_na=False)

    def _ensure_engine(self, module: str, label: str):
        try:
            __import__(module)
        except ImportError:
            raise TableLoadError(
                f"{label} support requires {module}. Install via: pip install {module}"
            ) from None
