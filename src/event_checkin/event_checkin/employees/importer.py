from __future__ import annotations

import csv
import io
import zipfile
from dataclasses import dataclass, field
from typing import Any, Optional, Sequence

import pandas as pd

from ..core.enums import EmploymentType
from ..core.exceptions import ValidationError

SUPPORTED_EXTENSIONS = {"csv", "xlsx", "xls"}

# field -> every keyword a header must contain (lower-cased)
COLUMN_KEYWORDS: dict[str, tuple[str, ...]] = {
    "first_name": ("first", "name"),
    "middle_name": ("middle", "name"),
    "last_name": ("last", "name"),
    "employee_id": ("employee", "id"),
    "hire_date": ("hire", "date"),
    "employment_type": ("employment", "type"),
    "phone": ("phone",),
    "email": ("email",),
    "status": ("status",),
}


@dataclass(frozen=True)
class ImportResult:
    imported: int
    errors: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {
            "message": f"Successfully imported {self.imported} employees",
            "imported": self.imported,
        }
        if self.errors:
            out["errors"] = list(self.errors)
        return out


def file_extension(filename: str) -> str:
    return filename.rsplit(".", 1)[-1].lower() if "." in filename else ""


def _decode_csv(content: bytes) -> str:
    # Excel on Windows saves CSV as cp1252 unless told otherwise.
    try:
        return content.decode("utf-8-sig")
    except UnicodeDecodeError:
        return content.decode("cp1252", errors="replace")


def _read_csv(content: bytes) -> pd.DataFrame:
    text = _decode_csv(content)
    # Rows may be ragged; size the frame to the widest one.
    width = max((len(row) for row in csv.reader(io.StringIO(text))), default=0)
    if width == 0:
        raise pd.errors.EmptyDataError("No columns to parse from file")
    return pd.read_csv(
        io.StringIO(text),
        header=None,
        names=list(range(width)),
        dtype=str,
        keep_default_na=False,
        skip_blank_lines=False,
        engine="python",
    )


def read_table(filename: str, content: bytes) -> list[list[str]]:
    """Parse an uploaded CSV/XLSX/XLS file into rows of text cells (first sheet)."""
    ext = file_extension(filename or "")
    if ext not in SUPPORTED_EXTENSIONS:
        raise ValidationError("Invalid file type. Please upload CSV or XLSX file.")

    try:
        if ext == "csv":
            df = _read_csv(content)
        else:
            df = pd.read_excel(io.BytesIO(content), header=None, dtype=str, keep_default_na=False, sheet_name=0)
    except pd.errors.EmptyDataError:
        return []
    except (pd.errors.ParserError, csv.Error, ValueError, zipfile.BadZipFile) as e:
        raise ValidationError(f"Could not read {ext.upper()} file: {e}")

    df = df.fillna("")
    return [[str(value) for value in row] for row in df.values.tolist()]


def resolve_columns(header: Sequence[Any]) -> dict[str, Optional[int]]:
    """Map fields to column indices by keyword containment; first match wins."""
    labels = [str(h).strip().lower() for h in header]
    columns: dict[str, Optional[int]] = {}
    for name, keywords in COLUMN_KEYWORDS.items():
        columns[name] = next(
            (i for i, label in enumerate(labels) if all(k in label for k in keywords)),
            None,
        )
    return columns


def normalize_employment_type(value: str) -> Optional[EmploymentType]:
    v = (value or "").strip().lower()
    if not v:
        return None
    if v == "hourly":
        return EmploymentType.HOURLY
    if v == "salary":
        return EmploymentType.SALARY
    if v == "contract":
        return EmploymentType.CONTRACT
    if "part" in v:
        return EmploymentType.PART_TIME
    return None


def cell(row: Sequence[Any], index: Optional[int]) -> str:
    if index is None or index >= len(row) or row[index] is None:
        return ""
    return str(row[index]).strip()
