import os

from typing import List

from dto.schema import SheetSchema

# Physical layout of a SCADA export (0-based rows/columns)
BLOCK_OFFSETS = (0, 2000, 4000, 6000, 8000)
BLOCK_SPAN = 2000
HEADER_ROW_OFFSET = 2
DATA_ROW_OFFSET = 5
DATA_ROW_COUNT = 1440
SEPARATOR_ROW_COUNT = 4
NAME_CELL = (0, 0)  # A1
DATE_CELL = (5, 1)  # B6

MISSING_VALUE = "N/A"
DUMMY_MARKER = "DUMMY"

DEFAULT_SCHEMA = SheetSchema(
    block_offsets=BLOCK_OFFSETS,
    block_span=BLOCK_SPAN,
    header_row_offset=HEADER_ROW_OFFSET,
    data_row_offset=DATA_ROW_OFFSET,
    data_row_count=DATA_ROW_COUNT,
    separator_row_count=SEPARATOR_ROW_COUNT,
    name_cell=NAME_CELL,
    date_cell=DATE_CELL,
    missing_value=MISSING_VALUE,
    dummy_marker=DUMMY_MARKER,
)

# Output
OUTPUT_HEADER = ["Zone", "Name of Station", "Date", "Time", "SCADA Tag", "Data", "Range"]
OUTPUT_SUBFOLDER = "output"
OUTPUT_FILE_TEMPLATE = "Consolidated_SCADA_Tag_Data_Batch_{batch_number}.xlsx"
OUTPUT_SHEET_NAME = "Sheet1"

# Inputs
SOURCE_EXTENSIONS = (".xls", ".xlsx")
DEFAULT_BATCH_SIZE = 5
DEFAULT_INPUT_FOLDERS = ["./BGK_testing", "./BGM_testing", "./HSN_testing"]

ZONE_PATTERN = r"^(\w{3})_"
UNKNOWN_ZONE = "Unknown"


def input_folders_from_env() -> List[str]:
    raw = os.getenv("SCADA_INPUT_FOLDERS", "")
    folders = [f.strip() for f in raw.split(",") if f.strip()]
    return folders or list(DEFAULT_INPUT_FOLDERS)


def batch_size_from_env() -> int:
    return int(os.getenv("SCADA_BATCH_SIZE", str(DEFAULT_BATCH_SIZE)))


def sort_files_from_env() -> bool:
    return os.getenv("SCADA_SORT_FILES", "false").lower() in ("1", "true", "yes")
