"""
Spreadsheet and filesystem collaborators of the pivot pipeline.

  - ``read_grid``         : first worksheet of an .xls/.xlsx file -> SheetGrid
  - ``write_table``       : header + rows -> single-sheet .xlsx
  - ``list_source_files`` : spreadsheet file names in a folder
"""

from sheet_io.grid_reader import read_grid
from sheet_io.grid_writer import write_table
from sheet_io.lister import list_source_files

__all__ = [
    "read_grid",
    "write_table",
    "list_source_files",
]
