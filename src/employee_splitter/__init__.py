"""Employee File Splitter - Partition employee data into sorted per-department files."""

from employee_splitter.runner import main_split, run
from employee_splitter.split.split import split_by_category

__all__ = ["main_split", "run", "split_by_category"]
