from .output_repository import INDEX_FILENAME, OutputRepository, find_file_under

__all__ = [
    "INDEX_FILENAME",
    "OutputRepository",
    "find_file_under",
]
