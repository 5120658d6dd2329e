"""Line-indexed document loading for text, CSV/TSV and JSON/JSONL files."""

__version__ = "0.1.0"

__all__ = ["core", "txt", "csvfile", "jsonfile", "cli"]