from .open_directory import OpenDirectoryService

__all__ = ["OpenDirectoryService"]
