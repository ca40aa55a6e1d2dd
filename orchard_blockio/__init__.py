"""Read-only block I/O over disk images, raw devices and in-memory buffers."""

__version__ = "0.1.0"

__all__ = ["errors", "inspection", "reader"]