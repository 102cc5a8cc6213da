from .logger import TelemetryLogger, read_records

__all__ = ["TelemetryLogger", "read_records"]
