from .logging import LEVELS, LogMessage, StructuredLogger, log_to_dict

__all__ = ["LEVELS", "LogMessage", "StructuredLogger", "log_to_dict"]
