"""
Exception types raised by the loading, training and prediction stages.

Missing files are reported with the built-in `FileNotFoundError`.
"""


class HousePriceError(RuntimeError):
    """Base class for all errors raised by this package."""


class ParseError(HousePriceError, ValueError):
    """A required field is missing or cannot be read as a number."""

    def __init__(self, message, path=None, column=None, row_id=None):
        self.path = path
        self.column = column
        self.row_id = row_id
        context = []
        if path is not None:
            context.append(f"file={path}")
        if column is not None:
            context.append(f"column={column}")
        if row_id is not None:
            context.append(f"row Id={row_id}")
        if context:
            message = f"{message} ({', '.join(context)})"
        super().__init__(message)


class TrainingError(HousePriceError):
    """The pipeline could not be configured or fitted."""


class PredictionError(HousePriceError):
    """A record cannot be turned into a feature vector at prediction time."""
