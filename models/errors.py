class ScatterError(Exception):
    """Base class for every failure the scatter tool reports to the user."""


class ArgumentError(ScatterError, ValueError):
    """Missing or invalid command-line arguments."""


class DecodeError(ScatterError, OSError):
    """An input image could not be opened or decoded."""


class DimensionMismatch(ScatterError, ValueError):
    """The two input images differ in width or height after scaling."""

    def __init__(self, size_a, size_b):
        self.size_a = size_a
        self.size_b = size_b
        super().__init__(
            f"Images do not have the same dimensions: "
            f"{size_a[0]}x{size_a[1]} vs {size_b[0]}x{size_b[1]}"
        )
