# statblock/exceptions.py


class StatblockError(Exception):
    """Base class for errors raised by the statblock package."""


class StatblockTypeError(StatblockError, TypeError):
    """Input could not be read as a statblock mapping at all."""


class UnknownLayoutError(StatblockError, ValueError):
    def __init__(self, layout):
        super().__init__(f"Unknown statblock layout: {layout!r}")
        self.layout = layout
