class ColourError(Exception):
    """Base exception for rgbcolour."""


class ColourDecodeError(ColourError):
    def __init__(self, message, data=None):
        super().__init__(message)
        self.data = data
