"""
Exceptions raised by the codec and image layers
"""


class StegError(ValueError):
    """Base class for all steganography errors."""


class CapacityError(StegError):
    """Payload does not fit in the carrier."""


class PayloadTruncatedError(StegError):
    """The carrier ran out of pixels before the payload was complete."""


class TerminatorNotFoundError(StegError):
    """Extraction reached the end of the grid without seeing a terminator."""


class AmbiguousPayloadError(StegError):
    """Payload symbols would be read back as an early terminator."""


class ImageDecodeError(StegError):
    """The image file could not be opened or decoded."""


class ImageEncodeError(StegError):
    """The image could not be encoded or written."""
