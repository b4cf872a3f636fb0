"""Exception hierarchy for Felt."""


class FeltError(Exception):
    """Base exception for all Felt errors."""

    pass


class ResourceError(FeltError):
    """Errors related to loading or saving an asset file."""

    def __init__(self, kind: str, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to {kind} '{path}': {reason}")


class FontLoadError(ResourceError):
    """Error loading a font file."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__("load font", path, reason)


class ImageLoadError(ResourceError):
    """Error loading an image file."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__("load image", path, reason)


class ImageSaveError(ResourceError):
    """Error saving an image file."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__("save image", path, reason)
