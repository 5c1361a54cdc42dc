from typing import Iterable, Optional


class PostureAnalysisError(Exception):
    """Base class for every failure the posture pipeline reports to its caller."""


class MissingLandmarkError(PostureAnalysisError):
    def __init__(self, message: str, missing: Optional[Iterable[str]] = None):
        super().__init__(message)
        self.missing = list(missing or [])


class PoseNotDetectedError(PostureAnalysisError):
    pass


class ModelNotFoundError(PostureAnalysisError):
    pass


class ImageLoadError(PostureAnalysisError):
    pass


class LandmarkFileError(PostureAnalysisError):
    pass


class ImageWriteError(PostureAnalysisError):
    pass
