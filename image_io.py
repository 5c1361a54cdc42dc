import cv2
import numpy as np

from exceptions import ImageLoadError, ImageWriteError


def load_image(image_path: str) -> np.ndarray:
    image = cv2.imread(image_path)
    if image is None:
        raise ImageLoadError(f"Could not read image: {image_path}")
    return image


def save_image(image_path: str, image: np.ndarray) -> None:
    try:
        ok = cv2.imwrite(image_path, image)
    except cv2.error as e:
        raise ImageWriteError(f"Could not write image: {image_path}: {e}") from e
    if not ok:
        raise ImageWriteError(f"Could not write image: {image_path}")
