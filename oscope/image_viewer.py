"""Viewer for a captured plot image."""

from __future__ import annotations

import io
from pathlib import Path

import matplotlib.image as mpimg
import numpy as np


class ImageViewer:
    """Holds one captured PNG, shows it and saves it to a file."""

    def __init__(self, image: bytes, filename: str) -> None:
        self.image = bytes(image)
        self.filename = filename
        try:
            self.pixels: np.ndarray = mpimg.imread(io.BytesIO(self.image), format="png")
        except Exception as exc:
            raise ValueError("image data is not a readable PNG") from exc

    def caption(self) -> str:
        return "File name: " + self.filename

    def save(self, path: str | Path | None = None) -> Path:
        """Write the image to ``path`` (default: its file name); format follows the suffix."""
        target = self.filename if path is None else path
        if not str(target):
            raise ValueError("no file name to save the image to")
        target = Path(target)
        mpimg.imsave(target, self.pixels)
        return target

    def show(self):
        """Display the image in a window and return its figure."""
        import matplotlib.pyplot as plt

        fig, ax = plt.subplots()
        ax.imshow(self.pixels)
        ax.set_axis_off()
        ax.set_title(self.caption())
        plt.show()
        return fig