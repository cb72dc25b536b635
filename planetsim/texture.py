"""Loading raw RGB texture files."""

from __future__ import annotations

from itertools import count
from typing import Callable, Iterable, Optional, Sequence

TEXTURE_WIDTH = 1024
TEXTURE_HEIGHT = 512
DEFAULT_FILES = ("texture.raw",)

Uploader = Callable[[bytes, int, int], int]


def read_raw_texture(path, width: int = TEXTURE_WIDTH, height: int = TEXTURE_HEIGHT) -> bytes:
    """Read a headerless RGB image of the given size.

    A file shorter than the image is padded with zero bytes; extra bytes are
    ignored. Raises OSError if the file cannot be opened.
    """
    if width <= 0 or height <= 0:
        raise ValueError(f"texture size must be positive, got {width}x{height}")
    size = width * height * 3
    with open(path, "rb") as handle:
        data = handle.read(size)
    return data.ljust(size, b"\0")


class TextureSet(Sequence[int]):
    """A fixed set of textures loaded once at start-up.

    Each file is read and handed to ``upload(data, width, height)``, which
    returns the texture id. A file that cannot be read gets id 0. Without an
    uploader, loaded textures are numbered from 1 in order.
    """

    def __init__(self, filenames: Iterable = DEFAULT_FILES, upload: Optional[Uploader] = None):
        if upload is None:
            numbers = count(1)

            def upload(data: bytes, width: int, height: int) -> int:
                return next(numbers)

        self.filenames = tuple(filenames)
        self._ids = tuple(self._load(name, upload) for name in self.filenames)

    @staticmethod
    def _load(filename, upload: Uploader) -> int:
        try:
            data = read_raw_texture(filename)
        except OSError:
            return 0
        return upload(data, TEXTURE_WIDTH, TEXTURE_HEIGHT)

    def __len__(self) -> int:
        return len(self._ids)

    def __getitem__(self, index):
        return self._ids[index]