"""WebP encoders implementing the ``ImageEncoder`` port."""

from __future__ import annotations

import logging
import os
import tempfile
from io import BytesIO
from pathlib import Path

from PIL import Image

from webp_converter.errors import EncodingError

logger = logging.getLogger(__name__)

SVG_SUFFIX = ".svg"
# Modes Pillow's WebP plugin writes without conversion.
_WEBP_MODES = {"RGB", "RGBA"}


def _rasterize_svg(source: Path) -> Image.Image:
    """Render an SVG document to a Pillow image via CairoSVG."""
    try:
        import cairosvg
    except Exception as exc:  # ImportError, or OSError when libcairo is absent
        raise EncodingError(
            "SVG conversion requires cairosvg. Install extra: .[svg]"
        ) from exc

    png_bytes = cairosvg.svg2png(url=str(source))
    image = Image.open(BytesIO(png_bytes))
    image.load()
    return image


def _open_source(source: Path) -> Image.Image:
    if source.suffix.lower() == SVG_SUFFIX:
        return _rasterize_svg(source)
    with Image.open(source) as image:
        image.load()
        return image.copy()


def _default_file_mode() -> int:
    """Mode a plain ``open(path, "w")`` would create under the current umask."""
    mask = os.umask(0)
    os.umask(mask)
    return 0o666 & ~mask


def _webp_ready(image: Image.Image) -> Image.Image:
    """Convert palette, grayscale and CMYK images to RGB(A)."""
    if image.mode in _WEBP_MODES:
        return image
    has_alpha = "A" in image.getbands() or "transparency" in image.info
    return image.convert("RGBA" if has_alpha else "RGB")


class PillowWebpEncoder:
    """Encode images with Pillow, writing the result atomically."""

    def __init__(self, method: int = 4, file_mode: int | None = None) -> None:
        self.method = method
        # umask is process-wide, so read it once rather than per worker thread
        self.file_mode = _default_file_mode() if file_mode is None else file_mode

    def encode(self, source: Path, destination: Path, quality: int) -> None:
        """Encode ``source`` as WebP at ``destination``.

        The image is saved to a temporary file in the destination directory
        and renamed into place, so a failed run never leaves a partial
        ``.webp`` behind.

        Parameters
        ----------
        source : Path
            Source raster or SVG image.
        destination : Path
            Final ``.webp`` path. Its parent directory must exist.
        quality : int
            WebP quality (0-100).

        Raises
        ------
        EncodingError
            If the source cannot be decoded or the output cannot be written.
        """
        try:
            image = _webp_ready(_open_source(source))
        except EncodingError:
            raise
        except Exception as exc:
            raise EncodingError(f"Cannot decode {source.name}: {exc}") from exc

        tmp_path: Path | None = None
        try:
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{destination.stem}.", suffix=".part", dir=destination.parent
            )
            tmp_path = Path(tmp_name)
            with os.fdopen(fd, "wb") as handle:
                image.save(handle, "WEBP", quality=quality, method=self.method)
            os.chmod(tmp_path, self.file_mode)
            os.replace(tmp_path, destination)
        except Exception as exc:
            if tmp_path is not None:
                tmp_path.unlink(missing_ok=True)
            raise EncodingError(f"Cannot write {destination.name}: {exc}") from exc

        logger.debug("Encoded %s -> %s (quality=%d)", source, destination, quality)
