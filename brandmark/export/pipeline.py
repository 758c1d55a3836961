"""
pipeline.py — Export a rendered logo as a downloadable SVG or PNG file.

Export is fire-and-forget: every function here returns None, and a failure
(bad markup or a missing raster backend, say) is logged and results in
nothing being delivered. The markup is staged in a temporary
file for the duration of an export and that file is always removed,
whichever way the export ends.

Usage:
    from brandmark.export import export_variant, export_png, MemorySink

    sink = MemorySink()
    export_variant(svg, "Nova Tech", "emblem", sink=sink)
    sink.last.filename   # "nova-tech-logo-emblem.svg"
"""

import io
import logging
import os
import re
import tempfile
from pathlib import Path
from typing import Callable, Optional, Tuple, Union
from xml.etree import ElementTree as ET

from PIL import Image

from ..config import get_settings
from ..engine.data_models import StyleType
from ..templates.common import CANVAS_HEIGHT, CANVAS_WIDTH
from .sinks import DirectorySink, DownloadSink

logger = logging.getLogger(__name__)


# =============================================================================
# CONSTANTS
# =============================================================================

SVG_MEDIA_TYPE = "image/svg+xml"
PNG_MEDIA_TYPE = "image/png"
SLUG_FALLBACK = "brand"
_FILENAME_ILLEGAL = re.compile(r"[\x00-\x08\x0e-\x1f\x7f\ud800-\udfff]")

EXPORT_FORMATS = ("svg", "png")

# (staged svg path, output width, output height) -> encoded bitmap bytes
Rasterizer = Callable[[Path, int, int], bytes]


# =============================================================================
# FILENAMES
# =============================================================================

def slugify(brand_name: Optional[str]) -> str:
    """
    Lower-case the name and turn each run of whitespace into a hyphen.

    Path separators also become hyphens and characters that cannot appear
    in a filename (control characters, lone surrogates) are dropped. Other
    punctuation is kept: "Nova Tech!" -> "nova-tech!", "AC/DC" -> "ac-dc".
    """
    name = _FILENAME_ILLEGAL.sub("", brand_name or "")
    slug = re.sub(r"[\s/\\]+", "-", name.strip().lower())
    return slug or SLUG_FALLBACK


def _style_id(style_type: Union[StyleType, str, None]) -> str:
    if isinstance(style_type, StyleType):
        return style_type.value
    return (style_type or "").strip()


def export_filename(
    brand_name: Optional[str],
    style_type: Union[StyleType, str, None] = None,
    ext: str = "svg",
) -> str:
    """<slug>-logo[-<style>].<ext>"""
    style = _style_id(style_type)
    suffix = f"-{style}" if style else ""
    return f"{slugify(brand_name)}-logo{suffix}.{ext}"


def raster_filename(brand_name: Optional[str], style_type: Union[StyleType, str, None]) -> str:
    """<slug>-<style>.png"""
    return f"{slugify(brand_name)}-{_style_id(style_type) or 'logo'}.png"


# =============================================================================
# TRANSIENT STAGING
# =============================================================================

class TransientBlob:
    """
    Bytes staged in a temporary file for one export step.

    The file exists between __enter__ and release(); release() runs on
    context exit, removes the file once and is a no-op afterwards.
    """

    def __init__(self, data: bytes, suffix: str = ""):
        self.data = data
        self.suffix = suffix
        self.path: Optional[Path] = None
        self.releases = 0

    def __enter__(self) -> "TransientBlob":
        fd, name = tempfile.mkstemp(prefix="brandmark-", suffix=self.suffix)
        self.path = Path(name)
        try:
            with os.fdopen(fd, "wb") as f:
                f.write(self.data)
        except OSError:
            self.release()
            raise
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.release()
        return False

    def release(self) -> None:
        """Remove the staged file."""
        if self.path is None:
            return
        path, self.path = self.path, None
        path.unlink(missing_ok=True)
        self.releases += 1
        logger.debug(f"Released staged file {path.name}")


def _deliver(sink: DownloadSink, filename: str, data: bytes, media_type: str, suffix: str) -> bool:
    """Stage data and hand it to the sink. Returns False if delivery failed."""
    try:
        with TransientBlob(data, suffix=suffix) as blob:
            sink.deliver(filename, blob.path, media_type)
    except (OSError, ValueError) as e:
        logger.error(f"Could not deliver {filename}: {e}")
        return False

    logger.info(f"Exported {filename} ({len(data)} bytes)")
    return True


def default_sink() -> DownloadSink:
    """Sink writing into the configured export directory."""
    return DirectorySink(get_settings().export_path)


# =============================================================================
# VECTOR EXPORT
# =============================================================================

def export_variant(
    markup: str,
    brand_name: Optional[str],
    style_type: Union[StyleType, str, None] = None,
    sink: Optional[DownloadSink] = None,
) -> None:
    """
    Deliver a variant's markup as an SVG file.

    Args:
        markup: SVG markup produced by a template
        brand_name: Brand name, used for the filename
        style_type: Optional style id appended to the filename
        sink: Destination (defaults to the export directory)
    """
    sink = sink or default_sink()
    filename = export_filename(brand_name, style_type, "svg")
    try:
        data = markup.encode("utf-8")
    except UnicodeEncodeError as e:
        logger.error(f"SVG export of {filename} failed: {e}")
        return
    _deliver(sink, filename, data, SVG_MEDIA_TYPE, ".svg")


# =============================================================================
# RASTER EXPORT
# =============================================================================

def cairo_rasterizer(source: Path, width: int, height: int) -> bytes:
    """Rasterize an SVG file with CairoSVG."""
    # cairosvg needs the native cairo library at import time.
    import cairosvg

    return cairosvg.svg2png(url=str(source), output_width=width, output_height=height)


def viewbox_size(markup: str) -> Tuple[float, float]:
    """
    Width and height declared by the markup's viewBox.

    Raises:
        ET.ParseError: If the markup is not well-formed
    """
    root = ET.fromstring(markup)
    parts = (root.get("viewBox") or "").replace(",", " ").split()
    if len(parts) == 4:
        try:
            width, height = float(parts[2]), float(parts[3])
        except ValueError:
            width = height = 0
        if width > 0 and height > 0:
            return width, height
    return float(CANVAS_WIDTH), float(CANVAS_HEIGHT)


def draw_to_canvas(decoded: bytes, width: int, height: int) -> bytes:
    """Draw a decoded bitmap onto a transparent canvas and encode it as PNG."""
    with Image.open(io.BytesIO(decoded)) as image:
        layer = image.convert("RGBA")

    if layer.size != (width, height):
        layer = layer.resize((width, height))

    canvas = Image.new("RGBA", (width, height), (0, 0, 0, 0))
    canvas.alpha_composite(layer)

    buffer = io.BytesIO()
    canvas.save(buffer, format="PNG")
    return buffer.getvalue()


def export_png(
    markup: str,
    brand_name: Optional[str],
    style_type: Union[StyleType, str, None] = None,
    sink: Optional[DownloadSink] = None,
    rasterizer: Optional[Rasterizer] = None,
    scale: Optional[float] = None,
) -> None:
    """
    Rasterize a variant and deliver it as a PNG file.

    The canvas is sized from the markup's viewBox times scale. If the markup
    cannot be decoded or the raster backend is unavailable the error is
    logged and nothing is delivered.

    Args:
        markup: SVG markup produced by a template
        brand_name: Brand name, used for the filename
        style_type: Style id used in the filename
        sink: Destination (defaults to the export directory)
        rasterizer: SVG-to-bitmap backend (defaults to CairoSVG)
        scale: Output scale factor (defaults to RASTER_SCALE)
    """
    sink = sink or default_sink()
    rasterizer = rasterizer or cairo_rasterizer
    filename = raster_filename(brand_name, style_type)
    if scale is None:
        scale = get_settings().raster_scale
    if scale <= 0:
        logger.error(f"PNG export of {filename} failed: scale must be positive, got {scale}")
        return

    try:
        with TransientBlob(markup.encode("utf-8"), suffix=".svg") as blob:
            width, height = viewbox_size(markup)
            out_width = max(1, round(width * scale))
            out_height = max(1, round(height * scale))
            decoded = rasterizer(blob.path, out_width, out_height)
            png = draw_to_canvas(decoded, out_width, out_height)
    except Exception as e:
        logger.error(f"PNG export of {filename} failed: {e}")
        return

    _deliver(sink, filename, png, PNG_MEDIA_TYPE, ".png")


# =============================================================================
# DISPATCH
# =============================================================================

def export(
    markup: str,
    brand_name: Optional[str],
    style_type: Union[StyleType, str, None] = None,
    fmt: str = "svg",
    sink: Optional[DownloadSink] = None,
) -> None:
    """
    Export in the requested format.

    Raises:
        ValueError: If fmt is not "svg" or "png"
    """
    if fmt == "svg":
        export_variant(markup, brand_name, style_type, sink=sink)
    elif fmt == "png":
        export_png(markup, brand_name, style_type, sink=sink)
    else:
        raise ValueError(f"Unsupported export format '{fmt}'. Expected one of: {', '.join(EXPORT_FORMATS)}")
