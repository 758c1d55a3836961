# Brandmark export pipeline

from .sinks import (
    Download,
    DownloadSink,
    DirectorySink,
    MemorySink,
)

from .pipeline import (
    EXPORT_FORMATS,
    PNG_MEDIA_TYPE,
    SVG_MEDIA_TYPE,
    TransientBlob,
    cairo_rasterizer,
    export,
    export_filename,
    export_png,
    export_variant,
    raster_filename,
    slugify,
    viewbox_size,
)

__all__ = [
    'Download',
    'DownloadSink',
    'DirectorySink',
    'MemorySink',
    'EXPORT_FORMATS',
    'PNG_MEDIA_TYPE',
    'SVG_MEDIA_TYPE',
    'TransientBlob',
    'cairo_rasterizer',
    'export',
    'export_filename',
    'export_png',
    'export_variant',
    'raster_filename',
    'slugify',
    'viewbox_size',
]
