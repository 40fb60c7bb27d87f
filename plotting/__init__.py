from .raster import (
    RasterConfig,
    DEFAULT_RASTER_CONFIG,
    PixelBuffer,
    rasterize,
)
from .renderer import (
    render_to_axes,
    render_to_file,
    render_gallery,
)
