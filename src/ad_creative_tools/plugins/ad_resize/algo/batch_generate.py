"""Fan-out of one source image into many ad formats."""

from collections.abc import Iterable

from loguru import logger

from ....common.config import AdResizeConfig
from ....common.errors import MissingSourceError, NoFormatsSelectedError
from ....common.format_catalog import FormatCatalog, default_catalog
from ....common.schemas import ResizedAsset, SourceImage
from ....utils.profiling import timed
from .composite_resize import composite_resize


@timed
def generate(
    source: SourceImage | None,
    selected_format_ids: Iterable[str],
    *,
    catalog: FormatCatalog | None = None,
    config: AdResizeConfig | None = None,
) -> list[ResizedAsset]:
    """
    Render ``source`` into every selected ad format.

    Formats are processed sequentially in catalog order, not selection
    order. Ids missing from the catalog are skipped. Any failure aborts the
    whole batch and nothing is returned.

    Args:
        source: Decoded source image
        selected_format_ids: Ids of the formats to render
        catalog: Format catalog (defaults to the built-in formats)
        config: Rendering options (defaults to white background, bilinear)

    Returns:
        A new list with one ResizedAsset per resolved format

    Raises:
        MissingSourceError: If ``source`` is None
        NoFormatsSelectedError: If the selection is empty
        InvalidDimensionsError: If any single render fails on dimensions
    """
    if source is None:
        raise MissingSourceError()

    selected = set(selected_format_ids)
    if not selected:
        raise NoFormatsSelectedError()

    catalog = catalog if catalog is not None else default_catalog()
    config = config if config is not None else AdResizeConfig()

    formats = catalog.resolve(selected)
    if len(formats) < len(selected):
        logger.debug(f"Ignoring {len(selected) - len(formats)} unknown format id(s)")

    assets: list[ResizedAsset] = []
    for ad_format in formats:
        encoded = composite_resize(
            source,
            ad_format.width,
            ad_format.height,
            background=config.background_rgba,
            resample=config.resampling,
        )
        assets.append(ResizedAsset(format=ad_format, encoded_image=encoded))

    return assets


class BatchGenerator:
    """Binds a catalog and rendering options; keeps no per-call state.

    Example:
        generator = BatchGenerator()
        assets = generator.generate(source, {"fb-ig-square", "ig-story"})
    """

    def __init__(
        self,
        catalog: FormatCatalog | None = None,
        config: AdResizeConfig | None = None,
    ):
        self.catalog: FormatCatalog = catalog if catalog is not None else default_catalog()
        self.config: AdResizeConfig = config if config is not None else AdResizeConfig()

    def generate(
        self,
        source: SourceImage | None,
        selected_format_ids: Iterable[str],
    ) -> list[ResizedAsset]:
        return generate(source, selected_format_ids, catalog=self.catalog, config=self.config)
