from maritime_geo.core.constants import WGS_84_SRID
from maritime_geo.core.settings import settings
from shapely import wkt, Geometry
import logging
import os
import shapely

logger = logging.getLogger(__name__)


def wkt_to_engine(wkt_text: str | None, srid: int = WGS_84_SRID) -> Geometry | None:
    if wkt_text is None or wkt_text.strip() == '':
        return None
    return shapely.set_srid(wkt.loads(wkt_text), srid)


def read_wkt_folder(folder_path: str | None = None, geom_type: str | None = None, srid: int = WGS_84_SRID) -> list[Geometry]:
    folder_path = folder_path or settings.wkt_folder
    if folder_path is None:
        raise ValueError('No WKT folder given and MARITIME_GEO_WKT_FOLDER is not set')

    geometries = []
    for filename in sorted(os.listdir(folder_path)):
        if not filename.lower().endswith(".wkt"):
            logger.debug('Skipping %s', filename)
            continue

        file_path = os.path.join(folder_path, filename)
        with open(file_path, "r") as f:
            geom = wkt_to_engine(f.read(), srid)

        if geom is None:
            logger.warning('Skipping %s: empty file', filename)
        elif geom_type is not None and geom.geom_type != geom_type:
            logger.warning('Skipping %s: geometry is %s', filename, geom.geom_type)
        else:
            geometries.append(geom)

    logger.info('Found %d geometries in %s', len(geometries), folder_path)
    return geometries
