import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List

from tqdm import tqdm

from .exceptions import ImageMetadataError
from .metadata.extract import MetadataExtractor
from .metadata.merge import merge
from .scanning.filesystem import read_file_attributes
from .sidecar import sidecar_path, write_metadata


@dataclass
class FileFailure:
    path: Path
    error: ImageMetadataError


class MetadataPipeline:
    def __init__(self):
        self.extractor = MetadataExtractor()

    def process_file(self, path) -> Path:
        """
        Extracts metadata for one image and writes the JSON sidecar.
        1. Read filesystem attributes
        2. Decode EXIF & normalize
        3. Merge
        4. Write

        Any failure aborts the remaining steps, so nothing is written unless
        steps 1-3 succeed. Returns the sidecar path.
        """
        path = Path(path)

        file_attrs = read_file_attributes(path)
        logging.debug(f"{path}: attributes read ({file_attrs.size} bytes)")

        camera_meta = self.extractor.get_image_metadata(path)
        logging.debug(f"{path}: EXIF normalized")

        record = merge(file_attrs, camera_meta)

        out_path = sidecar_path(path)
        write_metadata(out_path, record)
        logging.debug(f"Wrote metadata for {path} -> {out_path}")
        return out_path

    def process_all(self,
                    paths: Iterable,
                    keep_going: bool = False,
                    show_progress: bool = True) -> List[FileFailure]:
        """
        Runs process_file over each path, strictly in order.

        By default the run stops at the first failure and the remaining paths
        are left untouched. With keep_going, every path is attempted and all
        failures are returned.
        """
        failures: List[FileFailure] = []
        paths = list(paths)

        # disable=None turns the bar off when stderr is not a terminal
        for path in tqdm(paths, desc="Extracting", unit="file", disable=None if show_progress else True):
            try:
                self.process_file(path)
            except ImageMetadataError as e:
                logging.debug(f"Failed on {path}: {e!r}")
                failures.append(FileFailure(Path(path), e))
                if not keep_going:
                    break

        return failures


def process_file(path) -> Path:
    """Convenience wrapper for a one-off file."""
    return MetadataPipeline().process_file(path)
