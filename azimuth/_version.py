"""
Exposes the version of azimuth
"""
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
from typing import Optional

_DIST_NAME = 'azimuth-geodesy'


def _read_version_file() -> Optional[str]:
    """Version from the repo-root VERSION file, for source trees without installed metadata"""
    version_file = Path(__file__).resolve().parents[1] / 'VERSION'
    if not version_file.is_file():
        return None

    return version_file.read_text(encoding='utf-8').strip()


try:
    __version__ = version(_DIST_NAME)
except PackageNotFoundError:
    __version__ = _read_version_file()

__all__ = ['__version__']
