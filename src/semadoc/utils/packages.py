#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/semadoc/utils/packages.py
"""Installed-distribution lookups used by ``requires_dependencies``."""

from __future__ import annotations

from importlib import metadata
from typing import Optional, Tuple

from packaging import version
from packaging.specifiers import InvalidSpecifier, SpecifierSet


def get_package_version(package_name: str) -> Optional[str]:
    """Return the installed version of distribution ``package_name``, or None."""
    try:
        return metadata.version(package_name)
    except metadata.PackageNotFoundError:
        return None


def check_version_requirement(package_name: str, version_spec: str) -> Tuple[bool, Optional[str]]:
    """Compare an installed distribution against a version specifier.

    Parameters
    ----------
    package_name : str
        Distribution name on the index (``"Pygments"``, ``"beautifulsoup4"``)
    version_spec : str
        PEP 440 specifier such as ``">=2.17"``

    Returns
    -------
    tuple of (bool, str or None)
        Whether the requirement holds, and the installed version. A missing
        distribution gives ``(False, None)``; an unparseable specifier is
        treated as satisfied.

    """
    installed = get_package_version(package_name)
    if installed is None:
        return False, None

    try:
        specifier = SpecifierSet(version_spec)
    except InvalidSpecifier:
        return True, installed

    return specifier.contains(version.parse(installed), prereleases=True), installed


__all__ = ["check_version_requirement", "get_package_version"]
