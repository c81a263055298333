"""Top-level package for the Bento Grid Toolkit.

Provides subpackages:
- bento_toolkit.core – content item models, schemas and serialization
- bento_toolkit.engine – weighting, strategy selection and grid placement
- bento_toolkit.debug – developer previews of computed layouts
- bento_toolkit.cli – command-line entry point
"""


def _get_version() -> str:
    """Get version from the installed distribution metadata."""
    from importlib.metadata import PackageNotFoundError, version as pkg_version

    try:
        return pkg_version("bento-grid-toolkit")
    except PackageNotFoundError:
        return "0.0.0"


__version__ = _get_version()
__all__: list[str] = ["__version__"]
