"""Top-level package for dashgrid.

Provides subpackages:
- dashgrid.core – layout data models, schema validation and serialization
- dashgrid.engine – collision, bounds, compaction, move and coordinate mapping
- dashgrid.session – drag/resize lifecycle over a single authoritative layout
- dashgrid.common – shared defaults
"""

def _get_version() -> str:
    """Get version from pyproject.toml (dev) or importlib.metadata (installed)."""
    from pathlib import Path

    pyproject = Path(__file__).resolve().parent.parent.parent / "pyproject.toml"
    if pyproject.exists():
        for line in pyproject.read_text().splitlines():
            if line.strip().startswith("version"):
                # Parse: version = "0.3.0"
                return line.split("=")[1].strip().strip('"').strip("'")

    from importlib.metadata import PackageNotFoundError, version as pkg_version
    try:
        return pkg_version("dashgrid")
    except PackageNotFoundError:
        return "0.0.0"

__version__ = _get_version()
__all__: list[str] = ["__version__"]
