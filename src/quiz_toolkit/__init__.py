"""Top-level package for the timed quiz runner.

Provides subpackages:
- quiz_toolkit.core – question models, outcomes and bank schema
- quiz_toolkit.loading – CSV/JSON question bank loading
- quiz_toolkit.session – answer reader, countdowns, proctor and coordinator
- quiz_toolkit.output – score report, results table and PDF results sheet
- quiz_toolkit.cli – command line entry point
"""

def _get_version() -> str:
    """Get version from importlib.metadata (installed) or pyproject.toml (dev)."""
    from importlib.metadata import PackageNotFoundError, version as pkg_version
    from pathlib import Path

    try:
        return pkg_version("quiz-toolkit")
    except PackageNotFoundError:
        pass

    pyproject = Path(__file__).resolve().parent.parent.parent / "pyproject.toml"
    if pyproject.exists():
        for line in pyproject.read_text(encoding="utf-8").splitlines():
            if line.strip().startswith("version"):
                # Parse: version = "0.3.0"
                return line.split("=")[1].strip().strip('"').strip("'")
    return "0.0.0"

__version__ = _get_version()
__all__: list[str] = ["__version__"]
