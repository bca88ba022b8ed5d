"""
appshelf - Identity and storage naming for uploaded app packages.

Classifies uploaded IPA/APK files, creates immutable AppInfo records for
them, computes the relative storage names of package binaries and icons,
and orders record collections for presentation.
"""

__version__ = "1.0.0"


def __getattr__(name: str):
    """Lazy import of the public model types."""
    if name in ("AppInfo", "AppKind", "file_kind", "sort_by_recency"):
        from appshelf.models import appinfo

        return getattr(appinfo, name)
    if name in ("Package", "ParsedPackage"):
        from appshelf.models import package

        return getattr(package, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = ["AppInfo", "AppKind", "Package", "ParsedPackage", "file_kind", "sort_by_recency", "__version__"]
