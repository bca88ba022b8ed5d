"""
Example: Name an uploaded package for storage.

Usage:
    python examples/name_upload.py MyApp.ipa
"""

import sys

from appshelf import AppInfo, ParsedPackage, file_kind


def main(filename: str):
    # Stand-in for what an IPA/APK parser would report
    package = ParsedPackage(
        name="Example",
        version="1.2.0",
        identifier="com.example.app",
        build="42",
        channel="beta",
        icon=object(),
        size=12_345_678,
    )

    info = AppInfo.create(package, file_kind(filename))

    print(f"package -> {info.package_storage_name()}")
    print(f"icon    -> {info.icon_storage_name()}")


if __name__ == "__main__":
    main(sys.argv[1] if len(sys.argv) > 1 else "Example.ipa")
