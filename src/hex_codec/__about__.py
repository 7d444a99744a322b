# hex_codec/__about__.py

APP_NAME        = "Hex Codec"
APP_TITLE       = "Bytes ⇆ Hex Codec and Hex Dump"   # long name for --help
DIST_NAME       = "hex-codec"
AUTHOR          = "Wired Square"
COPYRIGHT_YEAR  = "2025"
COPYRIGHT       = f"© {COPYRIGHT_YEAR} {AUTHOR}"
HOMEPAGE        = "https://github.com/Wired-Square/hex-codec"


__version__ = "1.0.0"

__all__ = [
    "__version__",
    "APP_NAME", "APP_TITLE", "DIST_NAME",
    "AUTHOR", "COPYRIGHT_YEAR", "COPYRIGHT", "HOMEPAGE",
    "about_text",
]

def about_text() -> str:
    return (
        f"{APP_TITLE}\n"
        f"Version {__version__}\n"
        f"{COPYRIGHT}\n"
        f"{HOMEPAGE}"
    )
