from importlib import resources

PACKAGE_NAME = "pybreachvip"


def _read_version():
    version_file = resources.files(PACKAGE_NAME).joinpath("VERSION")
    return version_file.read_text(encoding="utf-8").strip()


__version__ = _read_version()
USER_AGENT = f"{PACKAGE_NAME}/{__version__}"
