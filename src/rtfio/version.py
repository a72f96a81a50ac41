from importlib.metadata import PackageNotFoundError, version

try:
    version = version("RtfIO")
except PackageNotFoundError:
    version = "0.0.0"
