from constants import MAX_VERSION, MIN_VERSION


class VersionOutOfRangeError(ValueError):
    version_number: int

    def __init__(self, version_number: int):
        self.version_number = version_number
        super().__init__(f"{version_number} is an invalid version number. Expected an integer {MIN_VERSION}-{MAX_VERSION}")


class MalformedTableError(Exception):
    pass
