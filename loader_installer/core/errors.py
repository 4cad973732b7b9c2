class InstallerError(Exception):
    pass


class NoDirectory(InstallerError):
    def __init__(self, path=None):
        self.path = path
        if path is None:
            super().__init__("Default game directory not found")
        else:
            super().__init__(f"Game directory not found: {path}")


class NoVersionAvailable(InstallerError):
    def __init__(self, loader: str):
        self.loader = loader
        super().__init__(f"No suitable {loader} loader version available")


class MetadataError(InstallerError):
    def __init__(self, message, url: str):
        super().__init__(message)
        self.url = url


class NetworkError(MetadataError):
    def __init__(self, url: str, reason: str):
        super().__init__(f"Request to {url} failed: {reason}", url)
        self.reason = reason


class RemoteError(MetadataError):
    def __init__(self, url: str, status: int):
        super().__init__(f"Request to {url} returned HTTP {status}", url)
        self.status = status


class DecodeError(MetadataError):
    def __init__(self, url: str, reason: str):
        super().__init__(f"Unexpected response from {url}: {reason}", url)
        self.reason = reason


class RegistryError(InstallerError):
    def __init__(self, message, path):
        super().__init__(message)
        self.path = path


class RegistryMissing(RegistryError):
    def __init__(self, path, reason=None):
        message = f"Launcher profiles not found at {path}"
        if reason:
            message += f" ({reason})"
        super().__init__(message, path)


class RegistryCorrupt(RegistryError):
    def __init__(self, path, reason: str):
        super().__init__(f"Launcher profiles at {path} are invalid: {reason}", path)
        self.reason = reason
