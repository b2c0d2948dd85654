"""Custom exceptions for service layer."""


class ServiceError(Exception):
    """Base exception for all service-related errors."""

    pass


class DockerServiceError(ServiceError):
    """Exception raised for Docker service operations."""

    pass


class DockerNotInstalledError(DockerServiceError):
    """Exception raised when the docker executable is not on PATH."""

    pass


class ContainerNotFoundError(DockerServiceError):
    """Exception raised when a Docker container is not found."""

    pass


class ContainerNotRunningError(DockerServiceError):
    """Exception raised when a Docker container exists but is stopped."""

    pass


class DownloadError(ServiceError):
    """Exception raised when a remote asset cannot be fetched."""

    pass


class HostPathError(ServiceError):
    """Exception raised for filesystem failures on the host."""

    pass


class HostFileNotFoundError(HostPathError):
    """Exception raised when a host file to push does not exist."""

    pass


class ValidationError(ServiceError):
    """Exception raised for invalid user input."""

    pass


class SelectionError(ValidationError):
    """Exception raised for a malformed log selection expression."""

    pass


class DisallowedFileError(ValidationError):
    """Exception raised when a file name is not on the module whitelist."""

    pass


class InvalidContainerNameError(ValidationError, ValueError):
    """Exception raised for a container name that cannot be used at launch.

    Also a ValueError so pydantic field validators report it as a field error.
    """

    pass
