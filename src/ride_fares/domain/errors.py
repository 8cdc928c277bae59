# domain/errors.py


class InvalidArgument(ValueError):
    """Raised when a ride is constructed from out-of-range inputs."""
