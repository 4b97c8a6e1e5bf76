class DomainException(Exception):
    """Base class for every error raised by cowry."""

    pass
