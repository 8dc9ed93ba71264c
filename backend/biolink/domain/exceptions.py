# biolink/domain/exceptions.py


class DomainError(Exception):
    """Base class for business errors rendered as JSON by the API."""

    status_code = 400

    def to_dict(self):
        return {
            "error": type(self).__name__,
            "message": str(self),
        }


class InvariantViolation(DomainError):
    status_code = 400


class InvalidTitleError(InvariantViolation):
    pass


class InvalidLinkError(InvariantViolation):
    pass


class SlugConflictError(DomainError):
    """Raised when a page with the derived slug already exists."""

    status_code = 409

    def __init__(self, slug: str):
        self.slug = slug
        super().__init__(
            f'A page with the name "{slug}" already exists. '
            "Please choose a different title."
        )

    def to_dict(self):
        data = super().to_dict()
        data["slug"] = self.slug
        return data


class PageNotFound(DomainError):
    status_code = 404


class LinkNotFound(DomainError):
    status_code = 404


class NotPageOwner(DomainError):
    status_code = 403
