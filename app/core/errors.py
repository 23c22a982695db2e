# Application error types shared by the service layer and the migration helpers.
# Database and connectivity errors are not wrapped here; they reach callers as
# raised by SQLAlchemy, except during schema setup where ensure_extension turns
# them into MigrationError.


class AppError(Exception):
    """Base class for errors raised by this application"""


class CapabilityMissing(AppError):
    """
    A delegated call has no target on the related entity.

    Raised when a query is forwarded to a collaborator (e.g. the Post model's
    "open" filter) that does not define it. This is a configuration error and
    is kept distinct from an empty result.
    """

    def __init__(self, entity: str, capability: str):
        self.entity = entity
        self.capability = capability
        super().__init__(f"{entity} does not provide '{capability}'")


class MigrationError(AppError):
    """A schema migration statement failed or cannot be reversed"""
