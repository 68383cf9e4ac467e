"""Domain exceptions for the Tenancy bounded context."""


class TenantCouldNotBeIdentifiedError(Exception):
    """Raised when no tenant owns the domain a request arrived on.

    Central domains never raise this; they are served without tenant context.
    """

    def __init__(self, domain: str | None):
        super().__init__(f"Tenant could not be identified on domain {domain}")
        self.domain = domain
