"""Unit tests for TenancyService."""

from unittest.mock import AsyncMock, create_autospec

import pytest

from shared_kernel.middleware.tenant_context import current_tenant_id
from tenancy.application.observability import TenancyServiceProbe
from tenancy.application.services import TenancyService
from tenancy.domain.aggregates import Tenant
from tenancy.domain.events import TenancyInitialized
from tenancy.domain.value_objects import TenancySource, TenantId
from tenancy.ports.exceptions import TenantCouldNotBeIdentifiedError
from tenancy.ports.repositories import ITenantRepository


@pytest.fixture
def tenant():
    """A tenant with one domain."""
    return Tenant(id=TenantId("42"), data={"slug": "acme"}, domains=("acme.test",))


@pytest.fixture
def mock_tenant_repository(tenant):
    """Create mock tenant repository returning the tenant."""
    repository = create_autospec(ITenantRepository, instance=True)
    repository.get_by_domain = AsyncMock(return_value=tenant)
    return repository


@pytest.fixture
def mock_probe():
    """Create mock tenancy service probe."""
    return create_autospec(TenancyServiceProbe, instance=True)


@pytest.fixture
def service(mock_tenant_repository, mock_probe):
    """Create TenancyService with mock dependencies."""
    return TenancyService(
        tenant_repository=mock_tenant_repository,
        central_domains=["localhost", "api.eadcontrol.com.br"],
        probe=mock_probe,
    )


class TestCentralDomains:
    """Tests for is_central_domain."""

    @pytest.mark.parametrize(
        "host", ["localhost", "localhost:8000", "API.eadcontrol.com.br"]
    )
    def test_central_hosts(self, service, host):
        """Central domains match regardless of port and case."""
        assert service.is_central_domain(host) is True

    def test_tenant_host_is_not_central(self, service):
        """Tenant domains are not central."""
        assert service.is_central_domain("acme.test") is False


class TestIdentify:
    """Tests for identify."""

    @pytest.mark.asyncio
    async def test_returns_owning_tenant(
        self, service, tenant, mock_tenant_repository, mock_probe
    ):
        """The domain is normalized before lookup."""
        result = await service.identify("ACME.test:443")

        assert result == tenant
        mock_tenant_repository.get_by_domain.assert_awaited_once_with("acme.test")
        mock_probe.tenant_identified.assert_called_once_with(
            tenant_id="42", domain="acme.test"
        )

    @pytest.mark.asyncio
    async def test_unknown_domain_raises(
        self, service, mock_tenant_repository, mock_probe
    ):
        """Unknown domains cannot be served."""
        mock_tenant_repository.get_by_domain.return_value = None

        with pytest.raises(TenantCouldNotBeIdentifiedError) as exc_info:
            await service.identify("unknown.test")

        assert exc_info.value.domain == "unknown.test"
        assert "unknown.test" in str(exc_info.value)
        mock_probe.tenant_not_identified.assert_called_once_with(domain="unknown.test")

    @pytest.mark.asyncio
    async def test_missing_host_raises_without_lookup(
        self, service, mock_tenant_repository
    ):
        """No host means no lookup."""
        with pytest.raises(TenantCouldNotBeIdentifiedError):
            await service.identify(None)

        mock_tenant_repository.get_by_domain.assert_not_awaited()


class _RecordingListener:
    def __init__(self):
        self.events: list[TenancyInitialized] = []
        self.tenant_seen: list[str | None] = []

    async def handle(self, event: TenancyInitialized) -> None:
        self.events.append(event)
        self.tenant_seen.append(current_tenant_id())


class _FailingListener:
    async def handle(self, event: TenancyInitialized) -> None:
        raise RuntimeError("listener broke")


class TestInitialized:
    """Tests for the tenancy lifecycle."""

    @pytest.mark.asyncio
    async def test_context_active_inside_block(self, service, tenant):
        """The tenant is current inside the block and restored after."""
        async with service.initialized(tenant, domain="acme.test") as context:
            assert context.tenant_id == "42"
            assert context.slug == "acme"
            assert current_tenant_id() == "42"

        assert current_tenant_id() is None

    @pytest.mark.asyncio
    async def test_listeners_see_active_tenant(
        self, mock_tenant_repository, mock_probe, tenant
    ):
        """Listeners run after activation with the event."""
        listener = _RecordingListener()
        service = TenancyService(
            tenant_repository=mock_tenant_repository,
            listeners=[listener],
            probe=mock_probe,
        )

        async with service.initialized(tenant, source=TenancySource.CONSOLE):
            pass

        assert listener.tenant_seen == ["42"]
        assert listener.events[0].tenant == tenant
        assert listener.events[0].source is TenancySource.CONSOLE
        mock_probe.tenancy_initialized.assert_called_once_with(
            tenant_id="42", slug="acme", source="console"
        )
        mock_probe.tenancy_ended.assert_called_once_with(
            tenant_id="42", source="console"
        )

    @pytest.mark.asyncio
    async def test_listener_failure_propagates_and_restores(
        self, mock_tenant_repository, mock_probe, tenant
    ):
        """A failing listener aborts the block and still restores context."""
        service = TenancyService(
            tenant_repository=mock_tenant_repository,
            listeners=[_FailingListener()],
            probe=mock_probe,
        )
        entered = False

        with pytest.raises(RuntimeError, match="listener broke"):
            async with service.initialized(tenant):
                entered = True

        assert entered is False
        assert current_tenant_id() is None
        mock_probe.tenancy_listener_failed.assert_called_once()

    @pytest.mark.asyncio
    async def test_block_failure_restores_context(self, service, tenant):
        """Errors raised inside the block do not leak the tenant."""
        with pytest.raises(ValueError):
            async with service.initialized(tenant):
                raise ValueError("boom")

        assert current_tenant_id() is None
