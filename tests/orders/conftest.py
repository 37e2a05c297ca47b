import pytest
from orders.catalog import reset_catalog, set_catalog
from orders.catalog.fake_adapter import FakeCatalog
from orders.catalog.port import ProductRecord
from protean.integrations.pytest import DomainFixture


@pytest.fixture(scope="session")
def orders_bed():
    from orders.domain import orders

    bed = DomainFixture(orders)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(orders_bed):
    with orders_bed.domain_context():
        yield

        from protean import current_domain

        for _, provider in current_domain.providers.items():
            provider._data_reset()


@pytest.fixture(autouse=True)
def catalog():
    """A fake catalog seeded with three products, installed for every test."""
    fake = FakeCatalog(
        [
            ProductRecord(id="prod-001", price=10.0, name="Widget"),
            ProductRecord(id="prod-002", price=25.5, name="Gadget"),
            ProductRecord(id="prod-003", price=4.25, name="Gizmo"),
        ]
    )
    set_catalog(fake)
    yield fake
    reset_catalog()
