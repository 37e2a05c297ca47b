"""Schema management for the relational order store."""

import structlog
from protean.domain import Domain
from sqlalchemy import create_engine

logger = structlog.get_logger(__name__)

_RELATIONAL_PROVIDERS = ("sqlite", "postgresql")


def _relational_providers(domain: Domain):
    for name, provider in domain.providers.items():
        if provider.conn_info["provider"] in _RELATIONAL_PROVIDERS:
            yield name, provider


def _register_models(domain: Domain, provider_name: str) -> None:
    # Repositories build their SQLAlchemy model lazily; touching _dao forces it
    # onto the provider metadata so create_all/drop_all can see the table.
    records = list(domain.registry.aggregates.values()) + list(domain.registry.entities.values())
    for record in records:
        if record.cls.meta_.provider == provider_name:
            domain.repository_for(record.cls)._dao  # noqa: B018


def setup_db(domain: Domain) -> None:
    """Create the order and order item tables on every relational provider."""
    with domain.domain_context():
        for name, provider in _relational_providers(domain):
            _register_models(domain, name)
            engine = create_engine(provider.conn_info["database_uri"])
            provider._metadata.create_all(engine)
            logger.info("Order tables created", provider=name, tables=sorted(provider._metadata.tables))


def drop_db(domain: Domain) -> None:
    """Drop the order and order item tables on every relational provider."""
    with domain.domain_context():
        for name, provider in _relational_providers(domain):
            _register_models(domain, name)
            engine = create_engine(provider.conn_info["database_uri"])
            provider._metadata.drop_all(engine)
            logger.info("Order tables dropped", provider=name)
