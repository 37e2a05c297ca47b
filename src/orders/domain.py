"""Orders bounded context: purchase order lifecycle.

Creates orders from line items priced by the remote product catalog, persists
each order together with its items as one aggregate, and serves single and
paginated reads plus status changes.
"""

import structlog
from protean.domain import Domain

orders = Domain(name="orders")

logger = structlog.get_logger(__name__)
