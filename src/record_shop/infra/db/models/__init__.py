from record_shop.infra.db.models.base import Base
from record_shop.infra.db.models.order import OrderRow
from record_shop.infra.db.models.record import RecordRow

__all__ = ["Base", "OrderRow", "RecordRow"]
