from datetime import datetime
from typing import Any, Optional

from pydantic import ConfigDict

from .base import BaseEntity


class Product(BaseEntity):
    """Catalog entry as stored.

    Only products created through the API are guaranteed a title and a
    positive numeric price; documents seeded by other means are served as
    they are, so no field is coerced on read.
    """

    title: Optional[str] = None
    price: Any = None
    created_at: Optional[datetime] = None

    model_config = ConfigDict(extra="allow")
