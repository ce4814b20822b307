from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel


class SubscriptionRequest(BaseModel):
    town: str
    categories: List[str]

    class Config:
        json_schema_extra = {
            'example': {'town': 'Alcoy', 'categories': ['OUTLET_ZAPATOS', 'OUTLET_ROPA']}
        }


class SubscriptionResponse(BaseModel):
    user_id: int
    town: str
    categories: List[str]
    updated_at: Optional[datetime] = None
