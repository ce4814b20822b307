from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, Optional

import attrs


@attrs.frozen
class PublisherScore:
    publisher_id: int
    average: Optional[float]
    count: int

    @classmethod
    def from_ratings(cls, *, publisher_id: int, ratings: Iterable[int]) -> 'PublisherScore':
        """Unweighted mean of every rating, rounded half-up to one decimal."""
        scores = list(ratings)
        if not scores:
            return cls(publisher_id=publisher_id, average=None, count=0)
        mean = Decimal(sum(scores)) / Decimal(len(scores))
        average = float(mean.quantize(Decimal('0.1'), rounding=ROUND_HALF_UP))
        return cls(publisher_id=publisher_id, average=average, count=len(scores))
