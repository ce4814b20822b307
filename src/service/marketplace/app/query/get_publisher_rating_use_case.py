from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.marketplace.app.interface.i_rating_repo import IRatingRepo
from src.service.marketplace.domain.value_object.publisher_score import PublisherScore


class GetPublisherRatingUseCase:
    def __init__(self, rating_repo: IRatingRepo) -> None:
        self.rating_repo = rating_repo

    @classmethod
    @inject
    def depends(
        cls,
        rating_repo: IRatingRepo = Depends(Provide[Container.rating_repo]),
    ) -> Self:
        return cls(rating_repo=rating_repo)

    @Logger.io
    async def average_rating(self, *, publisher_id: int) -> PublisherScore:
        """Mean of every rating the publisher has received, one decimal, plus the count"""
        ratings = await self.rating_repo.list_by_publisher(publisher_id=publisher_id)
        score = PublisherScore.from_ratings(
            publisher_id=publisher_id, ratings=(r.rating for r in ratings)
        )
        Logger.base.info(
            f'⭐ [RATING] Publisher {publisher_id}: {score.average} over {score.count} ratings'
        )
        return score
