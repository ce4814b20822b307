from src.service.marketplace.domain.value_object.owner_contact import OwnerContact
from src.service.marketplace.domain.value_object.publisher_score import PublisherScore


__all__ = ['OwnerContact', 'PublisherScore']
