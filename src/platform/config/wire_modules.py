"""
Wire Modules Configuration

Defines the modules that need dependency injection wiring.
Shared between production and test environments.
"""

from types import ModuleType

from src.service.marketplace.app.command import (
    create_offer_use_case,
    create_reservation_use_case,
    create_user_use_case,
    delete_offer_use_case,
    submit_rating_use_case,
    update_offer_use_case,
    update_reservation_status_use_case,
    upsert_subscription_use_case,
)
from src.service.marketplace.app.query import (
    get_publisher_rating_use_case,
    get_subscription_use_case,
    list_offers_use_case,
    list_reservations_use_case,
)
from src.service.marketplace.driving_adapter.http_controller import user_controller
from src.service.marketplace.driving_adapter.http_controller.auth import role_auth


WIRE_MODULES: list[ModuleType] = [
    create_user_use_case,
    create_offer_use_case,
    update_offer_use_case,
    delete_offer_use_case,
    upsert_subscription_use_case,
    create_reservation_use_case,
    update_reservation_status_use_case,
    submit_rating_use_case,
    get_publisher_rating_use_case,
    get_subscription_use_case,
    list_offers_use_case,
    list_reservations_use_case,
    user_controller,
    role_auth,
]
