"""
https://python-dependency-injector.ets-labs.org/index.html
https://python-dependency-injector.ets-labs.org/examples/fastapi-sqlalchemy.html
"""

from dependency_injector import containers, providers

from src.platform.config.core_setting import Settings, settings
from src.platform.database.orm_db_setting import Database
from src.service.marketplace.app.command.notify_owner_use_case import NotifyOwnerUseCase
from src.service.marketplace.driven_adapter.email.mock_email_sender import MockEmailSender
from src.service.marketplace.driven_adapter.email.resend_email_sender import ResendEmailSender
from src.service.marketplace.driven_adapter.repo.offer_command_repo_impl import (
    OfferCommandRepoImpl,
)
from src.service.marketplace.driven_adapter.repo.offer_query_repo_impl import OfferQueryRepoImpl
from src.service.marketplace.driven_adapter.repo.rating_repo_impl import RatingRepoImpl
from src.service.marketplace.driven_adapter.repo.reservation_command_repo_impl import (
    ReservationCommandRepoImpl,
)
from src.service.marketplace.driven_adapter.repo.reservation_query_repo_impl import (
    ReservationQueryRepoImpl,
)
from src.service.marketplace.driven_adapter.repo.subscription_repo_impl import (
    SubscriptionRepoImpl,
)
from src.service.marketplace.driven_adapter.repo.user_command_repo_impl import UserCommandRepoImpl
from src.service.marketplace.driven_adapter.repo.user_query_repo_impl import UserQueryRepoImpl
from src.service.marketplace.driven_adapter.security.bcrypt_password_hasher import (
    BcryptPasswordHasher,
)
from src.service.marketplace.driving_adapter.http_controller.auth.jwt_auth import JwtAuth


class Container(containers.DeclarativeContainer):
    # Configuration
    config_service = providers.Singleton(Settings)

    # Database (one session per repository call); listings may be served by a replica
    database = providers.Singleton(Database, read_only=False)
    read_database = providers.Singleton(Database, read_only=True)

    # Security
    password_hasher = providers.Singleton(BcryptPasswordHasher)
    jwt_auth = providers.Singleton(JwtAuth)

    # Repositories (stateless - use session_factory per-request)
    user_command_repo = providers.Singleton(
        UserCommandRepoImpl, session_factory=database.provided.session
    )
    user_query_repo = providers.Singleton(
        UserQueryRepoImpl,
        session_factory=database.provided.session,
        password_hasher=password_hasher,
    )
    offer_command_repo = providers.Singleton(
        OfferCommandRepoImpl, session_factory=database.provided.session
    )
    # Ownership and existence checks on write paths must see the latest commit
    offer_query_repo = providers.Singleton(
        OfferQueryRepoImpl, session_factory=database.provided.session
    )
    offer_listing_repo = providers.Singleton(
        OfferQueryRepoImpl, session_factory=read_database.provided.session
    )
    reservation_command_repo = providers.Singleton(
        ReservationCommandRepoImpl, session_factory=database.provided.session
    )
    reservation_query_repo = providers.Singleton(
        ReservationQueryRepoImpl, session_factory=read_database.provided.session
    )
    rating_repo = providers.Singleton(RatingRepoImpl, session_factory=database.provided.session)
    subscription_repo = providers.Singleton(
        SubscriptionRepoImpl, session_factory=database.provided.session
    )

    # Outbound email, chosen by EMAIL_BACKEND
    email_sender = providers.Selector(
        providers.Callable(lambda: settings.EMAIL_BACKEND),
        resend=providers.Singleton(ResendEmailSender),
        mock=providers.Singleton(MockEmailSender),
    )

    # Notification dispatcher (shared by every reservation request)
    notify_owner_use_case = providers.Singleton(
        NotifyOwnerUseCase,
        email_sender=email_sender,
        currency_suffix=config_service.provided.CURRENCY_SUFFIX,
    )


container = Container()
