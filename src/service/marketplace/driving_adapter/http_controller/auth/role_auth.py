from typing import Optional

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from opentelemetry import trace

from src.platform.config.di import Container
from src.platform.exception.exceptions import AuthenticationError, ForbiddenError
from src.service.marketplace.domain.entity.user_entity import UserEntity, UserRole
from src.service.marketplace.driving_adapter.http_controller.auth.jwt_auth import JwtAuth


# auto_error=False so a missing header surfaces as our own 401 payload
bearer_scheme = HTTPBearer(auto_error=False)


class RoleAuthStrategy:
    @staticmethod
    def is_publisher(user: UserEntity) -> bool:
        return user.role == UserRole.PUBLISHER

    @staticmethod
    def is_subscriber(user: UserEntity) -> bool:
        return user.role == UserRole.SUBSCRIBER


@inject
async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    jwt_auth: JwtAuth = Depends(Provide[Container.jwt_auth]),
) -> UserEntity:
    if credentials is None or credentials.scheme.lower() != 'bearer':
        raise AuthenticationError('Not authenticated')
    return jwt_auth.get_current_user_info_from_jwt(credentials.credentials)


async def require_publisher(current_user: UserEntity = Depends(get_current_user)) -> UserEntity:
    tracer = trace.get_tracer(__name__)
    with tracer.start_as_current_span(
        'auth.require_publisher',
        attributes={'user.id': current_user.id or 0, 'user.role': current_user.role.value},
    ):
        if not RoleAuthStrategy.is_publisher(current_user):
            raise ForbiddenError('Only publishers can perform this action')
        return current_user


async def require_subscriber(current_user: UserEntity = Depends(get_current_user)) -> UserEntity:
    if not RoleAuthStrategy.is_subscriber(current_user):
        raise ForbiddenError('Only subscribers can perform this action')
    return current_user
