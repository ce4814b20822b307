"""
User API Schemas - Pydantic models for request/response
"""

from pydantic import BaseModel, EmailStr, Field, SecretStr

from src.service.marketplace.domain.entity.user_entity import UserRole


class CreateUserRequest(BaseModel):
    """Create user request schema"""

    email: EmailStr
    password: SecretStr = Field(
        ...,
        min_length=6,
        max_length=72,
        description='Password must be 6-72 characters (bcrypt limit)',
    )
    name: str = Field(..., max_length=100)
    town: str = Field(..., max_length=100)
    role: UserRole = UserRole.SUBSCRIBER

    class Config:
        json_schema_extra = {
            'example': {
                'email': 'tienda@example.com',
                'password': 'P@ssw0rd',
                'name': 'Zapatería Lola',
                'town': 'Alcoy',
                'role': 'publisher',
            }
        }


class LoginRequest(BaseModel):
    """User login request schema"""

    email: EmailStr
    password: SecretStr = Field(
        ..., min_length=1, max_length=72, description='User password (max 72 chars)'
    )

    class Config:
        json_schema_extra = {'example': {'email': 'tienda@example.com', 'password': 'P@ssw0rd'}}


class UserResponse(BaseModel):
    """User response schema"""

    id: int
    email: str
    name: str
    town: str
    role: UserRole
    is_active: bool

    class Config:
        from_attributes = True
        json_schema_extra = {
            'example': {
                'id': 1,
                'email': 'tienda@example.com',
                'name': 'Zapatería Lola',
                'town': 'Alcoy',
                'role': 'publisher',
                'is_active': True,
            }
        }


class LoginResponse(BaseModel):
    access_token: str
    token_type: str = 'bearer'
    user: UserResponse
