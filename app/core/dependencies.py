"""
Core dependencies for route protection and user resolution
"""

from fastapi import Depends, Security
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from app.core.exceptions import Unauthenticated
from app.database.supabase_client import get_supabase
from app.modules.auth.schemas import VerifiedIdentity
from app.modules.auth.service import AuthService
from app.modules.users.schemas import UserRecord
from app.modules.users.service import UserService
from supabase import Client
from typing import Optional

# auto_error=False: a missing header must be a 401 {"error": "Unauthorized"}, not FastAPI's 403
security = HTTPBearer(auto_error=False)


def get_auth_service(supabase: Client = Depends(get_supabase)) -> AuthService:
    return AuthService(supabase)


def get_user_service(supabase: Client = Depends(get_supabase)) -> UserService:
    return UserService(supabase)


def get_current_identity(
    credentials: Optional[HTTPAuthorizationCredentials] = Security(security),
    auth_service: AuthService = Depends(get_auth_service)
) -> VerifiedIdentity:
    """Verify the bearer token and return the Supabase identity behind it"""
    if credentials is None or credentials.scheme.lower() != "bearer":
        raise Unauthenticated()
    return auth_service.get_current_user(credentials.credentials)


def get_current_user(
    identity: VerifiedIdentity = Depends(get_current_identity),
    user_service: UserService = Depends(get_user_service)
) -> UserRecord:
    """Resolve (lazily provisioning) the application user for the caller"""
    return user_service.ensure_user(identity)
