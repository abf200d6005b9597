from datetime import datetime, timedelta
from typing import Optional
import logging
import warnings

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt
from passlib.context import CryptContext
from sqlalchemy.orm import Session

from sportcenter.config import Settings
from sportcenter.crud.user import get_user_by_email, get_user_by_id
from sportcenter.database import get_db
from sportcenter.errors import Forbidden, Unauthorized
from sportcenter.models.user import User, UserRole

# Suppress the bcrypt warning
warnings.filterwarnings("ignore", ".*bcrypt version.*")
warnings.filterwarnings("ignore", ".*trapped.*error reading bcrypt version.*")
warnings.filterwarnings("ignore", ".*AttributeError.*__about__.*")

logger = logging.getLogger(__name__)

ALGORITHM = "HS256"

pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=10,
)
bearer_scheme = HTTPBearer(auto_error=False)


def verify_password(plain_password, hashed_password):
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password):
    return pwd_context.hash(password)


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def create_access_token(user: User, settings: Settings) -> str:
    expire = datetime.utcnow() + timedelta(days=settings.access_token_expire_days)
    to_encode = {
        "sub": str(user.id),
        "email": user.email,
        "role": user.role,
        "exp": expire,
    }
    return jwt.encode(to_encode, settings.jwt_secret, algorithm=ALGORITHM)


def decode_access_token(token: str, settings: Settings) -> Optional[int]:
    """Return the user id carried by ``token``, or None if it is not valid."""
    try:
        payload = jwt.decode(token, settings.jwt_secret, algorithms=[ALGORITHM])
        return int(payload["sub"])
    except (JWTError, KeyError, TypeError, ValueError):
        return None


def authenticate_user(db: Session, email: str, password: str) -> User:
    user = get_user_by_email(db, email)
    if user is None or not verify_password(password, user.password_hash):
        logger.info(f"Failed login attempt for {email}")
        raise Unauthorized("Invalid email or password")

    if not user.is_active:
        logger.info(f"Login refused for deactivated account {user.id}")
        raise Unauthorized("Account is deactivated")

    return user


def get_current_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> User:
    if credentials is None or not credentials.credentials:
        raise Unauthorized("Access token required")

    user_id = decode_access_token(credentials.credentials, settings)
    if user_id is None:
        raise Unauthorized("Invalid or expired token")

    user = get_user_by_id(db, user_id)
    if user is None or not user.is_active:
        raise Unauthorized("Invalid or inactive user")

    request.state.user = user
    return user


def require_admin(current_user: User = Depends(get_current_user)) -> User:
    if not current_user.is_admin:
        raise Forbidden("Admin access required")
    return current_user


def require_member(current_user: User = Depends(get_current_user)) -> User:
    if current_user.role not in (UserRole.MEMBER.value, UserRole.ADMIN.value):
        raise Forbidden("Member access required")
    return current_user


def require_ownership_or_admin(param_name: str = "user_id"):
    """Allow admins, or the user the ``param_name`` path parameter refers to."""

    def dependency(
        request: Request, current_user: User = Depends(get_current_user)
    ) -> User:
        if current_user.is_admin:
            return current_user
        if str(request.path_params.get(param_name)) == str(current_user.id):
            return current_user
        raise Forbidden("Access denied")

    return dependency
