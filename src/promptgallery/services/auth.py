"""Admin authentication: credential checks and stateless bearer tokens."""

import logging
from datetime import timedelta

from ..core.config import GalleryConfig
from ..core.errors import InvalidCredentials, InvalidToken, Unauthenticated
from ..core.models import AdminIdentity, Token
from ..core.prompts_db import PromptsDB
from ..core.security import (
    create_access_token,
    decode_access_token,
    hash_password,
    verify_password,
)
from ..core.validation import validate_login_fields

logger = logging.getLogger(__name__)

# Verified when the username is unknown so that both failure paths pay for
# one hash verification.
DUMMY_HASH = hash_password("dummy-password-for-unknown-users")


class AuthService:
    """Validate admin credentials and issue/verify signed tokens.

    The service keeps no session state: a token is valid for as long as its
    signature checks out and its ``exp`` claim lies in the future.
    """

    def __init__(self, db: PromptsDB, config: GalleryConfig):
        self.db = db
        self.config = config

    def ensure_seed_admin(self) -> bool:
        """Create the configured seed admin if it does not exist yet.

        Returns:
            True if the admin was created by this call
        """
        created = self.db.ensure_admin(
            self.config.admin_username,
            hash_password(self.config.admin_password),
        )
        if created:
            logger.info(f"Created seed admin user '{self.config.admin_username}'")
        else:
            logger.debug(f"Seed admin '{self.config.admin_username}' already exists")
        return created

    def login(self, username: str, password: str) -> Token:
        """Exchange admin credentials for a bearer token.

        Raises:
            ValidationError: If username or password is empty
            InvalidCredentials: If the username is unknown or the password is wrong
        """
        username = validate_login_fields(username, password)

        admin = self.db.get_admin_by_username(username)
        if admin is None:
            verify_password(password, DUMMY_HASH)
            logger.warning(f"Failed login for unknown admin '{username}'")
            raise InvalidCredentials()

        if not verify_password(password, admin.password_hash):
            logger.warning(f"Failed login for admin '{username}': wrong password")
            raise InvalidCredentials()

        token = create_access_token(
            {"id": admin.id, "username": admin.username},
            secret=self.config.jwt_secret,
            algorithm=self.config.jwt_algorithm,
            expires_delta=timedelta(hours=self.config.token_expire_hours),
        )
        logger.info(f"Admin '{admin.username}' logged in")
        return Token(token=token, username=admin.username)

    def verify(self, token: str | None) -> AdminIdentity:
        """Verify a bearer token and return the identity it carries.

        Raises:
            Unauthenticated: If no token was supplied
            InvalidToken: If the token is tampered with, malformed, or expired
        """
        if not token:
            raise Unauthenticated()

        claims = decode_access_token(
            token,
            secret=self.config.jwt_secret,
            algorithm=self.config.jwt_algorithm,
        )

        admin_id = claims.get("id")
        username = claims.get("username")
        if not isinstance(admin_id, int) or not isinstance(username, str):
            raise InvalidToken()

        return AdminIdentity(id=admin_id, username=username)
