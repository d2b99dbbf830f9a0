# users_service/core/bootstrap.py
"""
Bootstrap module for application initialization.
Seeds the fixed role rows and creates a default admin on first startup.
"""
import datetime as dt
import logging

from users_service.config import settings
from users_service.core.security import hash_password
from users_service.models import ROLE_IDS, Role, RoleType, User

logger = logging.getLogger("uvicorn.error")


async def ensure_roles() -> None:
    """
    Make sure the three role rows exist with their fixed ids.
    Safe to run on every startup.
    """
    for role_type, role_id in ROLE_IDS.items():
        _, created = await Role.get_or_create(id=role_id, defaults={"name": role_type})
        if created:
            logger.info("[bootstrap] Seeded role %s (id=%s)", role_type.value, role_id)


async def ensure_default_admin() -> None:
    """
    If no admin exists in the database, create one based on settings.
    Only takes effect under the following conditions:
      - Currently no user with the Admin role
      - And ADMIN_PASSWORD is set (to avoid using a default weak password)
    Roles must already be seeded.
    """
    has_admin = await User.filter(role__name=RoleType.Admin).exists()
    if has_admin:
        return  # Skip creation if admin already exists

    if not settings.admin_password:
        logger.warning("[bootstrap] No admin present, but ADMIN_PASSWORD not set -> skip creating default admin.")
        return

    if await User.filter(email=settings.admin_email).exists():
        logger.warning("[bootstrap] ADMIN_EMAIL %s already belongs to a non-admin user -> skip.", settings.admin_email)
        return

    admin_role = await Role.get(id=ROLE_IDS[RoleType.Admin])
    u = await User.create(
        first_name="Admin",
        last_name="Admin",
        email=settings.admin_email,
        password_hash=hash_password(settings.admin_password),
        date_of_birth=dt.date(1970, 1, 1),
        created_at=dt.datetime.now(dt.timezone.utc),
        role=admin_role,
    )
    logger.warning("[bootstrap] Created default admin -> email=%s id=%s", u.email, u.id)
