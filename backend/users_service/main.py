# users_service/main.py
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from users_service.config import settings
from users_service.core.bootstrap import ensure_default_admin, ensure_roles
from users_service.core.db import close_db, init_db
from users_service.core.errors import register_exception_handlers
from users_service.core.security import TokenIssuer, TokenValidator
from users_service.api.v1.routers import auth, users

logger = logging.getLogger("uvicorn.error")


@asynccontextmanager
async def lifespan(app: FastAPI):
    # SQLite databases get their tables created on the fly; managed databases are migrated separately
    await init_db(generate_schemas=settings.database_url.startswith("sqlite"))
    await ensure_roles()
    # Ensure there's a default admin account on first run
    await ensure_default_admin()
    logger.info("[startup] %s ready (env=%s)", settings.APP_NAME, settings.env)
    yield
    await close_db()


app = FastAPI(title=settings.APP_NAME, lifespan=lifespan)

# Signing configuration is read once and injected into the token components
jwt_config = settings.jwt
app.state.token_issuer = TokenIssuer(jwt_config)
app.state.token_validator = TokenValidator(jwt_config)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# REST
app.include_router(auth.router, prefix="/api")
app.include_router(users.router, prefix="/api")


@app.get("/healthz")
def healthz():
    return {"ok": True}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("users_service.main:app", host=settings.host, port=settings.port)
