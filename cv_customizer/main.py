import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from slowapi import _rate_limit_exceeded_handler
import sentry_sdk
import uvicorn

from cv_customizer.api.v1.health import router as health_router
from cv_customizer.api.v1.customize import router as customize_router
from cv_customizer.api.v1.export import router as export_router
from cv_customizer.core.errors import register_exception_handlers
from cv_customizer.core.rate_limit import limiter
from cv_customizer.core.config import settings
from cv_customizer.core.lifespan import lifespan

logging.basicConfig(level=settings.log_level, format="%(message)s")
if settings.sentry_dsn:
    sentry_sdk.init(dsn=settings.sentry_dsn)

app = FastAPI(title="CV Customizer API", version="0.1.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=list(settings.cors_allowed_origins),
    allow_origin_regex=(settings.cors_allow_origin_regex or "").strip() or None,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["Content-Disposition"],
)
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
app.add_middleware(SlowAPIMiddleware)
register_exception_handlers(app)

app.include_router(health_router, prefix="/api", tags=["Health"])
app.include_router(customize_router, prefix="/api", tags=["Customize"])
app.include_router(export_router, prefix="/api", tags=["Export"])


def run() -> None:
    uvicorn.run(app, host=settings.backend_host, port=settings.backend_port)


if __name__ == "__main__":
    run()
