
from datetime import datetime, timezone
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from cityhall.middleware.access_log import access_log_middleware
from cityhall.config import Settings
from cityhall.db.session import Database, init_db
from cityhall.utils.log import configure_logging
from cityhall.auth.routes import router as auth_router
from cityhall.users.routes import router as users_router
from cityhall.documents.routes import router as documents_router
from cityhall.tasks.routes import router as tasks_router
from cityhall.announcements.routes import router as announcements_router
from cityhall.dashboard.routes import router as dashboard_router

def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or Settings()
    configure_logging(settings.log_level)

    app = FastAPI(title=settings.app_name)
    app.state.settings = settings
    app.state.database = Database(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.middleware("http")(access_log_middleware)

    app.include_router(auth_router)
    app.include_router(users_router)
    app.include_router(documents_router)
    app.include_router(tasks_router)
    app.include_router(announcements_router)
    app.include_router(dashboard_router)

    @app.on_event("startup")
    def on_startup():
        init_db(app.state.database)

    @app.on_event("shutdown")
    def on_shutdown():
        app.state.database.dispose()

    @app.get("/healthcheck", tags=["root"])
    def healthcheck():
        return {"status": "ok", "timestamp": datetime.now(timezone.utc).isoformat()}

    @app.get("/", tags=["root"])
    def root():
        return {"name": settings.app_name, "env": settings.app_env}

    return app

app = create_app()
