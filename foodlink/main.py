from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.exc import SQLAlchemyError

from foodlink.core.config import settings
from foodlink.core.logging import configure_logging, request_id_middleware, log_event
from foodlink.core.errors import (
	AppError, app_error_handler, validation_exception_handler, unhandled_exception_handler,
)
from foodlink.db.session import engine
from foodlink.db.base import Base
from foodlink.db import models  # noqa: F401  (registers tables on Base.metadata)

from foodlink.routers.auth import router as auth_router
from foodlink.routers.donations import router as donations_router
from foodlink.routers.stats import router as stats_router
from foodlink.routers.users import router as users_router


def init_db(bind=engine) -> None:
	try:
		Base.metadata.create_all(bind=bind)
	except SQLAlchemyError as exc:
		log_event("database_unavailable", url=bind.url.render_as_string(hide_password=True), error=str(exc))
		raise SystemExit(1)

def create_app() -> FastAPI:
	configure_logging()
	app = FastAPI(title=settings.APP_NAME)

	# DB init
	init_db()

	# Middleware
	app.middleware("http")(request_id_middleware)
	app.add_middleware(
		CORSMiddleware,
		allow_origins=[settings.FRONTEND_URL],
		allow_credentials=True,
		allow_methods=["*"],
		allow_headers=["*"],
	)

	# Errors (consistent format)
	app.add_exception_handler(AppError, app_error_handler)
	app.add_exception_handler(RequestValidationError, validation_exception_handler)
	app.add_exception_handler(Exception, unhandled_exception_handler)

	# Routers
	app.include_router(auth_router)
	app.include_router(donations_router)
	app.include_router(stats_router)
	app.include_router(users_router)

	@app.get("/")
	def root():
		return {"message": "FoodLink Backend is running!"}

	@app.get("/health")
	def health():
		return {"status": "OK"}

	return app

app = create_app()


def run() -> None:
	import uvicorn
	uvicorn.run("foodlink.main:app", host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
	run()
