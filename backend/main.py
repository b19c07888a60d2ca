# backend/main.py
import logging

from dotenv import load_dotenv
from fastapi import Depends, FastAPI

load_dotenv()

from config import settings
from database import init_db
from utils.csrf import verify_csrf
from utils.errors import EntityNotFoundError, entity_not_found_handler, unhandled_exception_handler
from utils.request_logging import log_controller_calls

# Import routerów
from routes.auth import router as auth_router
from routes.admin import router as admin_router
from routes.user_info import router as user_info_router
from routes.games import router as games_router
from routes.groceries import router as groceries_router
from routes.hotels import router as hotels_router
from routes.restaurants import router as restaurants_router
from routes.songs import router as songs_router
from routes.ucsb_dates import router as ucsb_dates_router
from routes.ucsb_dining_commons import router as ucsb_dining_commons_router
from routes.frontend import router as frontend_router

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

# Inicjalizacja
init_db()

app = FastAPI(
    title="Campus CRUD API",
    version="1.0.0",
    description="CRUD endpoints over campus entities with OAuth2 login",
    dependencies=[Depends(verify_csrf)],
)

app.middleware("http")(log_controller_calls)

app.add_exception_handler(EntityNotFoundError, entity_not_found_handler)
app.add_exception_handler(Exception, unhandled_exception_handler)

# Rejestracja routerów
app.include_router(auth_router)
app.include_router(admin_router)
app.include_router(user_info_router)
app.include_router(games_router)
app.include_router(groceries_router)
app.include_router(hotels_router)
app.include_router(restaurants_router)
app.include_router(songs_router)
app.include_router(ucsb_dates_router)
app.include_router(ucsb_dining_commons_router)

# Frontend catch-all must stay last
app.include_router(frontend_router)
