"""FastAPI application entry point."""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from product_api.api.errors import register_error_handlers
from product_api.api.products import router as products_router
from product_api.config import get_settings
from product_api.database import engine, Base
from product_api.models import Product  # noqa: F401 - Import to register models

settings = get_settings()

# Configure logging
handlers = [logging.StreamHandler()]
if settings.log_file:
    handlers.append(logging.FileHandler(settings.log_file))

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=handlers,
)

# Set specific log levels for noisy libraries
logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create database tables on startup."""
    Base.metadata.create_all(bind=engine)
    logger.info(f"Database ready ({settings.app_env})")
    yield


app = FastAPI(
    title="Tutorial, documentando API",
    description="Este API expone endpoints para administrar productos",
    version="1.0",
    terms_of_service="https://www.magadiflo.com/terms",
    contact={
        "name": "Martín",
        "url": "http://www.magadiflo.com",
        "email": "magadiflo@gmail.com",
    },
    license_info={
        "name": "Licencia MIT",
        "url": "https://choosealicense.com/licenses/mit/",
    },
    servers=[
        {
            "url": settings.openapi_dev_url,
            "description": "URL de servidor en entorno de desarrollo",
        },
        {
            "url": settings.openapi_prod_url,
            "description": "URL de servidor en entorno de producción",
        },
    ],
    openapi_tags=[
        {"name": "reading", "description": "Consulta de productos"},
        {"name": "modification", "description": "Alta, cambio y baja de productos"},
    ],
    lifespan=lifespan,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # In production, specify exact origins
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)

app.include_router(products_router)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}
