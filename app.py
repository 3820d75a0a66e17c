from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from scalar_fastapi import get_scalar_api_reference
from notes_auth.config.settings import get_settings
from notes_auth.helper.utils import setup_logging
from notes_auth.routes.user_auth import auth_user_router, get_token_issuer, get_user_store

logger = setup_logging() # initialize logger
settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    get_token_issuer() # fail at startup when SECRET_KEY is missing
    if settings.MONGO_CREATE_INDEXES:
        await get_user_store().ensure_indexes() # unique email index backs the signup uniqueness check
        logger.info("User email index ensured")
    yield


app = FastAPI(title="Notes API Auth", lifespan=lifespan)
app.include_router(auth_user_router)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/", include_in_schema=False)
def health_check():
    return {"status": "healthy"}


@app.get("/scalar", include_in_schema=False)
def get_scalar_docs():
    return get_scalar_api_reference(
        openapi_url=app.openapi_url,
        title="Scalar API"
    )
