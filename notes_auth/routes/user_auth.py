from functools import lru_cache
from fastapi import APIRouter, Depends, status
from ..config.database import get_user_collection
from ..config.settings import get_settings
from ..helper.auth_token import TokenIssuer
from ..helper.hashing import Hash
from ..models import models
from ..service.user_store import UserStore
from ..src.auth_manager import AuthManager

auth_user_router = APIRouter(tags=["user Authentication"], prefix="/user") # create a router for user


def get_user_store() -> UserStore:
    return UserStore(get_user_collection())


@lru_cache()
def get_hasher() -> Hash:
    return Hash(rounds=get_settings().BCRYPT_ROUNDS)


@lru_cache()
def get_token_issuer() -> TokenIssuer:
    settings = get_settings()
    return TokenIssuer(
        secret_key=settings.SECRET_KEY,
        algorithm=settings.ALGORITHM,
        expire_minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)


def get_auth_manager(
    users: UserStore = Depends(get_user_store),
    hasher: Hash = Depends(get_hasher),
    tokens: TokenIssuer = Depends(get_token_issuer),
) -> AuthManager:
    return AuthManager(users, hasher, tokens)


@auth_user_router.post("/signup", status_code=status.HTTP_201_CREATED, response_model=models.auth_response,
                       responses={400: {"model": models.res}, 500: {"model": models.res}})
async def user_signup(data: models.signup, auth_manager: AuthManager = Depends(get_auth_manager)):
    return await auth_manager.signup(data.email, data.password)

# signin keeps 201 on success for compatibility with existing clients
@auth_user_router.post("/signin", status_code=status.HTTP_201_CREATED, response_model=models.auth_response,
                       responses={400: {"model": models.res}, 500: {"model": models.res}})
async def user_signin(data: models.signin, auth_manager: AuthManager = Depends(get_auth_manager)):
    return await auth_manager.signin(data.email, data.password)
