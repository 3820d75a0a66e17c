import traceback
from fastapi import status
from fastapi.responses import JSONResponse
from ..helper.exceptions import AuthError, UserAlreadyExists, UserNotFound, InvalidPassword
from ..helper.utils import setup_logging, log_event, serialize_user, user_id

logger = setup_logging() # initialize logger

LOG_HEAD = "/api/backend/Auth"
SERVER_ERROR_MESSAGE = "Something Went wrong"


class AuthManager:
    def __init__(self, users, hasher, tokens):
        self.users = users
        self.hasher = hasher
        self.tokens = tokens

    def _issue(self, record: dict) -> JSONResponse:
        token = self.tokens.sign({"email": record["email"], "id": user_id(record)})
        return JSONResponse(
            status_code=status.HTTP_201_CREATED,
            content={"user": serialize_user(record), "token": token})

    async def _client_error(self, error: AuthError, email: str, action: str) -> JSONResponse:
        await log_event("warning", f"{action} rejected for {email}: {error.message}", LOG_HEAD)
        logger.warning(f"{action} rejected for {email}: {error.message}")
        return JSONResponse(status_code=error.status_code, content={"message": error.message})

    async def _server_error(self, action: str) -> JSONResponse:
        formatted_error = traceback.format_exc()
        await log_event("error", f"Error during {action}: {formatted_error}", LOG_HEAD)
        logger.error(f"Error during {action}: {formatted_error}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": SERVER_ERROR_MESSAGE})

    async def signup(self, email: str, password: str) -> JSONResponse:
        """Register a new account and issue its first token.

Steps performed:
- Looks up the email in the user store and rejects it if already registered.
- Hashes the password with bcrypt.
- Creates the user document with the email and the digest.
- Signs a token with the email and the new document id.
Args:
    email (str): Email address, the unique account key.
    password (str): Plain text password, never stored.
Returns:
    JSONResponse: 201 with the created user and token, 400 if the email is taken,
    500 with a generic message for any other failure."""
        try:
            existing_user = await self.users.find_by_email(email)
            if existing_user:
                raise UserAlreadyExists()

            hashed_password = await self.hasher.hash(password)
            new_user = await self.users.create(email, hashed_password)
            response = self._issue(new_user)

            await log_event("info", f"Account for user created successfully: {email}", LOG_HEAD)
            logger.info(f"Account for user created successfully: {email}")
            return response

        except AuthError as e:
            return await self._client_error(e, email, "signup")
        except Exception:
            return await self._server_error("signup")

    async def signin(self, email: str, password: str) -> JSONResponse:
        """Authenticate an existing account with email and password.

Args:
    email (str): Email address of the account.
    password (str): Plain text password to check against the stored digest.
Returns:
    JSONResponse: 201 with the user and a fresh token, 400 if the account does
    not exist or the password is wrong, 500 for any other failure."""
        try:
            existing_user = await self.users.find_by_email(email)
            if not existing_user:
                raise UserNotFound()

            matched = await self.hasher.verify(password, existing_user["password"])
            if not matched:
                raise InvalidPassword()

            response = self._issue(existing_user)

            await log_event("info", f"User signed in successfully: {email}", LOG_HEAD)
            logger.info(f"User signed in successfully: {email}")
            return response

        except AuthError as e:
            return await self._client_error(e, email, "signin")
        except Exception:
            return await self._server_error("signin")
