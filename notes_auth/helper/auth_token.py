from datetime import datetime, timedelta, timezone
from typing import Optional
from jose import jwt


class TokenIssuer:
    def __init__(self, secret_key: str, algorithm: str = "HS256", expire_minutes: Optional[int] = None):
        if not secret_key:
            raise RuntimeError("SECRET_KEY is not configured")
        self.secret_key = secret_key
        self.algorithm = algorithm
        self.expire_minutes = expire_minutes

    def sign(self, claims: dict) -> str:
        to_encode = claims.copy()
        if self.expire_minutes:
            expire = datetime.now(timezone.utc) + timedelta(minutes=self.expire_minutes)
            to_encode.update({"exp": expire})
        encoded_jwt = jwt.encode(to_encode, self.secret_key, algorithm=self.algorithm)
        return encoded_jwt
