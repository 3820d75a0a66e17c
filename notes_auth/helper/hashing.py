import bcrypt
from fastapi.concurrency import run_in_threadpool

# bcrypt only reads the first 72 bytes of a password
BCRYPT_MAX_BYTES = 72


def _password_bytes(password: str) -> bytes:
    if isinstance(password, str):
        password = password.encode('utf-8')
    return password[:BCRYPT_MAX_BYTES]


class Hash():
    def __init__(self, rounds: int = 10):
        self.rounds = rounds

    def bcrypt(self, password: str) -> str:
        salt = bcrypt.gensalt(rounds=self.rounds)
        hashed_password = bcrypt.hashpw(_password_bytes(password), salt)
        return hashed_password.decode('utf-8')

    def check(self, plain_password: str, hashed_password: str) -> bool:
        if not hashed_password or plain_password is None:
            return False

        if isinstance(hashed_password, str):
            hashed_password = hashed_password.encode('utf-8')

        return bcrypt.checkpw(_password_bytes(plain_password), hashed_password)

    async def hash(self, password: str) -> str:
        """Hash a password off the event loop; bcrypt is CPU bound."""
        return await run_in_threadpool(self.bcrypt, password)

    async def verify(self, plain_password: str, hashed_password: str) -> bool:
        """
        Check a plain password against a stored bcrypt digest.

        Returns False when either side is missing. A malformed digest raises
        ValueError so the caller can treat it as a server fault rather than a
        bad password.
        """
        return await run_in_threadpool(self.check, plain_password, hashed_password)
