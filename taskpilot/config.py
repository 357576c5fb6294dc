
from config import settings

SECRET = settings.secret


class Config:
    access_token_lifetime = 60 * 60 * 24 * 7
    algorithm = "HS256"
    token_user_claim = "userId"
