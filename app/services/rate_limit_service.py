import redis
from redis.exceptions import RedisError

from app.utils.settings import REDIS_URL, AUTH_RATE_LIMIT, AUTH_RATE_WINDOW_SECONDS
from app.utils.logging import get_logger

logger = get_logger(__name__)


class RateLimiter:
    """
    -licznik w stalym oknie czasowym (INCR + EXPIRE gdy klucz nie ma TTL)
    -klucz per adres klienta
    -gdy redis nie dziala, request przechodzi (logujemy warning)
    """

    def __init__(
        self,
        client: redis.Redis | None = None,
        limit: int = AUTH_RATE_LIMIT,
        window: int = AUTH_RATE_WINDOW_SECONDS,
        prefix: str = "ratelimit:auth",
    ):
        self.redis = client or redis.Redis.from_url(REDIS_URL, decode_responses=True)
        self.limit = limit
        self.window = window
        self.prefix = prefix

    def hit(self, client_key: str) -> bool:
        key = f"{self.prefix}:{client_key}"
        try:
            pipe = self.redis.pipeline(transaction=True)
            pipe.incr(key)
            pipe.ttl(key)
            count, ttl = pipe.execute()
            # -1 = klucz bez TTL: pierwszy request okna albo wczesniejszy expire sie nie udal
            if ttl == -1:
                self.redis.expire(key, self.window)
        except RedisError as e:
            logger.warning(f"Rate limiter niedostepny ({key}): {e}")
            return True

        if count > self.limit:
            logger.info(f"Limit requestow przekroczony dla {client_key} ({count}/{self.limit})")
            return False
        return True
