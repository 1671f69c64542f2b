from slowapi import Limiter
from slowapi.util import get_remote_address

from people_api.core.config import get_settings

# No auth in this API, so every limit is keyed on the client address.
limiter = Limiter(key_func=get_remote_address, enabled=get_settings().rate_limit_enabled)
