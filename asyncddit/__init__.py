from .reddit import Reddit
from .client import HTTPClient, Rate, Response
from .services import LinkService, WikiService
from .exceptions import (
    APIError,
    RateLimited,
    HTTPException,
    InvalidArgument,
    RedditException,
    UnsupportedTokenType,
)
from .models import (
    Post,
    User,
    WikiPage,
    Submitted,
    WikiPageSettings,
    WikiPermissionLevel,
)
from .options import (
    ListOptions,
    SubmitURLOptions,
    SubmitSelfOptions,
    WikiPageSettingsUpdateRequest,
)
